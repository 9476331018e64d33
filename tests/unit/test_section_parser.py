#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
通用分段解析器 单元测试

测试范围：
- 【标题】策略
- 冒号标题策略
- 空行分段策略
- 整段兜底
- 非空输入永不返回空列表
"""

import random

import pytest

from divination.models.result import ResultSection
from divination.parsers.section_parser import (
    DEFAULT_TITLE, PREAMBLE_TITLE, SectionParser, colon_title, parse_brackets,
    parse_sections, render_sections_text, split_long_text,
)


def as_pairs(sections):
    return [(s.title, s.content) for s in sections]


class TestBracketStrategy:
    """【标题】策略测试类"""

    def test_two_bracket_sections(self):
        """测试：两个【】标题"""
        # Given
        text = "【总论】A\n\n【事业】B"

        # When
        sections = parse_sections(text)

        # Then
        assert as_pairs(sections) == [("总论", "A"), ("事业", "B")]

    def test_preamble_becomes_overview(self):
        sections = parse_sections("先说几句开场白。\n【事业】稳步上升")
        assert as_pairs(sections) == [(PREAMBLE_TITLE, "先说几句开场白。"), ("事业", "稳步上升")]

    def test_empty_bracket_section_dropped(self):
        sections = parse_sections("【总论】A\n【空白】\n   \n【事业】B")
        assert [s.title for s in sections] == ["总论", "事业"]

    def test_square_brackets(self):
        sections = parse_sections("[性格] 外向\n[财运] 平稳")
        assert as_pairs(sections) == [("性格", "外向"), ("财运", "平稳")]

    def test_numeric_and_link_brackets_are_not_titles(self):
        """测试：[1] 编号和 Markdown 链接不算标题"""
        # When
        sections = parse_brackets("参考[1]以及[链接](http://example.com)")

        # Then
        assert sections == []

    def test_square_bracket_title_cleaned(self):
        sections = parse_sections("[**事业运势**] 很好")
        assert sections[0].title == "事业运势"

    def test_full_width_bracket_title_kept_verbatim(self):
        sections = parse_sections("【 **事业运势** 】很好")
        assert sections[0].title == "**事业运势**"


class TestColonStrategy:
    """冒号标题策略测试类"""

    def test_colon_titles(self):
        # Given
        text = "性格：外向开朗\n善于交际\n事业：稳步上升"

        # When
        sections = parse_sections(text)

        # Then
        assert as_pairs(sections) == [("性格", "外向开朗\n善于交际"), ("事业", "稳步上升")]

    @pytest.mark.parametrize("line", [
        "https://example.com/path",
        "这是一个很长的句子，里面有逗号：后面还有内容",
        "2024：数字不算标题",
    ])
    def test_colon_title_rejects(self, line):
        assert colon_title(line) is None

    def test_list_marker_stripped(self):
        assert colon_title("1. 健康：注意休息") == ("健康", "注意休息")


class TestParagraphStrategy:
    """空行分段策略测试类"""

    def test_paragraphs_named_by_position(self):
        # Given
        text = "第一段内容比较长，没有标题。\n\n第二段也是普通内容。\n\n第三段是结尾。"

        # When
        sections = parse_sections(text)

        # Then
        assert [s.title for s in sections] == ["概述", "详细解读", "建议"]

    def test_short_first_line_used_as_title(self):
        sections = parse_sections("运势概览\n今年整体不错。\n\n注意事项\n少熬夜。")
        assert as_pairs(sections) == [("运势概览", "今年整体不错。"), ("注意事项", "少熬夜。")]

    def test_long_single_paragraph_split(self):
        """测试：超长单段按句子切成多块"""
        # Given
        text = "今天运势不错，适合出门办事。" * 60

        # When
        sections = parse_sections(text)

        # Then
        assert 2 <= len(sections) <= 3
        assert "".join(s.content for s in sections) == text

    def test_split_without_sentence_boundaries(self):
        chunks = split_long_text("啊" * 1500)
        assert len(chunks) == 3
        assert "".join(chunks) == "啊" * 1500


class TestDegenerateStrategy:
    """整段兜底测试类"""

    def test_single_paragraph_without_markers(self):
        """测试：无任何标记的单段文字整体作为一个章节"""
        # Given
        text = "Just one paragraph, no markers."

        # When
        sections = parse_sections(text)

        # Then
        assert len(sections) == 1
        assert sections[0].content == text
        assert sections[0].title == DEFAULT_TITLE

    def test_short_first_line_as_title(self):
        sections = parse_sections("吉")
        assert as_pairs(sections) == [("吉", "吉")]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", None])
    def test_blank_input_returns_empty(self, text):
        assert parse_sections(text) == []


class TestNeverEmpty:
    """非空输入永不返回空列表"""

    @pytest.mark.parametrize("text", [
        "啊" * 10000,
        "【】【】【",
        "【标题】",
        "：：：：",
        "[1][2][3]",
        "\n\n\n x \n\n\n",
        "a" * 5000 + "\n\n" + "b" * 5000,
        "标题：\n\n\n",
        "**",
    ])
    def test_pathological_inputs(self, text):
        # When
        sections = SectionParser().parse(text)

        # Then
        assert len(sections) >= 1
        assert all(s.is_valid for s in sections)

    def test_strategy_error_degrades_to_whole_text(self):
        """测试：策略内部异常时整段作为一个章节"""
        # Given
        def broken(text):
            raise RuntimeError("boom")

        parser = SectionParser()
        parser.strategies = [("broken", broken)]

        # When
        sections = parser.parse("任何内容")

        # Then
        assert as_pairs(sections) == [("任何内容", "任何内容")]


class TestRoundTrip:
    """渲染后再解析得到相同章节"""

    def test_render_then_parse(self):
        # Given
        sections = [
            ResultSection(title="总论", content="整体平稳。"),
            ResultSection(title="事业", content="第一行\n第二行"),
            ResultSection(title="建议", content="1. 早睡\n2. 多运动"),
        ]

        # When
        parsed = parse_sections(render_sections_text(sections))

        # Then
        assert as_pairs(parsed) == as_pairs(sections)

    @pytest.mark.parametrize("title", [
        "1. 事业",
        "一、总论",
        "**重点**",
        "- 列表",
        "# Heading",
        "这是一个超过三十个字符的很长很长的标题用来检查解析器不会截断它的完整内容",
    ])
    def test_titles_survive_round_trip(self, title):
        """测试：编号、加粗、列表符号和超长标题原样还原"""
        # Given
        sections = [
            ResultSection(title=title, content="正文内容"),
            ResultSection(title="尾", content="Z"),
        ]

        # When
        parsed = parse_sections(render_sections_text(sections))

        # Then
        assert as_pairs(parsed) == as_pairs(sections)


class TestRandomInput:
    """随机文本测试"""

    ALPHABET = "【】[]:：\n \t*#-1.、一总论事业吉凶abc，。"

    def test_random_text_always_yields_valid_sections(self):
        # Given
        rng = random.Random(20240315)
        parser = SectionParser()

        for _ in range(300):
            length = rng.randint(1, 400)
            text = "".join(rng.choice(self.ALPHABET) for _ in range(length))

            # When
            sections = parser.parse(text)

            # Then
            if text.strip():
                assert sections, repr(text)
                assert all(s.is_valid for s in sections)
            else:
                assert sections == []

    def test_random_long_text(self):
        rng = random.Random(7)
        text = "".join(rng.choice(self.ALPHABET) for _ in range(10000))
        sections = SectionParser().parse(text)
        assert sections
        assert all(s.is_valid for s in sections)
