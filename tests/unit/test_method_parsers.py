#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
方法专用解析器 单元测试
"""

from divination.models.result import ResultSection
from divination.parsers.method_parsers import (
    OVERLONG_SECTION, AstrologySectionParser, TarotSectionParser, ZhouYiSectionParser, subdivide,
)


class TestZhouYiSectionParser:
    """周易解析器测试类"""

    def setup_method(self):
        self.parser = ZhouYiSectionParser()

    def test_keyword_lines_without_brackets(self):
        """测试：没有【】时按已知标题行分段"""
        # Given
        text = "卦象：乾为天\n天行健\n卦辞：元亨利贞\n建议：守正待时"

        # When
        sections = self.parser.parse(text)

        # Then
        assert [(s.title, s.content) for s in sections] == [
            ("卦象", "乾为天\n天行健"),
            ("卦辞", "元亨利贞"),
            ("建议", "守正待时"),
        ]

    def test_markdown_heading_brackets(self):
        sections = self.parser.parse("## 【卦象解析】\n内容一\n**【运势分析】**\n内容二")
        assert [s.title for s in sections] == ["卦象解析", "运势分析"]

    def test_unmarked_text_uses_generic_parser(self):
        sections = self.parser.parse("只有一句话。")
        assert len(sections) == 1
        assert sections[0].content == "只有一句话。"

    def test_blank_returns_empty(self):
        assert self.parser.parse("  ") == []


class TestTarotSectionParser:
    """塔罗解析器测试类"""

    def test_overlong_section_subdivided(self):
        """测试：超长章节按内部冒号标题拆分，标题为 父·子"""
        # Given
        body = "\n".join(f"{pos}：{'好' * 300}" for pos in ("过去", "现在", "未来"))
        text = f"【牌面解读】\n{body}\n【建议】\n保持开放"

        # When
        sections = TarotSectionParser().parse(text)

        # Then
        assert [s.title for s in sections] == [
            "牌面解读·过去", "牌面解读·现在", "牌面解读·未来", "建议",
        ]

    def test_preamble_kept(self):
        sections = TarotSectionParser().parse("您抽到了三张牌。\n牌阵解读：整体向好")
        assert [s.title for s in sections] == ["总论", "牌阵解读"]

    def test_position_named_like_title_stays_in_bracket_section(self):
        """测试：有【】标题时，"建议：…" 牌位行不算新章节"""
        # Given
        text = "【牌面解读】\n现状：愚者（正位）\n建议：星星（逆位）\n结果：世界（正位）\n【建议】\n保持开放"

        # When
        sections = TarotSectionParser().parse(text)

        # Then
        assert [s.title for s in sections] == ["牌面解读", "建议"]
        assert sections[0].content.count("\n") == 2

    def test_bracket_title_kept_verbatim(self):
        sections = TarotSectionParser().parse("【1. 过去】\n愚者\n[**未来**]\n世界")
        assert [s.title for s in sections] == ["1. 过去", "未来"]


class TestAstrologySectionParser:
    """占星解析器测试类"""

    def test_chart_lines_stay_in_chart_section(self):
        # Given
        text = "【星盘描述】\n太阳位于白羊座15度\n月亮位于金牛座3度\n\n太阳和月亮形成六分相(60度)\n【建议】\n多休息"

        # When
        sections = AstrologySectionParser().parse(text)

        # Then
        assert sections[0].title == "星盘描述"
        assert "太阳和月亮形成六分相(60度)" in sections[0].content
        assert sections[1].title == "建议"


class TestSubdivide:
    """超长章节拆分测试类"""

    def test_short_sections_untouched(self):
        sections = [ResultSection(title="总论", content="短内容")]
        assert subdivide(sections) == sections

    def test_long_section_without_structure_split_by_length(self):
        section = ResultSection(title="总论", content="啊" * (OVERLONG_SECTION + 1))
        result = subdivide([section])
        assert [s.title for s in result] == ["总论·概述", "总论·详细解读"]
        assert "".join(s.content for s in result) == section.content
