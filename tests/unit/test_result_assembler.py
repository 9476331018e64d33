#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
结果组装器 单元测试

测试范围：
- 外部内容可用时以外部内容为准
- 失败 / 空内容时本地模拟并加【提示】
- 传统类方法加【签诗】
- 生成器与解析器都出错时仍返回非空结果
"""

import pytest

from divination.core.exceptions import ErrorKind
from divination.data.tarot_deck import SPREADS
from divination.generators.base import ContentGenerator
from divination.models.method import DivinationMethod, MethodFamily
from divination.models.outcome import Failed, Ok
from divination.services.method_registry import MethodRegistry, MethodSpec
from divination.services.result_assembler import DISCLAIMER_TITLE, assemble, simulate

POEM = "签诗"


class BrokenGenerator(ContentGenerator):
    method_id = "broken"

    def _render(self, seq, inputs):
        raise RuntimeError("boom")


class BrokenParser:
    def parse(self, text):
        raise RuntimeError("parser boom")


def broken_spec(family=MethodFamily.WESTERN) -> MethodSpec:
    method = DivinationMethod(id="broken", name="测试方法", family=family)
    return MethodSpec(method=method, generator=BrokenGenerator(), parser=BrokenParser())


class TestAssembleExternal:
    """外部内容路径"""

    def setup_method(self):
        self.registry = MethodRegistry()

    def test_ok_text_used_for_western_method(self, ok_outcome):
        """测试：西方方法直接使用外部内容，无提示无签诗"""
        # Given
        spec = self.registry.get("tarot")

        # When
        result = assemble(spec, {"question": "工作"}, ok_outcome)

        # Then
        assert [s.title for s in result.sections] == ["总论", "事业", "建议"]
        assert result.method_id == "tarot"
        assert result.inputs == {"question": "工作"}

    def test_traditional_method_gets_poem_first(self, ok_outcome):
        # Given
        spec = self.registry.get("bazi")

        # When
        result = assemble(spec, {"birthDate": "1990-05-17"}, ok_outcome)

        # Then
        assert result.sections[0].title == POEM
        assert [s.title for s in result.sections[1:]] == ["总论", "事业", "建议"]

    def test_external_poem_used_when_ok(self, ok_outcome):
        spec = self.registry.get("zhouyi")
        result = assemble(spec, {"question": "事业"}, ok_outcome, poem_outcome=Ok("第一签（上签）\n春风得意马蹄疾"))
        assert result.sections[0].title == POEM
        assert result.sections[0].content.startswith("第一签")

    def test_astrology_chart_section_normalized(self):
        """测试：外部星盘描述被规范化为标准行格式"""
        # Given
        spec = self.registry.get("astrology")
        outcome = Ok("【星盘描述】\n太阳在白羊座，15度\n太阳与月亮构成六分相\n【建议】\n多休息")

        # When
        result = assemble(spec, {"birthDate": "1990-04-05"}, outcome)

        # Then
        assert result.sections[0].title == "星盘描述"
        assert result.sections[0].content == "太阳位于白羊座15度\n太阳和月亮形成六分相(60度)"


class TestAssembleFallback:
    """本地模拟路径"""

    def setup_method(self):
        self.registry = MethodRegistry()

    def test_failed_outcome_adds_disclaimer(self):
        """测试：外部失败时第一个章节为【提示】，包含原因"""
        # Given
        spec = self.registry.get("tarot")
        outcome = Failed("请求超时（80秒）", ErrorKind.TIMEOUT)

        # When
        result = assemble(spec, {"question": "工作"}, outcome, seed=7)

        # Then
        assert result.sections[0].title == DISCLAIMER_TITLE
        assert "请求超时" in result.sections[0].content
        assert result.sections[1].title == "塔罗牌阵"
        assert POEM not in [s.title for s in result.sections]

    def test_traditional_fallback_order(self):
        spec = self.registry.get("almanac")
        result = assemble(spec, {"date": "2024-03-15"}, Failed("未配置 API 密钥", ErrorKind.NOT_CONFIGURED))
        assert [s.title for s in result.sections[:3]] == [DISCLAIMER_TITLE, POEM, "今日运势"]

    def test_blank_ok_text_is_simulated(self):
        spec = self.registry.get("tarot")
        result = assemble(spec, {"question": "工作"}, Ok("   \n  "))
        assert result.sections[0].title == DISCLAIMER_TITLE

    def test_missing_outcome_is_simulated(self):
        spec = self.registry.get("numerology")
        result = assemble(spec, {"fullName": "Li Lei", "birthDate": "1990-01-01"}, None)
        assert result.sections[0].title == DISCLAIMER_TITLE

    def test_fallback_is_deterministic_for_seed(self):
        """测试：相同种子两次模拟章节相同"""
        # Given
        spec = self.registry.get("zhouyi")
        failed = Failed("HTTP 500", ErrorKind.HTTP_ERROR)

        # When
        first = assemble(spec, {"question": "投资"}, failed, seed=99)
        second = assemble(spec, {"question": "投资"}, failed, seed=99)

        # Then
        assert [(s.title, s.content) for s in first.sections] == [(s.title, s.content) for s in second.sections]
        assert first.id != second.id

    def test_everything_broken_still_non_empty(self):
        """测试：生成器与解析器都出错时返回提示 + 静态章节"""
        # Given
        spec = broken_spec()

        # When
        result = assemble(spec, {}, Ok("【总论】外部内容"))

        # Then
        assert result.sections[0].title == DISCLAIMER_TITLE
        assert len(result.valid_sections) >= 2

    def test_broken_traditional_method_gets_poem(self):
        result = assemble(broken_spec(MethodFamily.TRADITIONAL), {}, Failed("x"))
        assert [s.title for s in result.sections[:2]] == [DISCLAIMER_TITLE, POEM]


class TestSimulateTarot:
    """塔罗模拟内容解析"""

    @pytest.mark.parametrize("size", sorted(SPREADS))
    @pytest.mark.parametrize("seed", [7, 42, 2024])
    def test_every_spread_keeps_card_lines_together(self, size, seed):
        """测试：牌位名与标题相同（如"建议"）时不会拆出新章节"""
        # Given
        spec = MethodRegistry().get("tarot")
        spread_name, positions = SPREADS[size]

        # When
        sections = simulate(spec, {"question": "工作", "spread": spread_name}, seed)

        # Then
        titles = [s.title for s in sections]
        assert titles == ["塔罗牌阵", "牌面解读", "牌阵解读", "建议", "总结"]
        card_lines = sections[1].content.split("\n")
        assert len(card_lines) == size
        assert [line.split("：", 1)[0] for line in card_lines] == positions
