#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
方法注册表与提示词 单元测试
"""

import pytest

from divination.core.exceptions import UnknownMethodError
from divination.models.method import MethodFamily
from divination.services.method_registry import MethodRegistry, MethodSpec, default_specs
from divination.services.prompt_builder import PromptTemplate, build_poem_prompt, build_prompt


class TestMethodRegistry:
    """MethodRegistry 测试类"""

    def setup_method(self):
        self.registry = MethodRegistry()

    def test_all_methods_registered(self):
        ids = {m.id for m in self.registry.methods()}
        assert ids == {
            "bazi", "almanac", "ziwei", "zhouyi", "qimen", "dream", "palmistry", "face",
            "tarot", "astrology", "numerology",
        }

    def test_family_filter(self):
        western = {m.id for m in self.registry.methods(MethodFamily.WESTERN)}
        assert western == {"tarot", "astrology", "numerology"}

    @pytest.mark.parametrize("method_id, timeout", [
        ("bazi", 120), ("zhouyi", 90), ("almanac", 90), ("tarot", 80),
        ("astrology", 80), ("dream", 80), ("face", 70), ("palmistry", 70),
    ])
    def test_timeouts(self, method_id, timeout):
        assert self.registry.get(method_id).timeout == timeout

    def test_unknown_method_raises(self):
        with pytest.raises(UnknownMethodError):
            self.registry.get("crystal_ball")
        assert self.registry.find("crystal_ball") is None
        assert "crystal_ball" not in self.registry

    def test_duplicate_registration_rejected(self):
        spec = default_specs()[0]
        with pytest.raises(ValueError):
            self.registry.register(spec)

    def test_missing_inputs(self):
        spec = self.registry.get("numerology")
        assert spec.missing_inputs({"fullName": "  "}) == ["fullName", "birthDate"]
        assert spec.date_fields() == ["birthDate"]

    def test_generator_ids_match(self):
        for spec in default_specs():
            assert spec.generator.method_id == spec.id

    def test_spec_prompt_uses_its_own_template(self):
        """测试：提示词按方法配置中的模板生成"""
        # Given
        base = self.registry.get("dream")
        template = PromptTemplate(intro="请解读这个梦：", fields=[("梦境", "dreamContent")])
        spec = MethodSpec(method=base.method, generator=base.generator, parser=base.parser, prompt=template)

        # When
        prompt = spec.build_prompt({"dreamContent": "梦见大海"})

        # Then
        assert "请解读这个梦：" in prompt
        assert "梦境：梦见大海" in prompt

    def test_registered_specs_carry_templates(self):
        assert self.registry.get("tarot").prompt is not None
        assert self.registry.get("palmistry").prompt is None


class TestPromptBuilder:
    """提示词测试类"""

    def test_format_contract_present(self):
        # When
        prompt = build_prompt("bazi", "八字命理", {"birthDate": "1990-05-17", "gender": "男"})

        # Then
        for title in ("【总论】", "【事业】", "【财运】", "【感情】", "【健康】", "【建议】"):
            assert title in prompt
        assert "1990-05-17" in prompt

    def test_astrology_chart_first(self):
        prompt = build_prompt("astrology", "占星学", {"birthDate": "1990-05-17"})
        assert prompt.index("【星盘描述】") < prompt.index("【总论】")

    def test_unknown_template_lists_inputs(self):
        prompt = build_prompt("palmistry", "手相", {"description": "生命线很长"})
        assert "生命线很长" in prompt
        assert "【总论】" in prompt

    def test_poem_prompt(self):
        prompt = build_poem_prompt("周易卦象", ["事业", "财运"])
        assert "周易卦象" in prompt
        assert "事业、财运" in prompt
