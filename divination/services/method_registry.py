#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
占卜方法注册表

方法ID -> {方法描述, 生成器, 提示词模板, 超时, 解析器, 类别}
所有按方法区分的行为都从这里查，避免各处各写一份分支。
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from divination.core.exceptions import UnknownMethodError
from divination.generators.almanac import AlmanacGenerator
from divination.generators.astrology import AstrologyGenerator
from divination.generators.base import ContentGenerator
from divination.generators.bazi import BaziGenerator
from divination.generators.dream import DreamGenerator
from divination.generators.generic import GenericGenerator
from divination.generators.hexagram import HexagramGenerator
from divination.generators.numerology import NumerologyGenerator
from divination.generators.qimen import QimenGenerator
from divination.generators.tarot import TarotGenerator
from divination.models.method import DivinationMethod, InputField, InputKind, MethodFamily
from divination.parsers.method_parsers import (
    AstrologySectionParser, TarotSectionParser, ZhouYiSectionParser,
)
from divination.parsers.section_parser import SectionParser
from divination.services.prompt_builder import PROMPT_TEMPLATES, PromptTemplate, render_prompt

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60

GENDER_OPTIONS = ["男", "女"]
SHICHEN_OPTIONS = [
    "子时(23:00-01:00)", "丑时(01:00-03:00)", "寅时(03:00-05:00)", "卯时(05:00-07:00)",
    "辰时(07:00-09:00)", "巳时(09:00-11:00)", "午时(11:00-13:00)", "未时(13:00-15:00)",
    "申时(15:00-17:00)", "酉时(17:00-19:00)", "戌时(19:00-21:00)", "亥时(21:00-23:00)",
]
SPREAD_OPTIONS = ["三张牌阵", "五张牌阵", "六芒星牌阵", "凯尔特十字牌阵"]


@dataclass
class MethodSpec:
    """一个方法的全部配置"""
    method: DivinationMethod
    generator: ContentGenerator
    parser: object
    prompt: Optional[PromptTemplate] = None

    @property
    def id(self) -> str:
        return self.method.id

    @property
    def name(self) -> str:
        return self.method.name

    @property
    def family(self) -> MethodFamily:
        return self.method.family

    @property
    def timeout(self) -> float:
        return self.method.timeout_seconds

    @property
    def is_traditional(self) -> bool:
        return self.method.family == MethodFamily.TRADITIONAL

    def build_prompt(self, inputs: Dict[str, str]) -> str:
        return render_prompt(self.name, inputs, self.prompt)

    def missing_inputs(self, inputs: Dict[str, str]) -> List[str]:
        return [f.id for f in self.method.input_fields
                if f.required and not str(inputs.get(f.id, "")).strip()]

    def date_fields(self) -> List[str]:
        return [f.id for f in self.method.input_fields if f.kind == InputKind.DATE]


def _date(field_id: str, name: str) -> InputField:
    return InputField(id=field_id, name=name, kind=InputKind.DATE)


def _text(field_id: str, name: str, required: bool = True) -> InputField:
    return InputField(id=field_id, name=name, kind=InputKind.TEXT, required=required)


def _choice(field_id: str, name: str, options: List[str], required: bool = True) -> InputField:
    return InputField(id=field_id, name=name, kind=InputKind.CHOICE, options=options, required=required)


def _spec(method_id, name, description, family, fields, generator, timeout, parser=None) -> MethodSpec:
    method = DivinationMethod(
        id=method_id,
        name=name,
        description=description,
        family=family,
        input_fields=fields,
        timeout_seconds=timeout,
    )
    return MethodSpec(
        method=method,
        generator=generator,
        parser=parser or SectionParser(),
        prompt=PROMPT_TEMPLATES.get(method_id),
    )


class MethodRegistry:
    """方法注册表，构建一次后只读"""

    def __init__(self, specs: Optional[List[MethodSpec]] = None):
        self._specs: Dict[str, MethodSpec] = {}
        for spec in specs if specs is not None else default_specs():
            self.register(spec)

    def register(self, spec: MethodSpec):
        if spec.id in self._specs:
            raise ValueError(f"方法重复注册: {spec.id}")
        self._specs[spec.id] = spec

    def get(self, method_id: str) -> MethodSpec:
        spec = self._specs.get(method_id)
        if spec is None:
            raise UnknownMethodError(method_id)
        return spec

    def find(self, method_id: str) -> Optional[MethodSpec]:
        return self._specs.get(method_id)

    def __contains__(self, method_id: str) -> bool:
        return method_id in self._specs

    def methods(self, family: Optional[MethodFamily] = None) -> List[DivinationMethod]:
        return [s.method for s in self._specs.values() if family is None or s.family == family]


def default_specs() -> List[MethodSpec]:
    traditional = MethodFamily.TRADITIONAL
    western = MethodFamily.WESTERN
    return [
        _spec("bazi", "八字命理", "根据出生年月日时推算命运", traditional,
              [_date("birthDate", "出生日期"), _text("birthTime", "出生时间"),
               _choice("gender", "性别", GENDER_OPTIONS)],
              BaziGenerator(), 120),
        _spec("almanac", "老黄历", "查询每日宜忌、吉凶方位和时辰信息", traditional,
              [_date("date", "查询日期")],
              AlmanacGenerator(), 90),
        _spec("ziwei", "紫微斗数", "通过星盘分析人生运势", traditional,
              [_date("birthDate", "出生日期(阳历)"), _choice("birthTime", "出生时辰", SHICHEN_OPTIONS),
               _choice("gender", "性别", GENDER_OPTIONS)],
              GenericGenerator("ziwei"), 90),
        _spec("zhouyi", "周易卦象", "易经六十四卦预测", traditional,
              [_text("question", "预测问题")],
              HexagramGenerator(), 90, ZhouYiSectionParser()),
        _spec("qimen", "奇门遁甲", "以时空盘局推断事情吉凶", traditional,
              [_text("question", "所问之事")],
              QimenGenerator(), 90),
        _spec("dream", "周公解梦", "解析梦境寓意与预示", traditional,
              [_text("dreamContent", "梦境内容")],
              DreamGenerator(), 80),
        _spec("palmistry", "手相", "通过掌纹分析性格与运势", traditional,
              [_text("description", "手相描述", required=False)],
              GenericGenerator("palmistry"), 70),
        _spec("face", "面相", "通过五官特征分析性格与运势", traditional,
              [_text("description", "面相描述", required=False)],
              GenericGenerator("face"), 70),
        _spec("tarot", "塔罗牌", "通过塔罗牌阵解读命运", western,
              [_text("question", "咨询问题"), _choice("spread", "牌阵", SPREAD_OPTIONS, required=False)],
              TarotGenerator(), 80, TarotSectionParser()),
        _spec("astrology", "占星学", "星盘解读与行星运势", western,
              [_date("birthDate", "出生日期"), _text("birthTime", "出生时间", required=False),
               _text("birthPlace", "出生地点", required=False)],
              AstrologyGenerator(), 80, AstrologySectionParser()),
        _spec("numerology", "数字命理", "通过姓名与生日数字解读人生", western,
              [_text("fullName", "全名"), _date("birthDate", "出生日期")],
              NumerologyGenerator(), 90),
    ]
