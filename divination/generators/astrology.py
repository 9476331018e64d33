#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
占星生成器

星盘描述使用固定格式，供星盘绘制方直接解析：
    <行星>位于<星座>座<度数>度              共 12 行
    <行星A>和<行星B>形成<相位>(<角度>度)      5-7 行，同一对行星不重复
位置为种子生成的模拟值，并非天文计算结果；给出出生日期时太阳星座取真实太阳星座。
"""

import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from divination.core.calendar_facts import CalendarFacts
from divination.core.exceptions import InvalidSeedInputError
from divination.core.seeded_sequence import SeededSequence
from divination.data.astrology_tables import (
    ASCENDANT_READINGS, ASPECT_PLANETS, ASPECTS, CHART_POINTS, ELEMENT_TRAITS,
    HARMONIOUS_ASPECTS, MOON_READINGS, SIGN_ELEMENTS, SIGNS, SUN_READINGS, TENSE_ASPECTS,
)
from divination.generators.base import ContentGenerator, render_sections

logger = logging.getLogger(__name__)

CHART_TITLE = "星盘描述"

Position = Tuple[str, str, int]
Aspect = Tuple[str, str, str, int]


def format_position(planet: str, sign: str, degree: Optional[int]) -> str:
    if degree is None:
        return f"{planet}位于{sign}座"
    return f"{planet}位于{sign}座{degree}度"


def format_aspect(a: str, b: str, relation: str, degree: int) -> str:
    return f"{a}和{b}形成{relation}({degree}度)"


@dataclass
class AstroChart:
    positions: List[Position] = field(default_factory=list)
    aspects: List[Aspect] = field(default_factory=list)

    def sign_of(self, planet: str) -> str:
        for name, sign, _ in self.positions:
            if name == planet:
                return sign
        return ""

    def describe(self) -> str:
        lines = [format_position(*p) for p in self.positions]
        lines.append("")
        lines.extend(format_aspect(*a) for a in self.aspects)
        return "\n".join(lines)


def compute_chart(seq: SeededSequence, birth_date: Optional[str] = None) -> AstroChart:
    """
    生成星盘

    Args:
        seq: 种子序列
        birth_date: 出生日期，可选，用于确定太阳星座

    Returns:
        AstroChart，12 个点位与 5-7 个相位
    """
    sun_sign = None
    if birth_date:
        try:
            sun_sign = CalendarFacts.from_date(birth_date).constellation[:-1]
        except InvalidSeedInputError:
            logger.debug(f"出生日期无法解析，太阳星座改为模拟: {birth_date}")

    chart = AstroChart()
    for point in CHART_POINTS:
        sign = sun_sign if point == "太阳" and sun_sign else seq.choice(SIGNS)
        chart.positions.append((point, sign, seq.randint(0, 29)))

    pairs = list(itertools.combinations(ASPECT_PLANETS, 2))
    relations = list(ASPECTS)
    for a, b in seq.sample(pairs, seq.randint(5, 7)):
        relation = seq.choice(relations)
        chart.aspects.append((a, b, relation, ASPECTS[relation]))
    return chart


class AstrologyGenerator(ContentGenerator):
    """西洋占星"""

    method_id = "astrology"
    STATIC_SECTIONS = [
        ("星盘分析", "您的星盘整体能量均衡，太阳与月亮相互呼应，内外较为协调。"),
        ("事业解读", "近期木星带来有利时机，适合主动出击，争取更好的职业机会。"),
        ("感情解读", "金星为您带来良好的人际吸引力，注意沟通方式，避免误解。"),
        ("建议", "1. 把握有利时机，勇于表现自己\n2. 感情中提升沟通质量\n3. 财务上制定合理预算"),
    ]

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        chart = compute_chart(seq, inputs.get("birthDate"))

        sun = SIGN_ELEMENTS[chart.sign_of("太阳")]
        moon = SIGN_ELEMENTS[chart.sign_of("月亮")]
        rising = SIGN_ELEMENTS[chart.sign_of("上升点")]

        harmonious = sum(1 for a in chart.aspects if a[2] in HARMONIOUS_ASPECTS)
        tense = sum(1 for a in chart.aspects if a[2] in TENSE_ASPECTS)
        if harmonious > tense:
            aspect_text = f"星盘中和谐相位（{harmonious}个）多于紧张相位（{tense}个），人生际遇较为顺遂，贵人运佳。"
        elif tense > harmonious:
            aspect_text = f"星盘中紧张相位（{tense}个）多于和谐相位（{harmonious}个），成长多来自挑战，压力亦是动力。"
        else:
            aspect_text = f"和谐相位与紧张相位各{harmonious}个，顺境与挑战交替出现，宜保持平衡心态。"

        venus = chart.sign_of("金星")
        mars = chart.sign_of("火星")
        jupiter = chart.sign_of("木星")
        career = (
            f"火星落在{mars}座，{ELEMENT_TRAITS[SIGN_ELEMENTS[mars]]}，在工作中体现为独特的行动方式。"
            f"木星位于{jupiter}座，{'机会来自积极开拓' if seq.chance(50) else '机会来自稳步积累'}。"
        )
        love = (
            f"金星落在{venus}座，在感情中{ELEMENT_TRAITS[SIGN_ELEMENTS[venus]]}。"
            f"{'单身者近期有机会遇到心动对象。' if seq.chance(50) else '已有伴侣者关系将进一步深化。'}"
        )
        place = inputs.get("birthPlace", "").strip()
        intro = f"出生地：{place}\n" if place else ""

        return render_sections([
            (CHART_TITLE, intro + chart.describe()),
            ("太阳星座", f"太阳位于{chart.sign_of('太阳')}座。{SUN_READINGS[sun]}"),
            ("月亮星座", f"月亮位于{chart.sign_of('月亮')}座。{MOON_READINGS[moon]}"),
            ("上升星座", f"上升点位于{chart.sign_of('上升点')}座。{ASCENDANT_READINGS[rising]}"),
            ("相位分析", aspect_text),
            ("事业", career),
            ("感情", love),
            ("建议", "1. 发挥星盘中的优势能量\n2. 正视紧张相位带来的课题\n3. 保持冥想或静心练习，增强心理平衡"),
        ])
