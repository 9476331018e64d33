#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字命理生成器（简化排盘）

四柱按固定取模规则推出，不做节气换算；五行统计由四柱八字直接得出，
叙述部分从用语池中按种子选取。
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from divination.core.calendar_facts import CalendarFacts
from divination.core.seeded_sequence import SeededSequence
from divination.data.phrase_pools import (
    CAREER_ADVICES, CAREER_STAGES, ELEMENT_CAREERS, ELEMENT_HEALTH, ELEMENT_PERSONALITY,
    GENERAL_ADVICES, HEALTH_ADVICES, HEALTH_STATES, LOVE_ADVICES, LOVE_STATES, LOVE_TRAITS,
    TRAITS, TRENDS, WEALTH_ADVICES, WEALTH_LEVELS, WEALTH_SOURCES,
)
from divination.data.stems_branches import DI_ZHI, FIVE_ELEMENTS, GAN_ELEMENT, TIAN_GAN, ZHI_ELEMENT
from divination.generators.base import ContentGenerator, render_sections

_CLOCK_PATTERN = re.compile(r"(\d{1,2})\s*[:：]\s*(\d{1,2})")


def hour_branch_index(birth_time: Optional[str]) -> Optional[int]:
    """
    出生时间 -> 时辰地支序号

    支持 "14:30" 以及 "未时"、"未时 (13:00-15:00)" 两种写法，无法识别返回 None。
    """
    if not birth_time:
        return None
    for idx, zhi in enumerate(DI_ZHI):
        if f"{zhi}时" in birth_time:
            return idx
    match = _CLOCK_PATTERN.search(birth_time)
    if match:
        hour = int(match.group(1))
        if 0 <= hour <= 23:
            return ((hour + 1) // 2) % 12
    return None


@dataclass
class FourPillars:
    year: str
    month: str
    day: str
    hour: Optional[str]

    @property
    def characters(self) -> List[str]:
        chars = list(self.year + self.month + self.day)
        if self.hour:
            chars.extend(self.hour)
        return chars

    def element_counts(self) -> Dict[str, int]:
        counts = {e: 0 for e in FIVE_ELEMENTS}
        for i, ch in enumerate(self.characters):
            element = GAN_ELEMENT[ch] if i % 2 == 0 else ZHI_ELEMENT[ch]
            counts[element] += 1
        return counts


def compute_pillars(birth_date: str, birth_time: Optional[str] = None) -> FourPillars:
    facts = CalendarFacts.from_date(birth_date)
    month_pillar = TIAN_GAN[(facts.year * 12 + facts.month) % 10] + DI_ZHI[(facts.month + 1) % 12]
    branch = hour_branch_index(birth_time)
    hour_pillar = None
    if branch is not None:
        hour_pillar = TIAN_GAN[(facts.stem_index * 2 + branch) % 10] + DI_ZHI[branch]
    return FourPillars(facts.year_ganzhi, month_pillar, facts.day_ganzhi, hour_pillar)


def element_bar(count: int, width: int = 8) -> str:
    return "●" * count + "○" * max(0, width - count)


class BaziGenerator(ContentGenerator):
    """八字命理"""

    method_id = "bazi"
    STATIC_SECTIONS = [
        ("八字分析", "根据您的八字信息，您具有较强的领导能力和创造力。近期运势较为平稳，建议把握机会，稳步发展。"),
        ("建议", "1. 发挥自身优势，选择适合的发展方向\n2. 持续学习，提升专业技能\n3. 保持耐心，不急于求成"),
    ]

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        pillars = compute_pillars(inputs.get("birthDate", ""), inputs.get("birthTime"))
        counts = pillars.element_counts()
        strongest = max(FIVE_ELEMENTS, key=lambda e: counts[e])
        weakest = min(FIVE_ELEMENTS, key=lambda e: counts[e])
        day_master = pillars.day[0]
        day_element = GAN_ELEMENT[day_master]

        chart_lines = [
            f"{pillars.year}年 {pillars.month}月 {pillars.day}日 {pillars.hour or '时辰未知'}"
            + ("时" if pillars.hour else ""),
            f"日主：{day_master}{day_element}",
            "",
            "五行分析：",
        ]
        chart_lines.extend(f"{e}：{element_bar(counts[e])} {counts[e]}" for e in FIVE_ELEMENTS)

        traits = seq.sample(TRAITS, seq.randint(2, 3))
        personality = (
            f"日主属{day_element}，{ELEMENT_PERSONALITY[day_element]}。"
            f"命盘显示您具有较强的{'和'.join(traits)}。"
        )

        fields = "、".join(ELEMENT_CAREERS[strongest][:3])
        career = (
            f"五行中{strongest}最旺，适合从事{fields}等领域的工作。"
            f"当前处于{seq.choice(CAREER_STAGES)}阶段，{seq.choice(CAREER_ADVICES)}。"
        )
        wealth = (
            f"财运整体{seq.choice(WEALTH_LEVELS)}，{seq.choice(WEALTH_SOURCES)}。"
            f"{seq.choice(WEALTH_ADVICES)}。"
        )
        gender = inputs.get("gender", "")
        partner = "妻星" if gender == "男" else "夫星" if gender == "女" else "配偶星"
        love = (
            f"{partner}{'得力' if counts[strongest] >= 3 else '平和'}，{seq.choice(LOVE_STATES)}。"
            f"{seq.choice(LOVE_TRAITS)}，{seq.choice(LOVE_ADVICES)}。"
        )
        health = (
            f"健康状况{seq.choice(HEALTH_STATES)}。五行{weakest}偏弱，"
            f"需特别关注{ELEMENT_HEALTH[weakest]}的保养，{seq.choice(HEALTH_ADVICES)}。"
        )
        age1 = seq.randint(25, 35)
        age2 = seq.randint(40, 50)
        advices = seq.sample(GENERAL_ADVICES, 3)
        summary = (
            f"总体命运呈现{seq.choice(TRENDS)}的趋势，尤其在{age1}岁和{age2}岁将有重要转折。"
            f"五行宜补{weakest}，" + "；".join(advices) + "。"
        )

        return render_sections([
            ("八字命盘", "\n".join(chart_lines)),
            ("性格分析", personality),
            ("事业", career),
            ("财运", wealth),
            ("感情", love),
            ("健康", health),
            ("总结", summary),
        ])
