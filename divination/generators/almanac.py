#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
老黄历生成器

以日期哈希为种子，生成宜忌、方位吉凶、时辰吉凶、胎神、冲煞、值星等。
宜与忌在抽取后做一次显式过滤，保证两者没有交集。
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Dict, List, Optional

from divination.core.calendar_facts import CalendarFacts, DateLike
from divination.core.seeded_sequence import SeededSequence
from divination.data.almanac_tables import (
    BAD_ACTIVITIES, DAY_STARS, DAY_SUMMARIES, DIRECTION_DEITIES, DIRECTIONS,
    FETUS_GOD_POSITIONS, GOOD_ACTIVITIES, HOUR_ACTIVITIES, SHA_DIRECTIONS, YEAR_STARS,
)
from divination.data.stems_branches import FIVE_ELEMENTS, SHICHEN, ZODIAC_ANIMALS
from divination.generators.base import ContentGenerator, render_sections

logger = logging.getLogger(__name__)

LUCKY = "吉"
UNLUCKY = "凶"


@dataclass
class HourLuck:
    name: str
    period: str
    luck: str
    activity: str


@dataclass
class AlmanacDay:
    """某一天的黄历"""
    solar_date: str
    weekday: str
    lunar_date: str
    zodiac: str
    year_ganzhi: str
    day_ganzhi: str
    good_activities: List[str]
    bad_activities: List[str]
    directions: Dict[str, str]
    deity_directions: Dict[str, str]
    hour_lucks: List[HourLuck] = field(default_factory=list)
    fetus_god: str = ""
    clash: str = ""
    year_star: str = ""
    day_star: str = ""
    five_element: str = ""
    grade: str = ""

    @property
    def lucky_direction_count(self) -> int:
        return sum(1 for luck in self.directions.values() if luck == LUCKY)

    def to_dict(self) -> dict:
        return asdict(self)


def pick_activities(seq: SeededSequence):
    """
    抽取宜忌事项

    宜、忌各 3-5 项。忌的候选表与宜的候选表有重叠，
    抽取后去掉与宜重复的项，再从不重叠的候选中补足数量。
    """
    good = seq.sample(GOOD_ACTIVITIES, seq.randint(3, 5))
    bad_count = seq.randint(3, 5)
    bad = [item for item in seq.sample(BAD_ACTIVITIES, bad_count) if item not in good]
    candidates = [item for item in BAD_ACTIVITIES if item not in good and item not in bad]
    while len(bad) < bad_count and candidates:
        bad.append(candidates.pop(seq.pick_index(len(candidates))))
    return good, bad


class AlmanacGenerator(ContentGenerator):
    """老黄历"""

    method_id = "almanac"
    STATIC_SECTIONS = [
        ("今日运势", "今日为普通日，诸事平稳。"),
        ("宜忌提示", "宜：祭祀、祈福、会亲友\n忌：动土、诉讼、开仓"),
        ("总结", "今天运势一般，建议谨慎行事，按部就班即可。"),
    ]

    def compute(self, value: DateLike, seed: Optional[int] = None) -> AlmanacDay:
        """
        计算某天的黄历

        Args:
            value: 日期
            seed: 种子，默认使用日期哈希

        Returns:
            AlmanacDay
        """
        facts = CalendarFacts.from_date(value)
        seq = SeededSequence(facts.date_hash if seed is None else seed)

        good, bad = pick_activities(seq)

        deity_dirs = seq.sample(DIRECTIONS, len(DIRECTION_DEITIES))
        deity_directions = dict(zip(DIRECTION_DEITIES, deity_dirs))
        directions = {}
        for direction in DIRECTIONS:
            lucky = direction in deity_dirs or seq.chance(40)
            directions[direction] = LUCKY if lucky else UNLUCKY

        hour_lucks = []
        for name, period in SHICHEN:
            if seq.chance(60):
                hour_lucks.append(HourLuck(name, period, LUCKY, seq.choice(HOUR_ACTIVITIES)))
            else:
                hour_lucks.append(HourLuck(name, period, UNLUCKY, "宜静不宜动"))

        # 日支相冲：相隔六位的地支
        clash_animal = ZODIAC_ANIMALS[(facts.branch_index + 6) % 12]
        sha = SHA_DIRECTIONS[facts.branch_index % 4]

        day = AlmanacDay(
            solar_date=f"{facts.year}年{facts.month:02d}月{facts.day:02d}日",
            weekday=facts.weekday_name,
            lunar_date=facts.lunar_label,
            zodiac=facts.zodiac,
            year_ganzhi=facts.year_ganzhi,
            day_ganzhi=facts.day_ganzhi,
            good_activities=good,
            bad_activities=bad,
            directions=directions,
            deity_directions=deity_directions,
            hour_lucks=hour_lucks,
            fetus_god=FETUS_GOD_POSITIONS[(facts.day - 1) % len(FETUS_GOD_POSITIONS)],
            clash=f"冲{clash_animal}煞{sha}",
            year_star=YEAR_STARS[facts.year % len(YEAR_STARS)],
            day_star=DAY_STARS[facts.day_of_year % len(DAY_STARS)],
            five_element=FIVE_ELEMENTS[facts.day_of_year % len(FIVE_ELEMENTS)],
        )
        day.grade = "黄道吉日" if day.lucky_direction_count >= 5 else "普通日"
        return day

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        value = inputs.get("date") or date.today()
        day = self.compute(value, seed=seq.seed)
        return render_sections(self.sections_for(day))

    @staticmethod
    def sections_for(day: AlmanacDay):
        overview = (
            f"{day.solar_date} {day.weekday}\n"
            f"{day.lunar_date}  {day.year_ganzhi}年（{day.zodiac}年） {day.day_ganzhi}日\n"
            f"{day.grade}"
        )
        activities = f"宜：{'、'.join(day.good_activities)}\n忌：{'、'.join(day.bad_activities)}"
        direction_lines = [" ".join(f"{d}：{luck}" for d, luck in day.directions.items())]
        direction_lines.extend(f"{deity}：{d}" for deity, d in day.deity_directions.items())
        hour_lines = [f"{h.name}（{h.period}）{h.luck}，{h.activity}" for h in day.hour_lucks]
        others = (
            f"胎神：{day.fetus_god}\n冲煞：{day.clash}\n值年星：{day.year_star}\n"
            f"值日星：{day.day_star}\n五行：{day.five_element}"
        )

        count = day.lucky_direction_count
        if count >= 6:
            summary = DAY_SUMMARIES["great"]
        elif count >= 4:
            summary = DAY_SUMMARIES["good"].format(good="、".join(day.good_activities[:2]))
        else:
            summary = DAY_SUMMARIES["plain"].format(bad="、".join(day.bad_activities[:2]))

        return [
            ("今日运势", overview),
            ("宜忌提示", activities),
            ("方位吉凶", "\n".join(direction_lines)),
            ("时辰吉凶", "\n".join(hour_lines)),
            ("其他信息", others),
            ("总结", summary),
        ]
