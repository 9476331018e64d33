#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日历派生事实

从公历日期推出生成器需要的全部数值：年内序号、星期、日期哈希、
生肖、干支序号、简化农历标签、太阳星座。农历为固定映射的近似值，
不做真实历法换算。
"""

import hashlib
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from divination.core.exceptions import InvalidSeedInputError
from divination.data.stems_branches import (
    CONSTELLATION_STARTS, DI_ZHI, LUNAR_DAYS, LUNAR_MONTHS, TIAN_GAN,
    WEEKDAY_NAMES, ZODIAC_ANIMALS,
)

DateLike = Union[date, datetime, str]

_DATE_PATTERN = re.compile(r"^\s*(\d{4})\s*[-/.年]\s*(\d{1,2})\s*[-/.月]\s*(\d{1,2})\s*日?\s*$")


def rotl32(value: int, shift: int) -> int:
    """32 位循环左移"""
    value &= 0xFFFFFFFF
    return ((value << shift) | (value >> (32 - shift))) & 0xFFFFFFFF


def date_hash(year: int, month: int, day: int, day_of_year: int) -> int:
    """日期哈希，非负 31 位整数"""
    mixed = year * 10007 + month * 1009 + day * 101 + day_of_year
    return rotl32(mixed, 5) & 0x7FFFFFFF


def stable_hash(*parts: str) -> int:
    """
    跨进程稳定的字符串哈希

    Python 内置 hash() 对字符串做了随机化，种子必须用 md5 计算。
    """
    text = "|".join(str(p) for p in parts)
    digest = hashlib.md5(text.encode("utf-8")).hexdigest()
    return int(digest[:8], 16) & 0x7FFFFFFF


def parse_date(value: DateLike, field: str = "date") -> date:
    """
    解析日期输入

    Args:
        value: date / datetime / "YYYY-MM-DD" / "YYYY/MM/DD" / "YYYY年MM月DD日"
        field: 出错时报告的字段名

    Returns:
        date 对象

    Raises:
        InvalidSeedInputError: 日期格式错误或日期不存在
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidSeedInputError(f"日期不能为空: {field}", field=field)
    match = _DATE_PATTERN.match(value)
    if not match:
        raise InvalidSeedInputError(f"日期格式错误: {value}，应为 YYYY-MM-DD", field=field)
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError as e:
        raise InvalidSeedInputError(f"日期不存在: {value} ({e})", field=field)


def constellation_of(month: int, day: int) -> str:
    """根据月日计算太阳星座"""
    name = "摩羯座"
    for start_month, start_day, sign in CONSTELLATION_STARTS:
        if (month, day) >= (start_month, start_day):
            name = sign
    return name


@dataclass(frozen=True)
class CalendarFacts:
    """某一天的派生日历数据"""
    year: int
    month: int
    day: int
    day_of_year: int
    day_of_week: int  # 0 = 星期一

    @classmethod
    def from_date(cls, value: DateLike) -> "CalendarFacts":
        d = parse_date(value)
        return cls(
            year=d.year,
            month=d.month,
            day=d.day,
            day_of_year=d.timetuple().tm_yday,
            day_of_week=d.weekday(),
        )

    @property
    def date_hash(self) -> int:
        return date_hash(self.year, self.month, self.day, self.day_of_year)

    @property
    def iso(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.day_of_week]

    @property
    def zodiac_index(self) -> int:
        return (self.year - 4) % 12

    @property
    def zodiac(self) -> str:
        return ZODIAC_ANIMALS[self.zodiac_index]

    @property
    def year_ganzhi(self) -> str:
        return TIAN_GAN[(self.year - 4) % 10] + DI_ZHI[(self.year - 4) % 12]

    @property
    def stem_index(self) -> int:
        return (self.day_of_year + self.year) % 10

    @property
    def branch_index(self) -> int:
        return (self.day_of_year + self.year) % 12

    @property
    def day_ganzhi(self) -> str:
        return TIAN_GAN[self.stem_index] + DI_ZHI[self.branch_index]

    @property
    def lunar_label(self) -> str:
        """简化农历：月份偏移 10 个月，日期按 30 天循环"""
        month_label = LUNAR_MONTHS[(self.month + 9) % 12]
        day_label = LUNAR_DAYS[(self.day - 1) % 30]
        return f"农历{month_label}{day_label}"

    @property
    def constellation(self) -> str:
        return constellation_of(self.month, self.day)
