#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
生成种子推导

- 黄历：日期哈希
- 其他方法：方法ID + 输入 + 当天日期 的稳定哈希（同一天相同输入结果相同）
- 塔罗重新洗牌：当前时间
"""

import time
from datetime import date
from typing import Dict, Optional

from divination.core.calendar_facts import CalendarFacts, DateLike, stable_hash


def seed_from_date(value: DateLike) -> int:
    return CalendarFacts.from_date(value).date_hash


def seed_from_inputs(method_id: str, inputs: Dict[str, str], day: Optional[date] = None) -> int:
    """输入按键名排序后参与哈希，与字典插入顺序无关"""
    day = day or date.today()
    parts = [method_id, day.isoformat()]
    for key in sorted(inputs):
        parts.append(f"{key}={inputs[key]}")
    return stable_hash(*parts)


def seed_from_time() -> int:
    return int(time.time() * 1000) & 0x7FFFFFFF
