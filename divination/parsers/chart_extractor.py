#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
星盘描述提取与规范化

外部返回的星盘描述写法不一，例如：
    太阳在白羊座，15度 / 月亮落入金牛座 10度 / 水星：双子座5°
    太阳与木星构成三分相，约120度 / 太阳-木星 三分相(120°)
统一规范为星盘绘制方使用的两种行格式：
    太阳位于白羊座15度
    太阳和木星形成三分相(120度)
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from divination.data.astrology_tables import ASPECT_ALIASES, ASPECTS, SIGN_SYMBOLS, SIGNS
from divination.generators.astrology import format_aspect, format_position

_POINT = r"太阳|月亮|水星|金星|火星|木星|土星|天王星|海王星|冥王星|上升点?|中天点?"
_SIGN = "|".join(SIGNS + list(SIGN_SYMBOLS))
_RELATION = "|".join(list(ASPECTS) + list(ASPECT_ALIASES))

POSITION_PATTERN = re.compile(
    rf"({_POINT})\s*(?:位于|落在|落入|处于|在|[：:]|[-—])?\s*({_SIGN})座?"
    rf"(?:\s*[，,、]?\s*约?\s*(\d{{1,2}})\s*(?:度|°))?"
)

ASPECT_PATTERNS = [
    re.compile(
        rf"({_POINT})\s*(?:和|与|跟)\s*({_POINT})\s*(?:形成|构成|呈|成)?\s*({_RELATION})"
        rf"(?:\s*[，,(（]?\s*约?\s*(\d{{1,3}})\s*(?:度|°)?\s*[)）]?)?"
    ),
    re.compile(
        rf"({_POINT})\s*[-—~]\s*({_POINT})\s*[：:]?\s*({_RELATION})"
        rf"(?:\s*[(（]?\s*(\d{{1,3}})\s*(?:度|°)?\s*[)）]?)?"
    ),
    re.compile(rf"({_POINT})\s*({_POINT})\s*({_RELATION})()"),
]


def _point(name: str) -> str:
    if name in ("上升", "中天"):
        return name + "点"
    return name


def _sign(name: str) -> str:
    return SIGN_SYMBOLS.get(name, name)


@dataclass
class ChartData:
    positions: List[Tuple[str, str, Optional[int]]] = field(default_factory=list)
    aspects: List[Tuple[str, str, str, int]] = field(default_factory=list)

    def to_text(self) -> str:
        lines = [format_position(*p) for p in self.positions]
        lines.extend(format_aspect(*a) for a in self.aspects)
        return "\n".join(lines)


def parse_chart(text: str) -> ChartData:
    """
    从描述中提取行星位置与相位

    同一行星只取第一次出现的位置；同一对行星只取第一个相位。
    """
    chart = ChartData()
    if not text:
        return chart

    # 先找相位，相位文字里出现的行星不当作位置描述
    seen_pairs = set()
    aspect_spans = []
    for pattern in ASPECT_PATTERNS:
        for match in pattern.finditer(text):
            if any(s <= match.start() < e for s, e in aspect_spans):
                continue
            a, b = _point(match.group(1)), _point(match.group(2))
            if a == b:
                continue
            aspect_spans.append(match.span())
            pair = frozenset((a, b))
            if pair in seen_pairs:
                continue
            seen_pairs.add(pair)
            relation = ASPECT_ALIASES.get(match.group(3), match.group(3))
            degree = int(match.group(4)) if match.group(4) else ASPECTS[relation]
            chart.aspects.append((a, b, relation, degree))

    seen_points = set()
    for match in POSITION_PATTERN.finditer(text):
        if any(s <= match.start() < e for s, e in aspect_spans):
            continue
        point = _point(match.group(1))
        if point in seen_points:
            continue
        seen_points.add(point)
        degree = int(match.group(3)) if match.group(3) else None
        chart.positions.append((point, _sign(match.group(2)), degree))
    return chart


def normalize_chart_text(text: str) -> str:
    """规范化星盘描述；提取不到任何行星或相位时返回空字符串"""
    return parse_chart(text).to_text()
