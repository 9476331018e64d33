#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
星盘描述提取 单元测试
"""

import pytest

from divination.core.seeded_sequence import SeededSequence
from divination.generators.astrology import compute_chart
from divination.parsers.chart_extractor import normalize_chart_text, parse_chart


class TestParseChart:
    """parse_chart 测试类"""

    @pytest.mark.parametrize("text, expected", [
        ("太阳在白羊座，15度", ("太阳", "白羊", 15)),
        ("月亮落入金牛座 10度", ("月亮", "金牛", 10)),
        ("水星：双子座5°", ("水星", "双子", 5)),
        ("上升在天蝎座", ("上升点", "天蝎", None)),
        ("金星♎ 20度", ("金星", "天秤", 20)),
    ])
    def test_position_variants(self, text, expected):
        chart = parse_chart(text)
        assert chart.positions == [expected]

    @pytest.mark.parametrize("text, expected", [
        ("太阳与木星构成三分相，约120度", ("太阳", "木星", "三分相", 120)),
        ("太阳-木星 三分相(120°)", ("太阳", "木星", "三分相", 120)),
        ("火星与土星冲相", ("火星", "土星", "对分相", 180)),
        ("月亮和金星形成拱相", ("月亮", "金星", "三分相", 120)),
    ])
    def test_aspect_variants(self, text, expected):
        chart = parse_chart(text)
        assert chart.aspects == [expected]
        assert chart.positions == []

    def test_duplicate_pairs_and_points_dropped(self):
        # Given
        text = "太阳位于白羊座1度\n太阳位于金牛座2度\n太阳和月亮形成合相(0度)\n月亮和太阳形成四分相(90度)"

        # When
        chart = parse_chart(text)

        # Then
        assert chart.positions == [("太阳", "白羊", 1)]
        assert chart.aspects == [("太阳", "月亮", "合相", 0)]

    def test_empty_text(self):
        chart = parse_chart("")
        assert chart.positions == []
        assert chart.aspects == []


class TestNormalizeChartText:
    """normalize_chart_text 测试类"""

    def test_canonical_lines(self):
        # Given
        text = "太阳在白羊座，15度；月亮落入金牛座 10度。太阳与月亮构成六分相，约60度"

        # When
        normalized = normalize_chart_text(text)

        # Then
        assert normalized.split("\n") == [
            "太阳位于白羊座15度",
            "月亮位于金牛座10度",
            "太阳和月亮形成六分相(60度)",
        ]

    def test_generated_chart_is_stable(self):
        """测试：生成的星盘规范化后内容不变"""
        # Given
        chart = compute_chart(SeededSequence(12345))
        text = chart.describe()

        # When
        normalized = normalize_chart_text(text)

        # Then
        assert normalized == text.replace("\n\n", "\n")

    def test_no_chart_returns_empty(self):
        assert normalize_chart_text("今天天气不错") == ""
