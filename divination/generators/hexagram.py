#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
周易占卜生成器 - 从六十四卦中起一卦，附 0-2 个变爻
"""

from dataclasses import dataclass
from typing import Dict, List

from divination.core.seeded_sequence import SeededSequence
from divination.data.hexagrams import (
    AUSPICIOUS_NUMBERS, CAUTIOUS_NUMBERS, HEXAGRAMS, LINE_NAMES, LINE_TEXTS,
    TOPIC_KEYWORDS, TOPIC_READINGS,
)
from divination.generators.base import ContentGenerator, render_sections


def detect_topic(question: str) -> str:
    """按关键词判断问题主题：career / relationship / wealth / default"""
    for topic, keywords in TOPIC_KEYWORDS.items():
        if any(k in question for k in keywords):
            return topic
    return "default"


def omen_grade(number: int) -> str:
    if number in AUSPICIOUS_NUMBERS:
        return "吉"
    if number in CAUTIOUS_NUMBERS:
        return "慎"
    return "平"


@dataclass
class HexagramCast:
    hexagram: dict
    changing_lines: List[int]
    grade: str
    topic: str


def cast_hexagram(seq: SeededSequence, question: str) -> HexagramCast:
    hexagram = seq.choice(HEXAGRAMS)
    changing = sorted(seq.sample(list(range(1, 7)), seq.randint(0, 2)))
    return HexagramCast(
        hexagram=hexagram,
        changing_lines=changing,
        grade=omen_grade(hexagram["number"]),
        topic=detect_topic(question),
    )


class HexagramGenerator(ContentGenerator):
    """周易"""

    method_id = "zhouyi"
    STATIC_SECTIONS = [
        ("卦象解析", "您所得卦象显示当前形势变化多端，宜谨慎行事。"),
        ("运势分析", "近期运势稳中有波，建议您稳扎稳打，不宜轻举妄动。"),
        ("建议", "1. 保持耐心，等待适当时机再行动\n2. 多听取他人建议，集思广益\n3. 谨慎投资，避免冒险"),
    ]

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        question = inputs.get("question", "").strip()
        cast = cast_hexagram(seq, question)
        gua = cast.hexagram

        overview = (
            f"{gua['name']}卦（{gua['pinyin']}），第{gua['number']}卦\n"
            f"象曰：{gua['meaning']}\n"
            f"吉凶：{cast.grade}"
        )
        if cast.changing_lines:
            line_text = "\n".join(
                f"{LINE_NAMES[n - 1]}动：{LINE_TEXTS[n - 1]}" for n in cast.changing_lines
            )
        else:
            line_text = "六爻安静，无变爻，以本卦卦辞为断。"

        reading = TOPIC_READINGS[cast.topic][cast.grade]
        if question:
            reading = f"您所问「{question}」，得{gua['name']}卦。{reading}"

        return render_sections([
            ("卦象", overview),
            ("卦辞", f"{gua['description']}"),
            ("爻辞解读", line_text),
            ("运势分析", reading),
            ("建议", TOPIC_READINGS["default"][cast.grade]),
            ("总结", "以上解读仅供参考，具体决策还需结合实际情况，理性思考更为重要。"),
        ])
