#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
奇门遁甲生成器 - 按问事主题取用神之门，种子决定值符星与值使门
"""

from typing import Dict, Optional

from divination.core.seeded_sequence import SeededSequence
from divination.data.symbol_tables import EIGHT_GATES, NINE_STARS, QIMEN_TOPIC_GATES, QIMEN_TOPIC_KEYWORDS
from divination.generators.base import ContentGenerator, render_sections

GATES_BY_NAME = {g[0]: g for g in EIGHT_GATES}


def detect_qimen_topic(question: str) -> Optional[str]:
    for topic, keywords in QIMEN_TOPIC_KEYWORDS.items():
        if any(k in question for k in keywords):
            return topic
    return None


class QimenGenerator(ContentGenerator):
    """奇门遁甲"""

    method_id = "qimen"
    STATIC_SECTIONS = [
        ("奇门盘局", "值符天禽星，值使生门。"),
        ("吉凶判断", "局中吉门得用，所问之事可以推进，但需把握时机。"),
        ("建议", "1. 择吉时行事\n2. 先谋后动\n3. 广结善缘"),
    ]

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        question = inputs.get("question", "").strip()
        star_name, star_text = seq.choice(NINE_STARS)
        duty_gate = seq.choice(EIGHT_GATES)
        topic = detect_qimen_topic(question)
        use_gate = GATES_BY_NAME[QIMEN_TOPIC_GATES[topic]] if topic else duty_gate

        board = f"值符：{star_name}（{star_text}）\n值使：{duty_gate[0]}（{duty_gate[1]}）"
        if question:
            board = f"所问之事：{question}\n" + board

        use_text = f"用神取{use_gate[0]}，{use_gate[2]}。"
        if use_gate[0] == duty_gate[0]:
            use_text += "用神与值使同宫，所问之事正当其时。"

        lucky_count = [duty_gate[1], use_gate[1]].count("吉")
        if lucky_count == 2:
            verdict = "值使与用神皆为吉门，时机成熟，可积极行动。"
        elif lucky_count == 1:
            verdict = "吉凶参半，宜先稳住阵脚，择机而动。"
        elif "凶" in (duty_gate[1], use_gate[1]):
            verdict = "局中凶门当值，暂宜守静，不宜强求。"
        else:
            verdict = "局势平平，按部就班即可，不必急于求成。"

        return render_sections([
            ("奇门盘局", board),
            ("用神分析", use_text),
            ("吉凶判断", verdict),
            ("建议", "1. 择吉时、吉方行事\n2. 先谋后动，避免仓促决定\n3. 借助贵人之力，事半功倍"),
        ])
