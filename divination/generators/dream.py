#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
周公解梦生成器 - 按梦境关键词匹配意象解读
"""

from typing import Dict, List, Tuple

from divination.core.seeded_sequence import SeededSequence
from divination.data.symbol_tables import DREAM_DEFAULT, DREAM_SYMBOLS
from divination.generators.base import ContentGenerator, render_sections

MAX_SYMBOLS = 3

PSYCHOLOGY_NOTES = [
    "从心理学角度看，梦境是潜意识的表达，反映了内心深处的愿望、担忧和尚未解决的冲突。",
    "梦往往在白天的经历上加工而成，情绪强烈的片段更容易在梦里重现。",
    "反复出现的梦境，常常指向一个持续存在却被忽视的心理需求。",
]

ADVICES = [
    "睡前尽量放松，减少手机等电子设备的使用",
    "醒来后及时记录梦境，留意其中反复出现的意象",
    "近期可以适当放慢节奏，给自己独处和思考的时间",
    "与信任的人聊聊最近的压力，情绪说出来会轻松很多",
    "保持规律作息，梦境会随着身心状态改善而变得平和",
]


def match_symbols(text: str) -> List[Tuple[str, str]]:
    """返回 (意象名称, 解读)，按表中顺序，最多 MAX_SYMBOLS 个"""
    matched = []
    for keywords, name, reading in DREAM_SYMBOLS:
        if any(k in text for k in keywords):
            matched.append((name, reading))
        if len(matched) >= MAX_SYMBOLS:
            break
    return matched


class DreamGenerator(ContentGenerator):
    """周公解梦"""

    method_id = "dream"
    STATIC_SECTIONS = [
        ("梦境解析", DREAM_DEFAULT),
        ("建议", "1. 保持规律作息\n2. 醒来后记录梦境\n3. 适当放松，减轻压力"),
    ]

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        content = (inputs.get("dreamContent") or inputs.get("content") or "").strip()
        symbols = match_symbols(content)

        if symbols:
            symbol_text = "\n".join(f"{name}：{reading}" for name, reading in symbols)
            names = "、".join(name for name, _ in symbols)
            summary = f"您的梦中出现了{names}等意象，整体反映出您近期的内心状态，顺势调整即可，无需过度担忧。"
        else:
            symbol_text = DREAM_DEFAULT
            summary = "这个梦没有明显的吉凶指向，更多是日常情绪的自然流露，放松心情即可。"

        overview = f"梦境内容：{content}" if content else "未提供具体梦境内容，以下为通用解读。"
        advices = seq.sample(ADVICES, 3)

        return render_sections([
            ("梦境概述", overview),
            ("意象解析", symbol_text),
            ("心理分析", seq.choice(PSYCHOLOGY_NOTES)),
            ("建议", "\n".join(f"{i}. {a}" for i, a in enumerate(advices, 1))),
            ("总结", summary),
        ])
