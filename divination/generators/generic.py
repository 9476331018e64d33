#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
通用生成器：紫微斗数、手相、面相及其他没有专用生成器的方法
"""

from typing import Dict

from divination.core.seeded_sequence import SeededSequence
from divination.data.symbol_tables import (
    GENERIC_DEFAULT_SECTIONS, GENERIC_SECTIONS, GENERIC_TOPIC_READINGS,
)
from divination.generators.base import ContentGenerator, render_sections

SUMMARIES = [
    "总的来说，您目前的整体运势平稳，只要保持积极态度，生活会越来越好。",
    "简单说，您的基础很扎实，耐心经营，自然会迎来收获。",
    "整体而言，机遇与挑战并存，把握节奏、稳中求进是最好的策略。",
]


class GenericGenerator(ContentGenerator):
    """按方法ID选取静态章节，再按输入关键词补充主题解读"""

    def __init__(self, method_id: str):
        self.method_id = method_id

    @property
    def base_sections(self):
        return GENERIC_SECTIONS.get(self.method_id, GENERIC_DEFAULT_SECTIONS)

    def static_template(self, inputs: Dict[str, str]) -> str:
        return render_sections(self.base_sections)

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        text = " ".join(str(v) for v in inputs.values())
        sections = list(self.base_sections)
        for keywords, title, reading in GENERIC_TOPIC_READINGS:
            if any(k in text for k in keywords):
                sections.append((title, reading))
        sections.append(("总结", seq.choice(SUMMARIES)))
        return render_sections(sections)
