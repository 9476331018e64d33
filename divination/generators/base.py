#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
内容生成器基类

生成器输出【标题】格式的原始文本，交给分段解析器处理。
generate() 不会抛出异常：内部出错时记录日志并返回静态模板。
"""

import logging
from typing import Dict, Iterable, List, Tuple

from divination.core.seeded_sequence import SeededSequence

logger = logging.getLogger(__name__)

Section = Tuple[str, str]


def render_sections(sections: Iterable[Section]) -> str:
    """把 (标题, 内容) 列表渲染为 【标题】\\n内容\\n\\n 格式"""
    parts = []
    for title, content in sections:
        parts.append(f"【{title}】\n{content.strip()}\n\n")
    return "".join(parts)


class ContentGenerator:
    """生成器基类，子类实现 _render() 并提供 STATIC_SECTIONS"""

    method_id = ""
    STATIC_SECTIONS: List[Section] = [
        ("分析结果", "根据您提供的信息，整体运势平稳，宜稳中求进。"),
        ("建议", "1. 保持积极心态\n2. 做事循序渐进\n3. 多与亲友沟通交流"),
    ]

    def generate(self, seed: int, inputs: Dict[str, str]) -> str:
        """
        生成内容

        Args:
            seed: 种子，相同种子与输入得到相同文本
            inputs: 用户输入

        Returns:
            【标题】格式的文本，保证非空
        """
        try:
            text = self._render(SeededSequence(seed), inputs or {})
            if text and text.strip():
                return text
            logger.warning(f"生成器 {self.method_id} 输出为空，使用静态模板")
        except Exception as e:
            logger.warning(f"生成器 {self.method_id} 生成失败，使用静态模板: {e}", exc_info=True)
        return self.static_template(inputs or {})

    def static_template(self, inputs: Dict[str, str]) -> str:
        return render_sections(self.STATIC_SECTIONS)

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        raise NotImplementedError
