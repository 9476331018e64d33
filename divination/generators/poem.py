#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
签诗生成器 - 按主题关键词从预置的八句签诗中选一首
"""

from typing import Iterable, List

from divination.core.calendar_facts import stable_hash
from divination.core.seeded_sequence import SeededSequence
from divination.data.poems import POEMS

POEM_TITLE = "签诗"


def poem_seed(method_name: str, keywords: Iterable[str]) -> int:
    return stable_hash(POEM_TITLE, method_name, *keywords)


def select_poem(keywords: List[str], seed: int):
    """
    选诗：与关键词重合最多的签诗中按种子取一首，没有任何重合时在全部签诗中取

    Returns:
        (签名, 吉凶, 主题, 诗句)
    """
    scored = [(sum(1 for k in keywords if any(k in t or t in k for t in poem[2])), poem) for poem in POEMS]
    best = max(score for score, _ in scored)
    candidates = [poem for score, poem in scored if score == best] if best > 0 else list(POEMS)
    return SeededSequence(seed).choice(candidates)


def render_poem(poem, method_name: str) -> str:
    sign, grade, _, lines = poem
    couplets = [f"{lines[i]}，{lines[i + 1]}。" for i in range(0, len(lines), 2)]
    return f"{method_name}·{sign}（{grade}）\n" + "\n".join(couplets)


def generate_poem(method_name: str, keywords: List[str]) -> str:
    """签诗章节内容，相同方法与关键词得到同一首诗"""
    poem = select_poem(keywords, poem_seed(method_name, keywords))
    return render_poem(poem, method_name)
