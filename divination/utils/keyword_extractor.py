#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
关键词提取 - 用于签诗选诗

先匹配命理主题词库，不足时用 jieba 分词按词频补充。
同样的文本总是得到同样的关键词。
"""

import logging
import re
from collections import Counter
from typing import List

import jieba

logger = logging.getLogger(__name__)

# 命理主题词库，与签诗主题对应
FORTUNE_KEYWORDS = [
    "事业", "工作", "升职", "考试", "财运", "投资", "生意", "感情", "婚姻", "姻缘",
    "恋爱", "桃花", "健康", "身体", "平安", "出行", "搬家", "远行", "官司", "纠纷",
    "学业", "学习", "读书", "运势", "命运",
]

STOPWORDS = {
    "什么", "怎么", "如何", "是否", "能否", "会不会", "有没有", "可以", "我们", "您的",
    "一个", "这个", "那个", "以及", "因为", "所以", "但是", "如果", "需要", "注意",
    "建议", "方面", "近期", "目前", "已经", "还是", "进行", "非常", "比较", "应该",
}

_CHINESE_WORD = re.compile(r"[一-龥]{2,4}")


def extract_keywords(text: str, max_keywords: int = 5) -> List[str]:
    """
    提取关键词

    Args:
        text: 文本
        max_keywords: 最大关键词数量

    Returns:
        关键词列表，按重要程度排序
    """
    if not text or not text.strip():
        return []

    keywords: List[str] = []
    for keyword in FORTUNE_KEYWORDS:
        if keyword in text:
            keywords.append(keyword)
            if len(keywords) >= max_keywords:
                return keywords

    tokens = [t for t in jieba.lcut(text) if len(t.strip()) >= 2 and _CHINESE_WORD.fullmatch(t.strip())]
    counts = Counter(tokens)
    first_seen = {}
    for i, token in enumerate(tokens):
        first_seen.setdefault(token, i)
    ranked = sorted(counts, key=lambda t: (-counts[t], first_seen[t]))

    for token in ranked:
        if token in STOPWORDS or token in keywords:
            continue
        keywords.append(token)
        if len(keywords) >= max_keywords:
            break

    logger.debug(f"关键词提取结果: {keywords}")
    return keywords
