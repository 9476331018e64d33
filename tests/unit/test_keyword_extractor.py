#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
关键词提取 单元测试
"""

from divination.utils.keyword_extractor import STOPWORDS, extract_keywords


class TestExtractKeywords:
    """extract_keywords 测试类"""

    def test_domain_keywords_first(self):
        """测试：命理主题词按词库顺序优先"""
        # Given
        text = "今年感情顺利，事业也有起色"

        # When
        keywords = extract_keywords(text)

        # Then
        assert keywords[:2] == ["事业", "感情"]

    def test_limit(self):
        text = "事业 工作 升职 考试 财运 投资 生意 感情"
        assert extract_keywords(text, max_keywords=3) == ["事业", "工作", "升职"]

    def test_deterministic(self):
        text = "梦见自己在山顶看日出，心情非常舒畅，后来下山遇到老朋友。"
        assert extract_keywords(text) == extract_keywords(text)

    def test_stopwords_and_single_chars_excluded(self):
        keywords = extract_keywords("我们应该如何注意这个方面的问题")
        assert not set(keywords) & STOPWORDS
        assert all(len(k) >= 2 for k in keywords)

    def test_blank(self):
        assert extract_keywords("") == []
        assert extract_keywords("   ") == []
