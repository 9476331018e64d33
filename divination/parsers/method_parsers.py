#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
按方法定制的分段解析器

先用更严格的标题识别：文本中有方括号标题时只认方括号标题，
否则认独占一行或后跟冒号的已知标题；
识别不到再退回通用解析；过长的单个章节再用通用解析细分。
"""

import logging
import re
from typing import Iterable, List, Optional

from divination.models.result import ResultSection
from divination.parsers.section_parser import (
    PREAMBLE_TITLE, ParsedBlock, SectionParser, clean_title, parse_sections,
)

logger = logging.getLogger(__name__)

OVERLONG_SECTION = 800
MAX_SUBDIVIDE_DEPTH = 2

# 输出格式约定的通用标题
COMMON_TITLES = ["总论", "事业", "财运", "感情", "健康", "建议", "总结"]

ZHOUYI_TITLES = [
    "卦象", "卦名", "本卦", "变卦", "卦辞", "爻辞", "爻辞解读", "变爻", "卦象解析",
    "卦象寓意", "卦义", "运势分析", "问题分析",
]

TAROT_TITLES = [
    "塔罗牌阵", "牌阵", "牌面解读", "牌面分析", "专业分析", "专业详解",
    "牌阵解读", "综合解读", "问题分析",
]

ASTROLOGY_TITLES = [
    "星盘描述", "星盘分析", "太阳星座", "月亮星座", "上升星座", "相位分析", "行星相位",
    "宫位分析", "性格特质", "事业发展", "人际关系",
]

BRACKET_LINE = re.compile(
    r"^\s*(?:#{1,6}\s*)?(?:\*\*)?(?:【([^】\n]+)】|\[([^\[\]\n]{1,30})\](?!\())(?:\*\*)?\s*[:：]?\s*(.*)$"
)


def keyword_line_pattern(titles: Iterable[str]):
    alternatives = "|".join(re.escape(t) for t in sorted(set(titles), key=len, reverse=True))
    return re.compile(
        rf"^\s*(?:#{{1,6}}\s*|\d{{1,2}}[.、．]\s*)?(?:\*\*)?({alternatives})(?:\*\*)?\s*(?:[:：]\s*(.*))?$"
    )


class MethodSectionParser:
    """带已知标题表的解析器"""

    def __init__(self, method_id: str, titles: Iterable[str]):
        self.method_id = method_id
        self.keyword_line = keyword_line_pattern(list(titles) + COMMON_TITLES)
        self.generic = SectionParser()

    def _bracket_header(self, line: str) -> Optional[tuple]:
        match = BRACKET_LINE.match(line)
        if not match:
            return None
        if match.group(1) is not None:
            title = match.group(1).strip()
        else:
            title = clean_title(match.group(2))
            if title.isdigit():
                return None
        if not title:
            return None
        return title, match.group(3) or ""

    def _keyword_header(self, line: str) -> Optional[tuple]:
        match = self.keyword_line.match(line)
        if match:
            return match.group(1), match.group(2) or ""
        return None

    def parse_marked(self, text: str) -> List[ResultSection]:
        lines = text.split("\n")
        # 有方括号标题时只认方括号标题，正文里的"建议：…"之类不再当作标题
        if any(self._bracket_header(line) for line in lines):
            find_header = self._bracket_header
        else:
            find_header = self._keyword_header
        blocks: List[ParsedBlock] = []
        preamble: List[str] = []
        for line in lines:
            header = find_header(line)
            if header:
                blocks.append(ParsedBlock(header[0], [header[1]]))
            elif blocks:
                blocks[-1].lines.append(line)
            else:
                preamble.append(line)
        if "\n".join(preamble).strip() and blocks:
            blocks.insert(0, ParsedBlock(PREAMBLE_TITLE, preamble))
        sections = []
        for block in blocks:
            content = "\n".join(block.lines).strip()
            if block.title.strip() and content:
                sections.append(ResultSection(title=block.title.strip(), content=content))
        return sections

    def parse(self, text: Optional[str]) -> List[ResultSection]:
        if text is None or not str(text).strip():
            return []
        text = str(text).replace("\r\n", "\n").replace("\r", "\n")
        try:
            sections = self.parse_marked(text)
            if sections:
                logger.debug(f"{self.method_id} 标题识别命中，章节数: {len(sections)}")
            else:
                sections = self.generic.parse(text)
            return subdivide(sections)
        except Exception as e:
            logger.warning(f"{self.method_id} 分段解析失败，改用通用解析: {e}", exc_info=True)
            return self.generic.parse(text)


def subdivide(sections: List[ResultSection], depth: int = 0) -> List[ResultSection]:
    """把超长章节用通用解析再拆开，子章节标题为 父标题·子标题"""
    if depth >= MAX_SUBDIVIDE_DEPTH:
        return sections
    result = []
    for section in sections:
        if len(section.content) <= OVERLONG_SECTION:
            result.append(section)
            continue
        parts = parse_sections(section.content)
        if len(parts) <= 1:
            result.append(section)
            continue
        renamed = [
            ResultSection(title=f"{section.title}·{p.title}", content=p.content, score=section.score)
            for p in parts
        ]
        result.extend(subdivide(renamed, depth + 1))
    return result


class ZhouYiSectionParser(MethodSectionParser):
    def __init__(self):
        super().__init__("zhouyi", ZHOUYI_TITLES)


class TarotSectionParser(MethodSectionParser):
    def __init__(self):
        super().__init__("tarot", TAROT_TITLES)


class AstrologySectionParser(MethodSectionParser):
    def __init__(self):
        super().__init__("astrology", ASTROLOGY_TITLES)
