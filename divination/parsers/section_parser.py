#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分段解析器

把任意文本解析为 (标题, 内容) 章节列表，依次尝试：
1. 方括号标题：【标题】内容 / [标题]内容
2. 冒号标题：行首短文本后跟冒号
3. 按空行分段
4. 整段文本作为一个章节

前一种策略得不到任何有效章节时才尝试下一种。
非空输入一定得到至少一个章节，解析过程不会抛出异常。
"""

import logging
import re
from collections import namedtuple
from typing import List, Optional

from divination.models.result import ResultSection

logger = logging.getLogger(__name__)

ParsedBlock = namedtuple("ParsedBlock", ["title", "lines"])

PREAMBLE_TITLE = "总论"
DEFAULT_TITLE = "分析结果"
POSITION_LABELS = ["概述", "详细解读", "建议"]

MAX_TITLE_LENGTH = 20
LONG_PARAGRAPH = 600

BRACKET_PATTERN = re.compile(r"【([^】\n]+)】|\[([^\[\]\n]{1,30})\](?!\()")
COLON_LINE = re.compile(r"^\s*([^:：\n]{1,40}?)\s*[:：](.*)$")
LIST_MARKER = re.compile(r"^\s*(?:#{1,6}\s*|[*\-•●]+\s*|\d{1,2}[.、．)）]\s*|[一二三四五六七八九十]{1,3}、\s*)")
SENTENCE_PUNCT = re.compile(r"[，。！？；,;!?]")
BLANK_LINES = re.compile(r"\n\s*\n")
SENTENCE_END = re.compile(r"(?<=[。！？!?；;.])")


def clean_title(raw: str) -> str:
    """去掉列表符号、Markdown 加粗和首尾空白"""
    title = LIST_MARKER.sub("", raw.strip(), count=1)
    return title.replace("**", "").replace("__", "").strip()


def _make(title: str, content: str) -> Optional[ResultSection]:
    title = title.strip()
    content = content.strip()
    if not title or not content:
        return None
    return ResultSection(title=title, content=content)


def _collect(blocks: List[ParsedBlock]) -> List[ResultSection]:
    sections = []
    for block in blocks:
        section = _make(block.title, "\n".join(block.lines))
        if section:
            sections.append(section)
    return sections


def parse_brackets(text: str) -> List[ResultSection]:
    """【标题】内容；首个标题前的非空文字作为"总论"章节"""
    matches = [m for m in BRACKET_PATTERN.finditer(text) if _bracket_title(m)]
    if not matches:
        return []
    blocks = []
    preamble = text[:matches[0].start()]
    if preamble.strip():
        blocks.append(ParsedBlock(PREAMBLE_TITLE, [preamble]))
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        blocks.append(ParsedBlock(_bracket_title(match), [text[match.end():end]]))
    return _collect(blocks)


def _bracket_title(match) -> str:
    # 【】标题原样保留，只去首尾空白
    if match.group(1) is not None:
        return match.group(1).strip()
    title = clean_title(match.group(2))
    # [1]、[2024] 之类的编号不算标题
    if title.isdigit():
        return ""
    return title


def colon_title(line: str) -> Optional[tuple]:
    """
    判断一行是否为冒号标题行

    Returns:
        (标题, 冒号后的文字) 或 None
    """
    match = COLON_LINE.match(line)
    if not match:
        return None
    title = clean_title(match.group(1))
    if not title or len(title) > MAX_TITLE_LENGTH:
        return None
    if title.isdigit() or SENTENCE_PUNCT.search(title):
        return None
    if title.lower() in ("http", "https"):
        return None
    return title, match.group(2)


def parse_colons(text: str) -> List[ResultSection]:
    """标题：内容，内容延续到下一个标题行"""
    blocks: List[ParsedBlock] = []
    preamble: List[str] = []
    for line in text.split("\n"):
        header = colon_title(line)
        if header:
            blocks.append(ParsedBlock(header[0], [header[1]]))
        elif blocks:
            blocks[-1].lines.append(line)
        else:
            preamble.append(line)
    if not blocks:
        return []
    if "\n".join(preamble).strip():
        blocks.insert(0, ParsedBlock(PREAMBLE_TITLE, preamble))
    return _collect(blocks)


def position_label(index: int, total: int) -> str:
    if index == 0:
        return POSITION_LABELS[0]
    if total >= 3 and index == total - 1:
        return POSITION_LABELS[2]
    if total > 3:
        return f"{POSITION_LABELS[1]}{index}"
    return POSITION_LABELS[1]


def split_long_text(text: str, max_chunks: int = 3) -> List[str]:
    """把过长的一段按句子切成 2-3 块，长度大致相等；没有句子边界时按字数切"""
    chunks_wanted = 3 if len(text) > LONG_PARAGRAPH * 2 else 2
    chunks_wanted = min(chunks_wanted, max_chunks)
    sentences = [s for s in SENTENCE_END.split(text) if s]
    if len(sentences) < chunks_wanted:
        size = -(-len(text) // chunks_wanted)
        return [text[i:i + size] for i in range(0, len(text), size)]

    target = len(text) / chunks_wanted
    chunks: List[str] = []
    current = ""
    for sentence in sentences:
        current += sentence
        if len(current) >= target and len(chunks) < chunks_wanted - 1:
            chunks.append(current)
            current = ""
    if current:
        chunks.append(current)
    return chunks


def parse_paragraphs(text: str) -> List[ResultSection]:
    """按空行分段：短首行作标题，否则按位置命名；只有一段且过长时切块"""
    paragraphs = [p.strip() for p in BLANK_LINES.split(text) if p.strip()]
    if len(paragraphs) == 1:
        if len(paragraphs[0]) <= LONG_PARAGRAPH:
            return []
        paragraphs = [c.strip() for c in split_long_text(paragraphs[0]) if c.strip()]

    sections = []
    total = len(paragraphs)
    for index, paragraph in enumerate(paragraphs):
        lines = paragraph.split("\n")
        first = clean_title(lines[0]).rstrip(":：")
        rest = "\n".join(lines[1:]).strip()
        if len(lines) > 1 and rest and first and len(first) <= MAX_TITLE_LENGTH:
            section = _make(first, rest)
        else:
            section = _make(position_label(index, total), paragraph)
        if section:
            sections.append(section)
    return sections


def parse_whole(text: str) -> List[ResultSection]:
    content = text.strip()
    if not content:
        return []
    first_line = clean_title(content.split("\n", 1)[0])
    title = first_line if first_line and len(first_line) <= MAX_TITLE_LENGTH else DEFAULT_TITLE
    return [ResultSection(title=title, content=content)]


STRATEGIES = [
    ("bracket", parse_brackets),
    ("colon", parse_colons),
    ("paragraph", parse_paragraphs),
]


class SectionParser:
    """通用分段解析器"""

    strategies = STRATEGIES

    def parse(self, text: Optional[str]) -> List[ResultSection]:
        """
        解析文本

        Args:
            text: 任意文本

        Returns:
            章节列表；输入非空时至少一个章节
        """
        if text is None or not str(text).strip():
            return []
        text = str(text).replace("\r\n", "\n").replace("\r", "\n")
        try:
            for name, strategy in self.strategies:
                sections = strategy(text)
                if sections:
                    logger.debug(f"分段策略 {name} 命中，章节数: {len(sections)}")
                    return sections
        except Exception as e:
            logger.warning(f"分段解析失败，整段作为一个章节: {e}", exc_info=True)
        return parse_whole(text)


def parse_sections(text: Optional[str]) -> List[ResultSection]:
    return SectionParser().parse(text)


def render_sections_text(sections: List[ResultSection]) -> str:
    """章节列表 -> 【标题】\\n内容\\n\\n 文本，parse 的逆操作"""
    return "".join(f"【{s.title}】\n{s.content}\n\n" for s in sections)
