#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
结果组装器

外部补全结果可用时以外部内容为准；否则调用本地生成器模拟，
并在最前面加一个【提示】章节说明原因。传统类方法再加一段签诗。
无论哪条路径，返回的结果至少有一个有效章节。
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from divination.generators.poem import POEM_TITLE, generate_poem
from divination.generators.seeds import seed_from_inputs
from divination.models.outcome import CompletionOutcome, Ok
from divination.models.result import DivinationResult, ResultSection
from divination.parsers.chart_extractor import normalize_chart_text
from divination.parsers.section_parser import SectionParser
from divination.utils.keyword_extractor import extract_keywords

logger = logging.getLogger(__name__)

DISCLAIMER_TITLE = "提示"
DISCLAIMER_TEXT = "本次结果由本地模拟生成，仅供娱乐参考。"
CHART_SECTION_KEYWORD = "星盘"


def disclaimer_section(reason: Optional[str]) -> ResultSection:
    content = DISCLAIMER_TEXT
    if reason:
        content += f"\n原因：{reason}"
    return ResultSection(title=DISCLAIMER_TITLE, content=content)


def parse_external(spec, text: Optional[str]) -> List[ResultSection]:
    """解析外部内容，只保留有效章节"""
    if not text or not text.strip():
        return []
    sections = [s for s in spec.parser.parse(text) if s.is_valid]
    if spec.id == "astrology":
        sections = [_normalize_chart(s) for s in sections]
    return sections


def _normalize_chart(section: ResultSection) -> ResultSection:
    if CHART_SECTION_KEYWORD not in section.title:
        return section
    normalized = normalize_chart_text(section.content)
    if not normalized:
        return section
    return ResultSection(title=section.title, content=normalized, score=section.score)


def simulate(spec, inputs: Dict[str, str], seed: int) -> List[ResultSection]:
    """本地模拟：生成 -> 解析；解析不出有效章节时用静态模板"""
    text = spec.generator.generate(seed, inputs)
    sections = [s for s in spec.parser.parse(text) if s.is_valid]
    if sections:
        return sections
    logger.warning(f"方法 {spec.id} 模拟内容解析为空，使用静态模板")
    return static_sections(spec, inputs)


def static_sections(spec, inputs: Dict[str, str]) -> List[ResultSection]:
    sections = [s for s in SectionParser().parse(spec.generator.static_template(inputs)) if s.is_valid]
    return sections or [ResultSection(title=spec.name, content=DISCLAIMER_TEXT)]


def poem_section(spec, sections: List[ResultSection],
                 poem_outcome: Optional[CompletionOutcome]) -> ResultSection:
    """签诗章节：外部签诗可用时直接使用，否则按内容关键词本地选诗"""
    if isinstance(poem_outcome, Ok) and poem_outcome.text.strip():
        return ResultSection(title=POEM_TITLE, content=poem_outcome.text.strip())
    keywords = extract_keywords("\n".join(s.content for s in sections))
    return ResultSection(title=POEM_TITLE, content=generate_poem(spec.name, keywords))


def assemble(spec, inputs: Dict[str, str], outcome: Optional[CompletionOutcome], *,
             poem_outcome: Optional[CompletionOutcome] = None,
             seed: Optional[int] = None,
             result_id: Optional[str] = None,
             created_at: Optional[datetime] = None) -> DivinationResult:
    """
    组装占卜结果

    Args:
        spec: 方法配置（MethodSpec）
        inputs: 用户输入
        outcome: 外部补全结果，None 表示没有调用
        poem_outcome: 外部签诗结果
        seed: 模拟用种子，默认由方法与输入推导

    Returns:
        DivinationResult，章节非空
    """
    inputs = dict(inputs or {})
    if seed is None:
        seed = seed_from_inputs(spec.id, inputs)

    sections: List[ResultSection] = []
    reason = None
    try:
        if isinstance(outcome, Ok):
            sections = parse_external(spec, outcome.text)
            if not sections:
                reason = "外部返回内容无法解析"
        elif outcome is None:
            reason = "未调用外部服务"
        else:
            reason = outcome.reason
    except Exception as e:
        logger.warning(f"方法 {spec.id} 外部内容处理失败: {e}", exc_info=True)
        sections, reason = [], "外部内容处理失败"

    if not sections:
        logger.warning(f"方法 {spec.id} 使用本地模拟: {reason}")
        try:
            sections = [disclaimer_section(reason)] + simulate(spec, inputs, seed)
        except Exception as e:
            logger.error(f"方法 {spec.id} 本地模拟失败: {e}", exc_info=True)
            sections = [disclaimer_section(reason)] + static_sections(spec, inputs)

    if spec.is_traditional:
        try:
            poem = poem_section(spec, sections, poem_outcome)
            insert_at = 1 if sections[0].title == DISCLAIMER_TITLE else 0
            sections.insert(insert_at, poem)
        except Exception as e:
            logger.warning(f"方法 {spec.id} 签诗生成失败: {e}", exc_info=True)

    fields = {"method_id": spec.id, "inputs": inputs, "sections": sections}
    if result_id:
        fields["id"] = result_id
    if created_at:
        fields["created_at"] = created_at
    return DivinationResult(**fields)
