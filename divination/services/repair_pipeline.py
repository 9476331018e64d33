#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
持久化结果修复

加载的结果只有三种状态：
- VALID: 至少一个有效章节，原样返回
- EMPTY_OR_BLANK: 能识别出 id / methodId，但没有有效章节 -> 数据恢复章节
- UNPARSEABLE: 不是 JSON，或不是带 id + methodId 的对象 -> 数据损坏结果

修复后的结果都带有效章节，再次修复时原样返回。
"""

import json
import logging
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from divination.models.result import DivinationResult, ResultSection

logger = logging.getLogger(__name__)

UNKNOWN_METHOD = "unknown"
RECOVERY_TITLE = "数据恢复"
CORRUPTED_TITLE = "数据损坏"

METHOD_NOTES: Dict[str, List[Tuple[str, str]]] = {
    "bazi": [
        ("八字简介", "八字以出生年、月、日、时的天干地支组成四柱，通过五行生克判断命局强弱。"),
        ("解读要点", "重点关注日主强弱、五行是否平衡，以及大运流年与命局的配合。"),
    ],
    "almanac": [
        ("黄历简介", "老黄历记录每日宜忌、吉凶方位与时辰吉凶，是传统择日的参考。"),
        ("使用建议", "可重新查询当日黄历获取完整宜忌信息。"),
    ],
    "ziwei": [
        ("紫微斗数简介", "紫微斗数以出生时间排出十二宫星盘，依主星落宫论断命运。"),
        ("解读要点", "命宫、财帛宫、官禄宫与夫妻宫是最常关注的四个宫位。"),
    ],
    "zhouyi": [
        ("周易简介", "周易以六十四卦象征万事变化，通过本卦与变爻判断事情走向。"),
        ("解读要点", "卦辞言整体之势，爻辞言细节之变，变爻所在即变化关键。"),
    ],
    "qimen": [
        ("奇门遁甲简介", "奇门遁甲以时间起局，结合八门、九星、八神推断事情吉凶。"),
        ("解读要点", "先看用神所落之门，再看值符值使的配合。"),
    ],
    "dream": [
        ("解梦简介", "周公解梦从梦中意象出发，结合做梦者处境解读梦境寓意。"),
        ("解读要点", "梦境多反映近期心理状态，宜结合现实情况理解。"),
    ],
    "palmistry": [
        ("手相简介", "手相通过掌纹、掌形与指节观察性格倾向与运势起伏。"),
        ("解读要点", "生命线、智慧线与感情线是三条主要纹路。"),
    ],
    "face": [
        ("面相简介", "面相通过五官比例与气色观察性格与运势。"),
        ("解读要点", "三停五眼是面相的基本比例参照。"),
    ],
    "tarot": [
        ("塔罗简介", "塔罗牌由 22 张大阿卡纳和 56 张小阿卡纳组成，通过牌阵解读问题。"),
        ("解读要点", "牌的正逆位与所在位置共同决定含义。"),
    ],
    "astrology": [
        ("占星简介", "占星通过出生时刻的行星位置绘制星盘，分析性格与人生主题。"),
        ("解读要点", "太阳、月亮与上升星座是星盘的三大核心。"),
    ],
    "numerology": [
        ("数字命理简介", "数字命理把生日和姓名化约为个位数，以数字能量解读人生课题。"),
        ("解读要点", "生命灵数代表人生主线，表现数字代表外在呈现。"),
    ],
}

DEFAULT_NOTES = [
    ("方法说明", "该结果的原始内容已无法读取，以下为通用说明。"),
    ("使用建议", "建议重新进行一次占卜以获取完整结果。"),
]


class RepairState(str, Enum):
    VALID = "valid"
    EMPTY_OR_BLANK = "empty_or_blank"
    UNPARSEABLE = "unparseable"


RawResult = Union[bytes, str, dict, DivinationResult]


def _decode(data: RawResult) -> Optional[dict]:
    """bytes/str -> dict，无法解析时返回 None"""
    if isinstance(data, dict):
        return data
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if not isinstance(data, str):
        return None
    try:
        value = json.loads(data)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def _has_identity(raw: dict) -> bool:
    return bool(str(raw.get("id") or "").strip()) and bool(str(raw.get("methodId") or "").strip())


def _salvage_sections(raw_sections: Any) -> List[ResultSection]:
    """逐个校验章节，丢弃格式错误的"""
    if not isinstance(raw_sections, list):
        return []
    sections = []
    for item in raw_sections:
        if not isinstance(item, dict):
            continue
        try:
            section = ResultSection(
                title=str(item.get("title") or ""),
                content=str(item.get("content") or ""),
                score=-1 if item.get("score") is None else item["score"],
            )
        except (ValidationError, TypeError, ValueError):
            section = ResultSection(title=str(item.get("title") or ""), content=str(item.get("content") or ""))
        if section.is_valid:
            sections.append(section)
    return sections


def _salvage(raw: dict) -> DivinationResult:
    """从结构不完整的对象中恢复出结果，章节可能为空"""
    created_at = datetime.now()
    raw_time = raw.get("createTime")
    if isinstance(raw_time, str):
        try:
            created_at = datetime.fromisoformat(raw_time)
        except ValueError:
            logger.warning(f"结果 {raw.get('id')} 的创建时间无法解析: {raw_time}")
    inputs = raw.get("inputData")
    inputs = {str(k): "" if v is None else str(v) for k, v in inputs.items()} if isinstance(inputs, dict) else {}
    return DivinationResult(
        id=str(raw["id"]),
        method_id=str(raw["methodId"]),
        created_at=created_at,
        inputs=inputs,
        sections=_salvage_sections(raw.get("resultSections")),
    )


def _load(data: RawResult) -> Tuple[RepairState, Optional[DivinationResult]]:
    if isinstance(data, DivinationResult):
        result = data
    else:
        raw = _decode(data)
        if raw is None or not _has_identity(raw):
            return RepairState.UNPARSEABLE, None
        try:
            result = DivinationResult.model_validate(raw)
        except ValidationError:
            result = _salvage(raw)
    if result.has_valid_sections():
        return RepairState.VALID, result
    return RepairState.EMPTY_OR_BLANK, result


def classify(data: RawResult) -> RepairState:
    return _load(data)[0]


def recovery_sections(method_id: str) -> List[ResultSection]:
    notes = METHOD_NOTES.get(method_id, DEFAULT_NOTES)
    disclaimer = ResultSection(
        title=RECOVERY_TITLE,
        content="原始结果内容为空或已损坏，以下为系统生成的说明内容，建议重新占卜。",
    )
    return [disclaimer] + [ResultSection(title=t, content=c) for t, c in notes]


def corrupted_result(result_id: Optional[str] = None) -> DivinationResult:
    sections = [
        ResultSection(title=CORRUPTED_TITLE, content="保存的结果数据无法读取，原始内容已丢失。"),
        ResultSection(title="可能原因", content="文件在写入过程中中断，或被其他程序修改。"),
        ResultSection(title="建议", content="请删除该记录后重新占卜。"),
    ]
    return DivinationResult(
        id=result_id or str(uuid.uuid4()),
        method_id=UNKNOWN_METHOD,
        sections=sections,
    )


def repair(data: RawResult, result_id: Optional[str] = None) -> DivinationResult:
    """
    修复加载的结果

    Args:
        data: 原始字节/字符串、字典或 DivinationResult
        result_id: 调用方已知的结果ID，数据损坏时沿用

    Returns:
        至少有一个有效章节的 DivinationResult
    """
    state, result = _load(data)
    if state == RepairState.VALID:
        return result
    if state == RepairState.EMPTY_OR_BLANK:
        logger.warning(f"结果 {result.id} 章节为空，生成数据恢复内容")
        return result.with_sections(recovery_sections(result.method_id))
    logger.warning(f"结果 {result_id or '(未知)'} 数据无法解析，生成数据损坏结果")
    return corrupted_result(result_id)
