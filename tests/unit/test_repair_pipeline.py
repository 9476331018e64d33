#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
结果修复 单元测试

测试范围：
- 三种状态的判定
- 空章节修复保留元数据
- 损坏数据生成数据损坏结果
- 修复幂等
"""

import json
from datetime import datetime

import pytest

from divination.models.result import DivinationResult, ResultSection
from divination.services.repair_pipeline import (
    CORRUPTED_TITLE, RECOVERY_TITLE, UNKNOWN_METHOD, RepairState, classify, repair,
)


def stored(sections, **overrides) -> dict:
    data = {
        "id": "result-001",
        "methodId": "bazi",
        "createTime": "2024-03-15T09:30:00",
        "inputData": {"birthDate": "1990-05-17", "gender": "男"},
        "resultSections": sections,
    }
    data.update(overrides)
    return data


class TestClassify:
    """状态判定测试类"""

    def test_valid(self):
        data = stored([{"title": "总论", "content": "平稳", "score": -1}])
        assert classify(data) == RepairState.VALID

    @pytest.mark.parametrize("sections", [
        [],
        [{"title": "总论", "content": "   "}],
        [{"title": "", "content": "内容"}],
        None,
    ])
    def test_empty_or_blank(self, sections):
        assert classify(stored(sections)) == RepairState.EMPTY_OR_BLANK

    @pytest.mark.parametrize("data", [
        b"\x00\xff not json",
        "{truncated",
        "[1, 2, 3]",
        json.dumps({"resultSections": []}),
        json.dumps({"id": "x"}),
    ])
    def test_unparseable(self, data):
        assert classify(data) == RepairState.UNPARSEABLE


class TestRepair:
    """修复测试类"""

    def test_empty_sections_repaired_with_metadata_preserved(self):
        """测试：sections 为空时生成 ≥2 个章节，id / methodId / inputs 不变"""
        # Given
        data = json.dumps(stored([])).encode("utf-8")

        # When
        result = repair(data)

        # Then
        assert len(result.sections) >= 2
        assert result.sections[0].title == RECOVERY_TITLE
        assert result.id == "result-001"
        assert result.method_id == "bazi"
        assert result.inputs == {"birthDate": "1990-05-17", "gender": "男"}
        assert result.created_at == datetime(2024, 3, 15, 9, 30)

    def test_valid_result_returned_unchanged(self):
        # Given
        original = DivinationResult(
            method_id="tarot",
            sections=[ResultSection(title="总论", content="好")],
        )

        # When
        result = repair(original)

        # Then
        assert result == original

    def test_malformed_sections_salvaged(self):
        """测试：格式错误的章节被丢弃，有效章节保留"""
        # Given
        data = stored([
            "not a section",
            {"title": "总论", "content": "保留", "score": 500},
            {"title": "事业", "content": "也保留"},
            {"title": "空", "content": ""},
        ], inputData={"age": 30})

        # When
        result = repair(data)

        # Then
        assert [(s.title, s.content) for s in result.sections] == [("总论", "保留"), ("事业", "也保留")]
        assert result.sections[0].score == -1
        assert result.inputs == {"age": "30"}

    def test_corrupt_bytes_keep_caller_id(self):
        # When
        result = repair(b"{broken json", result_id="abc-123")

        # Then
        assert result.id == "abc-123"
        assert result.method_id == UNKNOWN_METHOD
        assert result.sections[0].title == CORRUPTED_TITLE
        assert len(result.valid_sections) >= 2

    def test_corrupt_without_id_gets_fresh_id(self):
        first = repair("garbage")
        second = repair("garbage")
        assert first.id and second.id
        assert first.id != second.id

    def test_unknown_method_uses_generic_notes(self):
        result = repair(stored([], methodId="mystery"))
        assert result.sections[0].title == RECOVERY_TITLE
        assert len(result.sections) == 3


class TestIdempotence:
    """修复幂等测试类"""

    @pytest.mark.parametrize("data", [
        stored([]),
        stored([{"title": "总论", "content": " "}]),
        b"not json at all",
        stored([{"title": "总论", "content": "有效"}]),
    ])
    def test_repair_twice_equals_once(self, data):
        # When
        once = repair(data, result_id="fixed-id")
        twice = repair(once, result_id="fixed-id")

        # Then
        assert twice == once

    def test_repair_after_storage_round_trip(self):
        once = repair(stored([]))
        again = repair(once.to_json())
        assert again.to_storage() == once.to_storage()
