#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
占卜服务 单元测试

测试范围：
- perform 正常 / 失败 / 超时路径
- 输入校验错误以返回值形式给出
- 结果加载、修复、替换、删除
"""

import time

from divination.core.exceptions import InvalidSeedInputError, ResultNotFoundError, UnknownMethodError
from divination.models.outcome import Ok
from divination.models.result import ResultSection
from divination.services.divination_service import DivinationService
from divination.services.method_registry import MethodRegistry
from divination.services.result_assembler import DISCLAIMER_TITLE


class TestPerform:
    """perform 测试类"""

    def test_unknown_method_returns_error(self, service):
        """测试：未知方法返回错误而非抛出异常"""
        # When
        result, error = service.perform("crystal_ball", {})

        # Then
        assert result is None
        assert isinstance(error, UnknownMethodError)
        assert error.code == 404

    def test_missing_required_input(self, service):
        result, error = service.perform("tarot", {})
        assert result is None
        assert isinstance(error, InvalidSeedInputError)
        assert error.field == "question"

    def test_malformed_date(self, service):
        result, error = service.perform("almanac", {"date": "2024-13-45"})
        assert result is None
        assert isinstance(error, InvalidSeedInputError)
        assert error.field == "date"

    def test_not_configured_falls_back_and_saves(self, service, store):
        """测试：未配置外部服务时本地模拟，结果被保存"""
        # When
        result, error = service.perform("almanac", {"date": "2024-03-15"})

        # Then
        assert error is None
        assert result.sections[0].title == DISCLAIMER_TITLE
        assert result.id in store.list_ids()

    def test_almanac_fallback_is_deterministic(self, service):
        first, _ = service.perform("almanac", {"date": "2024-03-15"})
        second, _ = service.perform("almanac", {"date": "2024-03-15"})
        assert [(s.title, s.content) for s in first.sections] == [(s.title, s.content) for s in second.sections]

    def test_ok_outcome_used(self, app_config, store, client_factory, ok_outcome):
        # Given
        client = client_factory(ok_outcome)
        service = DivinationService(app_config, store=store, client=client)

        # When
        result, error = service.perform("tarot", {"question": "工作"})
        service.close()

        # Then
        assert error is None
        assert [s.title for s in result.sections] == ["总论", "事业", "建议"]
        assert "工作" in client.prompts[0]

    def test_traditional_ok_requests_poem(self, app_config, store, client_factory, ok_outcome):
        client = client_factory(ok_outcome)
        service = DivinationService(app_config, store=store, client=client)
        result, _ = service.perform("zhouyi", {"question": "事业"})
        service.close()
        assert len(client.prompts) == 2
        assert result.sections[0].title == "签诗"

    def test_poem_keyword_failure_still_returns_result(self, monkeypatch, app_config, store,
                                                       client_factory, ok_outcome):
        """测试：签诗关键词提取出错时仍返回结果，签诗改为本地生成"""
        # Given
        def broken_keywords(text, max_keywords=5):
            raise RuntimeError("jieba 不可用")

        monkeypatch.setattr("divination.services.divination_service.extract_keywords", broken_keywords)
        client = client_factory(ok_outcome)
        service = DivinationService(app_config, store=store, client=client)

        # When
        result, error = service.perform("zhouyi", {"question": "事业"})
        service.close()

        # Then
        assert error is None
        assert len(client.prompts) == 1
        assert result.sections[0].title == "签诗"
        assert [s.title for s in result.sections[1:]] == ["总论", "事业", "建议"]

    def test_timeout_simulates_once_and_ignores_late_response(self, app_config, store, client_factory):
        """测试：外部调用超时后走本地模拟，迟到的响应不会出现在结果中"""
        # Given
        registry = MethodRegistry()
        registry.get("tarot").method.timeout_seconds = 0.2
        client = client_factory(Ok("【总论】迟到的外部内容"), delay=1.0)
        service = DivinationService(app_config, registry=registry, store=store, client=client)

        # When
        started = time.monotonic()
        result, error = service.perform("tarot", {"question": "工作"})
        elapsed = time.monotonic() - started
        service.close()

        # Then
        assert error is None
        assert elapsed < 1.0
        titles = [s.title for s in result.sections]
        assert titles[0] == DISCLAIMER_TITLE
        assert titles.count(DISCLAIMER_TITLE) == 1
        assert "超时" in result.sections[0].content
        assert all("迟到" not in s.content for s in result.sections)

    def test_fresh_draw_uses_time_seed(self, service):
        result, error = service.perform("tarot", {"question": "工作"}, fresh_draw=True)
        assert error is None
        assert result.sections[1].title == "塔罗牌阵"


class TestAlmanac:
    """almanac 测试类"""

    def test_structured_almanac(self, service, sample_date):
        day, error = service.almanac(sample_date)
        assert error is None
        assert day.day_ganzhi == "癸亥"

    def test_default_today(self, service):
        day, error = service.almanac()
        assert error is None
        assert day.solar_date

    def test_bad_date(self, service):
        day, error = service.almanac("not a date")
        assert day is None
        assert isinstance(error, InvalidSeedInputError)


class TestResultManagement:
    """结果管理测试类"""

    def test_load_missing(self, service):
        result, error = service.load_result("nope")
        assert result is None
        assert isinstance(error, ResultNotFoundError)

    def test_load_corrupt_is_repaired(self, service, store):
        """测试：损坏数据加载时被修复，保留调用方给出的ID"""
        # Given
        store.put_raw("bad-1", b"{not json")

        # When
        result, error = service.load_result("bad-1")

        # Then
        assert error is None
        assert result.id == "bad-1"
        assert result.method_id == "unknown"

    def test_list_newest_first(self, service):
        first, _ = service.perform("tarot", {"question": "一"})
        second, _ = service.perform("tarot", {"question": "二"})
        results, error = service.list_results()
        assert error is None
        assert [r.id for r in results] == [second.id, first.id]

    def test_replace_sections(self, service):
        # Given
        result, _ = service.perform("dream", {"dreamContent": "梦见下雨"})
        new_sections = [ResultSection(title="总论", content="用户修改后的内容")]

        # When
        updated, error = service.replace_sections(result.id, new_sections)
        loaded, _ = service.load_result(result.id)

        # Then
        assert error is None
        assert updated.id == result.id
        assert [(s.title, s.content) for s in loaded.sections] == [("总论", "用户修改后的内容")]

    def test_replace_with_blank_sections_is_repaired(self, service):
        result, _ = service.perform("dream", {"dreamContent": "梦见下雨"})
        updated, error = service.replace_sections(result.id, [ResultSection(title="总论", content=" ")])
        assert error is None
        assert updated.sections[0].title == "数据恢复"
        assert updated.method_id == "dream"

    def test_delete(self, service):
        result, _ = service.perform("face", {})
        deleted, error = service.delete_result(result.id)
        assert deleted is True
        assert error is None
        deleted, error = service.delete_result(result.id)
        assert deleted is False
        assert isinstance(error, ResultNotFoundError)
