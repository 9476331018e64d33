#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 假的补全客户端（不访问网络）
- 内存存储的占卜服务
- FastAPI 应用和测试客户端
"""

import time
from typing import List

import pytest

from divination.config.app_config import AppConfig, CompletionConfig, StorageConfig
from divination.core.exceptions import ErrorKind
from divination.models.outcome import Failed, Ok
from divination.services.divination_service import DivinationService
from divination.services.storage_service import InMemoryResultStore


# ==================== 假客户端 ====================

class FakeCompletionClient:
    """按预设返回结果的补全客户端，记录收到的提示词"""

    def __init__(self, outcome=None, delay: float = 0.0):
        self.outcome = outcome if outcome is not None else Failed("未配置 API 密钥", ErrorKind.NOT_CONFIGURED)
        self.delay = delay
        self.prompts: List[str] = []

    def complete(self, prompt: str, timeout: float = 60):
        self.prompts.append(prompt)
        if self.delay:
            time.sleep(self.delay)
        return self.outcome


# ==================== 配置与服务 Fixtures ====================

@pytest.fixture(scope="function")
def app_config() -> AppConfig:
    """
    测试用配置：内存存储，未配置 API 密钥

    Returns:
        AppConfig 实例
    """
    return AppConfig(
        env="local",
        debug=True,
        executor_workers=4,
        completion=CompletionConfig(api_key=None),
        storage=StorageConfig(backend="memory"),
    )


@pytest.fixture(scope="function")
def fake_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture(scope="function")
def store() -> InMemoryResultStore:
    return InMemoryResultStore()


@pytest.fixture(scope="function")
def service(app_config, fake_client, store):
    """
    内存存储 + 假客户端的占卜服务

    Yields:
        DivinationService 实例
    """
    svc = DivinationService(app_config, store=store, client=fake_client)
    yield svc
    svc.close()


@pytest.fixture(scope="function")
def ok_outcome():
    return Ok("【总论】整体运势平稳向上。\n\n【事业】工作上会遇到新的机会。\n\n【建议】保持耐心。")


# ==================== 应用和客户端 Fixtures ====================

@pytest.fixture(scope="function")
def app(service):
    """
    创建 FastAPI 应用实例

    Returns:
        FastAPI 应用实例
    """
    from divination.main import create_app
    return create_app(service.config, service=service)


@pytest.fixture(scope="function")
def client(app):
    """
    创建测试客户端

    Returns:
        TestClient 实例
    """
    from fastapi.testclient import TestClient
    return TestClient(app)


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_date() -> str:
    """
    示例日期

    Returns:
        日期字符串 YYYY-MM-DD
    """
    return "2024-03-15"


@pytest.fixture(scope="function")
def client_factory():
    """返回 FakeCompletionClient 类，用于构造特定行为的客户端"""
    return FakeCompletionClient
