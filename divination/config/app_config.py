#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
应用配置

配置在入口处构建一次（AppConfig.from_env()），显式传给服务和应用，
不做模块级缓存。
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from divination.config.env_config import (
    EnvironmentType, detect_environment, get_bool, get_float, get_int, get_str,
)

DEFAULT_API_URL = "https://api.deepseek.com/v1/chat/completions"
DEFAULT_MODEL = "deepseek-chat"


@dataclass
class CompletionConfig:
    """外部补全接口配置"""
    api_key: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    max_tokens: int = 2000
    enabled: bool = True

    @property
    def is_configured(self) -> bool:
        return self.enabled and bool(self.api_key)

    @classmethod
    def from_env(cls) -> "CompletionConfig":
        """从环境变量创建配置"""
        api_key = get_str("DEEPSEEK_API_KEY")
        if api_key:
            api_key = "".join(api_key.split())
        return cls(
            api_key=api_key,
            api_url=get_str("DEEPSEEK_API_URL", DEFAULT_API_URL),
            model=get_str("DEEPSEEK_MODEL", DEFAULT_MODEL),
            temperature=get_float("DEEPSEEK_TEMPERATURE", 0.7),
            max_tokens=get_int("DEEPSEEK_MAX_TOKENS", 2000),
            enabled=get_bool("DEEPSEEK_ENABLED", True),
        )


@dataclass
class StorageConfig:
    """结果存储配置"""
    backend: str = "file"  # file | memory
    results_dir: str = "data/results"

    @classmethod
    def from_env(cls) -> "StorageConfig":
        backend = (get_str("DIVINATION_STORAGE", "file") or "file").lower()
        if backend not in ("file", "memory"):
            raise ValueError(f"DIVINATION_STORAGE 只支持 file 或 memory: {backend}")
        return cls(
            backend=backend,
            results_dir=get_str("DIVINATION_RESULTS_DIR", os.path.join("data", "results")),
        )


@dataclass
class AppConfig:
    """应用配置"""
    env: str = EnvironmentType.LOCAL.value
    debug: bool = False
    log_level: str = "INFO"
    executor_workers: int = 4

    # 子配置
    completion: CompletionConfig = field(default_factory=CompletionConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)

    @property
    def is_production(self) -> bool:
        return self.env == EnvironmentType.PRODUCTION.value

    @classmethod
    def from_env(cls) -> "AppConfig":
        """从环境变量创建完整配置"""
        env = detect_environment()
        cpu_count = os.cpu_count() or 4
        return cls(
            env=env.value,
            debug=get_bool("DEBUG", env == EnvironmentType.LOCAL),
            log_level=(get_str("LOG_LEVEL", "INFO") or "INFO").upper(),
            executor_workers=get_int("DIVINATION_EXECUTOR_WORKERS", min(cpu_count * 2, 32)),
            completion=CompletionConfig.from_env(),
            storage=StorageConfig.from_env(),
        )
