#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
环境配置

环境判断与环境变量读取。.env 文件由 load_env_file() 加载，
只在应用入口调用一次。
"""

import logging
import os
from enum import Enum
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class EnvironmentType(Enum):
    """环境类型枚举"""
    LOCAL = "local"
    STAGING = "staging"
    PRODUCTION = "production"


def load_env_file(path: Optional[str] = None) -> bool:
    """
    加载 .env 文件，已存在的环境变量不会被覆盖

    Returns:
        是否找到并加载了文件
    """
    loaded = load_dotenv(path) if path else load_dotenv()
    if loaded:
        logger.info(f"已加载环境变量文件: {path or '.env'}")
    return loaded


def detect_environment() -> EnvironmentType:
    """优先读取 ENV，其次 APP_ENV，默认 local"""
    env_value = os.getenv("ENV", os.getenv("APP_ENV", "local")).lower()
    if env_value in ("prod", "production"):
        return EnvironmentType.PRODUCTION
    if env_value in ("staging", "stage"):
        return EnvironmentType.STAGING
    return EnvironmentType.LOCAL


def get_str(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


def get_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"环境变量 {key}={value} 不是整数，使用默认值 {default}")
        return default


def get_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"环境变量 {key}={value} 不是数字，使用默认值 {default}")
        return default
