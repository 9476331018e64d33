#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
业务异常定义

业务异常与系统错误区分开来：业务异常带有 HTTP 状态码和错误类型，
由 API 层统一转换为 {"success": False, "error": ..., "error_type": ...}。
"""

from enum import Enum


class ErrorKind(str, Enum):
    """外部调用失败类型"""
    NOT_CONFIGURED = "not_configured"
    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"
    EMPTY_RESPONSE = "empty_response"
    BAD_PAYLOAD = "bad_payload"
    INTERNAL_ERROR = "internal_error"


class BusinessError(Exception):
    """
    业务异常基类

    用于表示业务逻辑错误，与系统错误区分开来。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "business_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class InvalidSeedInputError(BusinessError):
    """日期或必填输入格式错误"""
    def __init__(self, message: str, field: str = None):
        self.field = field
        error_type = f"invalid_seed_input:{field}" if field else "invalid_seed_input"
        super().__init__(message, code=400, error_type=error_type)


class UnknownMethodError(BusinessError):
    """占卜方法不存在"""
    def __init__(self, method_id: str):
        self.method_id = method_id
        super().__init__(f"未知的占卜方法: {method_id}", code=404, error_type="unknown_method")


class ResultNotFoundError(BusinessError):
    """结果不存在"""
    def __init__(self, result_id: str):
        self.result_id = result_id
        super().__init__(f"占卜结果不存在: {result_id}", code=404, error_type="not_found")


class StorageError(BusinessError):
    """持久化失败"""
    def __init__(self, message: str = "结果保存失败"):
        super().__init__(message, code=503, error_type="storage_error")
