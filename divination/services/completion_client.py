#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
外部补全接口客户端（OpenAI 兼容的 chat/completions，默认 DeepSeek）

complete() 不抛出异常，所有失败都以 Failed(reason, kind) 返回。
"""

import logging
from typing import Optional

import requests

from divination.config.app_config import CompletionConfig
from divination.core.exceptions import ErrorKind
from divination.models.outcome import CompletionOutcome, Failed, Ok

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "你是一位精通中西方命理的专业分析师，请严格按照用户要求的【标题】格式输出。"


class CompletionClient:
    """补全接口客户端"""

    def __init__(self, config: CompletionConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def complete(self, prompt: str, timeout: float = 60) -> CompletionOutcome:
        """
        调用补全接口

        Args:
            prompt: 提示词
            timeout: 请求超时（秒）

        Returns:
            Ok(text) 或 Failed(reason, kind)
        """
        if not self.config.is_configured:
            return Failed("未配置 API 密钥", ErrorKind.NOT_CONFIGURED)

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        payload = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
        }

        try:
            logger.info(f"发送补全请求: {self.config.api_url}, 提示词长度: {len(prompt)}")
            response = self.session.post(self.config.api_url, headers=headers, json=payload, timeout=timeout)
        except requests.exceptions.Timeout:
            logger.warning(f"补全请求超时（{timeout}秒）")
            return Failed(f"请求超时（{timeout}秒）", ErrorKind.TIMEOUT)
        except requests.exceptions.RequestException as e:
            logger.warning(f"补全请求网络错误: {e}")
            return Failed(f"网络错误: {e}", ErrorKind.NETWORK_ERROR)

        if response.status_code != 200:
            logger.warning(f"补全接口返回 HTTP {response.status_code}: {response.text[:200]}")
            return Failed(f"HTTP {response.status_code}", ErrorKind.HTTP_ERROR)

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning(f"补全接口响应格式异常: {e}")
            return Failed(f"响应格式异常: {e}", ErrorKind.BAD_PAYLOAD)

        if not isinstance(content, str) or not content.strip():
            return Failed("响应内容为空", ErrorKind.EMPTY_RESPONSE)

        logger.info(f"补全请求成功，响应长度: {len(content)}")
        return Ok(content)
