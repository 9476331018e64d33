#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
占卜服务

对外入口，全部返回 (结果, 错误)，不抛出异常：
- perform: 校验输入 -> 外部补全（带超时）-> 组装 -> 保存
- almanac: 结构化黄历
- load_result / save_result / list_results / delete_result / replace_sections
"""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from datetime import date
from typing import Dict, List, Optional, Tuple

from divination.config.app_config import AppConfig
from divination.core.calendar_facts import DateLike, parse_date
from divination.core.exceptions import (
    BusinessError, ErrorKind, InvalidSeedInputError, ResultNotFoundError, StorageError,
)
from divination.generators.almanac import AlmanacDay, AlmanacGenerator
from divination.generators.seeds import seed_from_date, seed_from_inputs, seed_from_time
from divination.models.outcome import CompletionOutcome, Failed, Ok
from divination.models.result import DivinationResult, ResultSection
from divination.services.completion_client import CompletionClient
from divination.services.method_registry import MethodRegistry, MethodSpec
from divination.services.prompt_builder import build_poem_prompt
from divination.services.repair_pipeline import repair
from divination.services.result_assembler import assemble
from divination.services.storage_service import create_store
from divination.utils.keyword_extractor import extract_keywords

logger = logging.getLogger(__name__)

POEM_TIMEOUT = 30


class DivinationService:
    """占卜服务"""

    def __init__(self, config: Optional[AppConfig] = None, registry: Optional[MethodRegistry] = None,
                 store=None, client=None, executor: Optional[ThreadPoolExecutor] = None):
        self.config = config or AppConfig()
        self.registry = registry or MethodRegistry()
        self.store = store if store is not None else create_store(self.config.storage)
        self.client = client or CompletionClient(self.config.completion)
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(max_workers=self.config.executor_workers)
        self._almanac = AlmanacGenerator()

    def close(self):
        if self._owns_executor:
            self.executor.shutdown(wait=False)

    # ------------------------------------------------------------------
    # 占卜
    # ------------------------------------------------------------------

    def validate_inputs(self, spec: MethodSpec, inputs: Dict[str, str]) -> Dict[str, str]:
        """必填项和日期格式校验，返回去除首尾空白后的输入"""
        cleaned = {str(k): "" if v is None else str(v).strip() for k, v in (inputs or {}).items()}
        missing = spec.missing_inputs(cleaned)
        if missing:
            raise InvalidSeedInputError(f"缺少必填项: {', '.join(missing)}", field=missing[0])
        for field_id in spec.date_fields():
            if cleaned.get(field_id):
                parse_date(cleaned[field_id], field=field_id)
        return cleaned

    def seed_for(self, spec: MethodSpec, inputs: Dict[str, str], fresh_draw: bool = False) -> int:
        if spec.id == "almanac" and inputs.get("date"):
            return seed_from_date(inputs["date"])
        if spec.id == "tarot" and fresh_draw:
            return seed_from_time()
        return seed_from_inputs(spec.id, inputs)

    def call_external(self, prompt: str, timeout: float) -> CompletionOutcome:
        """在线程池中调用补全接口；超时后不再等待，迟到的响应被丢弃"""
        try:
            future = self.executor.submit(self.client.complete, prompt, timeout)
        except RuntimeError as e:
            return Failed(f"线程池不可用: {e}", ErrorKind.INTERNAL_ERROR)
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError:
            future.cancel()
            logger.warning(f"外部调用超时（{timeout}秒），改用本地模拟")
            return Failed(f"请求超时（{timeout}秒）", ErrorKind.TIMEOUT)
        except Exception as e:
            logger.error(f"外部调用异常: {e}", exc_info=True)
            return Failed(f"外部调用异常: {e}", ErrorKind.INTERNAL_ERROR)

    def request_poem(self, spec: MethodSpec, text: str) -> Optional[CompletionOutcome]:
        """按外部内容的关键词请求签诗；出错时返回 None，由组装器本地选诗"""
        try:
            prompt = build_poem_prompt(spec.name, extract_keywords(text))
        except Exception as e:
            logger.warning(f"方法 {spec.id} 签诗提示词构建失败: {e}", exc_info=True)
            return None
        return self.call_external(prompt, POEM_TIMEOUT)

    def perform(self, method_id: str, inputs: Dict[str, str],
                fresh_draw: bool = False) -> Tuple[Optional[DivinationResult], Optional[BusinessError]]:
        """
        执行占卜

        Args:
            method_id: 方法ID
            inputs: 用户输入
            fresh_draw: 塔罗重新洗牌，按当前时间取种子

        Returns:
            (结果, None) 或 (None, 错误)
        """
        try:
            spec = self.registry.get(method_id)
            inputs = self.validate_inputs(spec, inputs)
        except BusinessError as e:
            logger.warning(f"占卜请求被拒绝: {e.message}")
            return None, e

        logger.info(f"开始占卜: {spec.id}, 输入项: {list(inputs)}")
        outcome = self.call_external(spec.build_prompt(inputs), spec.timeout)

        poem_outcome = None
        if spec.is_traditional and isinstance(outcome, Ok):
            poem_outcome = self.request_poem(spec, outcome.text)

        result = assemble(spec, inputs, outcome, poem_outcome=poem_outcome,
                          seed=self.seed_for(spec, inputs, fresh_draw))
        if not self.store.save(result):
            logger.warning(f"结果 {result.id} 保存失败，仍返回给调用方")
        logger.info(f"占卜完成: {spec.id}, 结果ID: {result.id}, 章节数: {len(result.sections)}")
        return result, None

    def almanac(self, value: Optional[DateLike] = None) -> Tuple[Optional[AlmanacDay], Optional[BusinessError]]:
        """查询黄历，不调用外部接口"""
        try:
            day = parse_date(value, field="date") if value else None
            return self._almanac.compute(day or date.today()), None
        except BusinessError as e:
            return None, e

    # ------------------------------------------------------------------
    # 结果管理
    # ------------------------------------------------------------------

    def load_result(self, result_id: str) -> Tuple[Optional[DivinationResult], Optional[BusinessError]]:
        """加载结果，数据为空或损坏时返回修复后的结果"""
        try:
            data = self.store.load(result_id)
        except OSError as e:
            logger.error(f"读取结果失败 {result_id}: {e}", exc_info=True)
            return None, StorageError("结果读取失败")
        if data is None:
            return None, ResultNotFoundError(result_id)
        return repair(data, result_id=result_id), None

    def save_result(self, result: DivinationResult) -> Tuple[bool, Optional[BusinessError]]:
        if not result.has_valid_sections():
            result = repair(result)
        if self.store.save(result):
            return True, None
        return False, StorageError()

    def list_results(self) -> Tuple[List[DivinationResult], Optional[BusinessError]]:
        """按保存顺序倒序列出结果"""
        try:
            ids = self.store.list_ids()
        except OSError as e:
            logger.error(f"读取结果列表失败: {e}", exc_info=True)
            return [], StorageError("结果列表读取失败")
        results = []
        for result_id in reversed(ids):
            result, error = self.load_result(result_id)
            if result is not None:
                results.append(result)
        return results, None

    def delete_result(self, result_id: str) -> Tuple[bool, Optional[BusinessError]]:
        if self.store.delete(result_id):
            return True, None
        return False, ResultNotFoundError(result_id)

    def replace_sections(self, result_id: str,
                         sections: List[ResultSection]) -> Tuple[Optional[DivinationResult], Optional[BusinessError]]:
        """替换章节（用户修正后的内容），替换后没有有效章节时按空结果修复"""
        result, error = self.load_result(result_id)
        if error:
            return None, error
        updated = result.with_sections(sections)
        if not updated.has_valid_sections():
            updated = repair(updated)
        saved, error = self.save_result(updated)
        if error:
            return None, error
        return updated, None
