#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
结果存储

ResultStore 只负责字节的读写，load() 返回原始字节，
损坏数据由 repair_pipeline 处理。
"""

import json
import logging
import os
import re
import threading
from typing import Dict, List, Optional, Protocol

from divination.config.app_config import StorageConfig
from divination.models.result import DivinationResult

logger = logging.getLogger(__name__)

INDEX_FILE = "index.json"
_SAFE_ID = re.compile(r"^[A-Za-z0-9_\-]{1,64}$")


class ResultStore(Protocol):
    def save(self, result: DivinationResult) -> bool: ...

    def load(self, result_id: str) -> Optional[bytes]: ...

    def list_ids(self) -> List[str]: ...

    def delete(self, result_id: str) -> bool: ...


class InMemoryResultStore:
    """内存存储，用于测试和 DIVINATION_STORAGE=memory"""

    def __init__(self):
        self._items: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def save(self, result: DivinationResult) -> bool:
        with self._lock:
            self._items[result.id] = result.to_json().encode("utf-8")
        return True

    def put_raw(self, result_id: str, data: bytes):
        """直接写入原始字节"""
        with self._lock:
            self._items[result_id] = data

    def load(self, result_id: str) -> Optional[bytes]:
        with self._lock:
            return self._items.get(result_id)

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._items)

    def delete(self, result_id: str) -> bool:
        with self._lock:
            return self._items.pop(result_id, None) is not None


class FileResultStore:
    """
    文件存储：每个结果一个 JSON 文件，index.json 记录保存顺序

    写入先写临时文件再替换，避免半写入的文件。
    """

    def __init__(self, results_dir: str):
        self.results_dir = results_dir
        self._lock = threading.Lock()
        os.makedirs(results_dir, exist_ok=True)

    def _path(self, result_id: str) -> str:
        if not _SAFE_ID.match(result_id or ""):
            raise ValueError(f"非法的结果ID: {result_id}")
        return os.path.join(self.results_dir, f"{result_id}.json")

    def _write(self, path: str, data: bytes):
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "wb") as f:
            f.write(data)
        os.replace(tmp_path, path)

    def _read_index(self) -> List[str]:
        path = os.path.join(self.results_dir, INDEX_FILE)
        if not os.path.exists(path):
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                ids = json.load(f)
            return [str(i) for i in ids] if isinstance(ids, list) else []
        except (OSError, ValueError) as e:
            logger.warning(f"索引文件损坏，按目录重建: {e}")
            return sorted(name[:-5] for name in os.listdir(self.results_dir)
                          if name.endswith(".json") and name != INDEX_FILE)

    def _write_index(self, ids: List[str]):
        data = json.dumps(ids, ensure_ascii=False).encode("utf-8")
        self._write(os.path.join(self.results_dir, INDEX_FILE), data)

    def save(self, result: DivinationResult) -> bool:
        try:
            path = self._path(result.id)
            with self._lock:
                self._write(path, result.to_json().encode("utf-8"))
                ids = self._read_index()
                if result.id not in ids:
                    ids.append(result.id)
                    self._write_index(ids)
            logger.info(f"结果已保存: {result.id}")
            return True
        except (OSError, ValueError) as e:
            logger.error(f"保存结果失败 {result.id}: {e}", exc_info=True)
            return False

    def load(self, result_id: str) -> Optional[bytes]:
        try:
            path = self._path(result_id)
        except ValueError:
            return None
        if not os.path.exists(path):
            return None
        with open(path, "rb") as f:
            return f.read()

    def list_ids(self) -> List[str]:
        with self._lock:
            return [i for i in self._read_index()
                    if os.path.exists(os.path.join(self.results_dir, f"{i}.json"))]

    def delete(self, result_id: str) -> bool:
        try:
            path = self._path(result_id)
        except ValueError:
            return False
        with self._lock:
            if not os.path.exists(path):
                return False
            try:
                os.remove(path)
                ids = [i for i in self._read_index() if i != result_id]
                self._write_index(ids)
            except OSError as e:
                logger.error(f"删除结果失败 {result_id}: {e}", exc_info=True)
                return False
        logger.info(f"结果已删除: {result_id}")
        return True


def create_store(config: StorageConfig):
    """根据配置创建存储"""
    if config.backend == "memory":
        return InMemoryResultStore()
    return FileResultStore(config.results_dir)
