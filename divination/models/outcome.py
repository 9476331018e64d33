#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
外部补全调用的结果类型：Ok(text) | Failed(reason, kind)

组装器根据结果类型显式选择走外部内容还是本地模拟，不依赖异常做分支。
"""

from dataclasses import dataclass
from typing import Union

from divination.core.exceptions import ErrorKind


@dataclass(frozen=True)
class Ok:
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    reason: str
    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    @property
    def ok(self) -> bool:
        return False


CompletionOutcome = Union[Ok, Failed]
