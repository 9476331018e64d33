#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
占卜方法描述模型
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class MethodFamily(str, Enum):
    """方法类别：传统中式 / 西方"""
    TRADITIONAL = "traditional"
    WESTERN = "western"


class InputKind(str, Enum):
    TEXT = "text"
    DATE = "date"
    TIME = "time"
    CHOICE = "choice"


class InputField(BaseModel):
    """方法所需的输入项"""
    id: str = Field(..., description="字段ID", example="birthDate")
    name: str = Field(..., description="字段名称", example="出生日期")
    kind: InputKind = Field(InputKind.TEXT, description="字段类型")
    required: bool = Field(True, description="是否必填")
    options: Optional[List[str]] = Field(None, description="可选项（choice 类型）")
    hint: Optional[str] = Field(None, description="输入提示")


class DivinationMethod(BaseModel):
    """占卜方法"""
    id: str = Field(..., description="方法ID", example="bazi")
    name: str = Field(..., description="方法名称", example="八字命理")
    description: str = Field("", description="方法说明")
    family: MethodFamily = Field(..., description="方法类别")
    input_fields: List[InputField] = Field(default_factory=list, description="输入项")
    timeout_seconds: float = Field(60, description="外部调用超时（秒）")
