#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
占卜结果数据模型

持久化格式沿用 camelCase 键名：id / methodId / createTime / inputData / resultSections
"""

import json
import uuid
from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator


class ResultSection(BaseModel):
    """结果中的一个章节"""
    title: str = Field(..., description="章节标题", example="总论")
    content: str = Field(..., description="章节内容", example="整体运势平稳向上。")
    score: int = Field(-1, description="评分，-1 表示无评分，否则 0-100", example=-1)

    @field_validator("score")
    @classmethod
    def validate_score(cls, v):
        if v != -1 and not 0 <= v <= 100:
            raise ValueError(f"评分必须为 -1 或 0-100: {v}")
        return v

    @property
    def is_valid(self) -> bool:
        return bool(self.title.strip()) and bool(self.content.strip())


class DivinationResult(BaseModel):
    """占卜结果"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="结果ID")
    method_id: str = Field(..., alias="methodId", description="占卜方法ID", example="almanac")
    created_at: datetime = Field(default_factory=datetime.now, alias="createTime", description="创建时间")
    inputs: Dict[str, str] = Field(default_factory=dict, alias="inputData", description="用户输入")
    sections: List[ResultSection] = Field(default_factory=list, alias="resultSections", description="结果章节")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "3f1c9a52-7f0e-4a55-9d0b-2d7b6c1e8a90",
                "methodId": "almanac",
                "createTime": "2024-03-15T09:30:00",
                "inputData": {"date": "2024-03-15"},
                "resultSections": [
                    {"title": "宜忌提示", "content": "宜：祭祀、祈福\n忌：动土、诉讼", "score": -1}
                ]
            }
        }

    @property
    def valid_sections(self) -> List[ResultSection]:
        return [s for s in self.sections if s.is_valid]

    def has_valid_sections(self) -> bool:
        return len(self.valid_sections) > 0

    def with_sections(self, sections: List[ResultSection]) -> "DivinationResult":
        """返回替换章节后的新结果，原结果不变"""
        return self.model_copy(update={"sections": list(sections)})

    def to_storage(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self) -> str:
        return json.dumps(self.to_storage(), ensure_ascii=False, indent=2)
