#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
占卜 API - 方法列表与执行占卜
"""

import asyncio
from typing import Dict, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from divination.models.method import MethodFamily

router = APIRouter()


class PerformRequest(BaseModel):
    """占卜请求模型"""
    method_id: str = Field(..., description="占卜方法ID", example="tarot")
    inputs: Dict[str, str] = Field(default_factory=dict, description="方法所需输入",
                                   example={"question": "这次换工作顺利吗？", "spread": "三张牌阵"})
    fresh_draw: bool = Field(False, description="塔罗重新洗牌（按当前时间取种子）")

    class Config:
        json_schema_extra = {
            "example": {
                "method_id": "almanac",
                "inputs": {"date": "2024-03-15"},
                "fresh_draw": False
            }
        }


@router.get("/divination/methods", summary="占卜方法列表")
async def list_methods(request: Request, family: Optional[MethodFamily] = None):
    """
    获取可用的占卜方法

    - **family**: 方法类别（traditional / western），不传返回全部
    """
    service = request.app.state.service
    methods = service.registry.methods(family)
    return {
        "success": True,
        "methods": [m.model_dump(mode="json") for m in methods]
    }


@router.post("/divination/perform", summary="执行占卜")
async def perform(body: PerformRequest, request: Request):
    """
    执行一次占卜

    外部服务不可用或超时时使用本地模拟内容，结果第一个章节为【提示】。
    结果会被保存，可通过 /results/{id} 再次获取。
    """
    service = request.app.state.service
    loop = asyncio.get_event_loop()
    result, error = await loop.run_in_executor(
        request.app.state.executor,
        service.perform,
        body.method_id,
        body.inputs,
        body.fresh_draw
    )
    if error:
        raise error
    return {
        "success": True,
        "result": result.to_storage()
    }
