#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
老黄历 API - 按日期查询宜忌、方位、时辰
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from divination.generators.almanac import AlmanacGenerator

router = APIRouter()


class AlmanacRequest(BaseModel):
    """黄历查询请求模型"""
    date: Optional[str] = Field(None, description="查询日期（YYYY-MM-DD），默认今天", example="2024-03-15")


@router.post("/almanac/query", summary="查询老黄历")
async def query_almanac(body: AlmanacRequest, request: Request):
    """
    查询某一天的老黄历

    同一日期的结果始终相同，不调用外部服务。

    - **date**: 查询日期，支持 2024-03-15 / 2024/03/15 / 2024年3月15日
    """
    service = request.app.state.service
    loop = asyncio.get_event_loop()
    day, error = await loop.run_in_executor(
        request.app.state.executor,
        service.almanac,
        body.date
    )
    if error:
        raise error
    return {
        "success": True,
        "almanac": day.to_dict(),
        "sections": [
            {"title": title, "content": content}
            for title, content in AlmanacGenerator.sections_for(day)
        ]
    }
