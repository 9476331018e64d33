#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
占卜结果 API - 列表、查看、修改章节、删除
"""

import asyncio
from typing import List

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from divination.models.result import ResultSection

router = APIRouter()


class ReplaceSectionsRequest(BaseModel):
    """替换章节请求模型"""
    sections: List[ResultSection] = Field(..., description="新的章节列表")


async def _run(request: Request, func, *args):
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(request.app.state.executor, func, *args)


@router.get("/results", summary="结果列表")
async def list_results(request: Request):
    """按保存时间倒序返回全部结果"""
    results, error = await _run(request, request.app.state.service.list_results)
    if error:
        raise error
    return {
        "success": True,
        "results": [r.to_storage() for r in results]
    }


@router.get("/results/{result_id}", summary="查看结果")
async def get_result(result_id: str, request: Request):
    """
    获取单个结果

    保存的数据为空或损坏时返回修复后的结果（带【数据恢复】或【数据损坏】章节）。
    """
    result, error = await _run(request, request.app.state.service.load_result, result_id)
    if error:
        raise error
    return {
        "success": True,
        "result": result.to_storage()
    }


@router.put("/results/{result_id}/sections", summary="替换结果章节")
async def replace_sections(result_id: str, body: ReplaceSectionsRequest, request: Request):
    result, error = await _run(request, request.app.state.service.replace_sections, result_id, body.sections)
    if error:
        raise error
    return {
        "success": True,
        "result": result.to_storage()
    }


@router.delete("/results/{result_id}", summary="删除结果")
async def delete_result(result_id: str, request: Request):
    deleted, error = await _run(request, request.app.state.service.delete_result, result_id)
    if error:
        raise error
    return {"success": True, "deleted": result_id}
