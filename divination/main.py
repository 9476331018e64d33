#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FastAPI 应用主入口

uvicorn divination.main:build_app --factory --port 8001
"""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import Response

from divination import __version__
from divination.api.v1.almanac import router as almanac_router
from divination.api.v1.divination import router as divination_router
from divination.api.v1.results import router as results_router
from divination.config.app_config import AppConfig
from divination.config.env_config import load_env_file
from divination.services.divination_service import DivinationService
from divination.utils.exception_handler import install_exception_handlers

logger = logging.getLogger(__name__)


class UTF8JSONResponse(Response):
    """中文不转义的 JSON 响应，禁用缓存"""
    media_type = "application/json; charset=utf-8"

    def __init__(self, content, **kwargs):
        super().__init__(content, **kwargs)
        self.headers["Cache-Control"] = "no-cache, no-store, must-revalidate, max-age=0"

    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    # jieba 初始化日志太多
    logging.getLogger("jieba").setLevel(logging.WARNING)


def create_app(config: Optional[AppConfig] = None, service: Optional[DivinationService] = None) -> FastAPI:
    """
    创建应用

    Args:
        config: 应用配置，默认从环境变量读取
        service: 占卜服务，默认按配置创建
    """
    if config is None:
        config = service.config if service is not None else AppConfig.from_env()
    if service is None:
        service = DivinationService(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"✅ 占卜服务启动，环境: {config.env}，方法数: {len(service.registry.methods())}")
        if not config.completion.is_configured:
            logger.warning("⚠ 未配置 DEEPSEEK_API_KEY，所有结果将使用本地模拟生成")
        yield
        app.state.executor.shutdown(wait=False)
        service.close()
        logger.info("占卜服务已停止")

    app = FastAPI(
        title="占卜内容生成服务",
        description="多种占卜方法的内容生成、解析与结果管理",
        version=__version__,
        default_response_class=UTF8JSONResponse,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.service = service
    app.state.executor = ThreadPoolExecutor(max_workers=config.executor_workers)

    install_exception_handlers(app, show_details=not config.is_production)

    app.include_router(divination_router, prefix="/api/v1", tags=["占卜"])
    app.include_router(almanac_router, prefix="/api/v1", tags=["老黄历"])
    app.include_router(results_router, prefix="/api/v1", tags=["占卜结果"])

    @app.get("/health", summary="健康检查")
    async def health():
        return {"status": "ok", "version": __version__}

    return app


def build_app() -> FastAPI:
    """uvicorn 工厂入口：加载 .env、配置日志、创建应用"""
    load_env_file()
    config = AppConfig.from_env()
    configure_logging(config.log_level)
    return create_app(config)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("divination.main:build_app", factory=True, host="0.0.0.0", port=8001)
