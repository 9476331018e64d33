"""
统一异常处理

- BusinessError -> {"success": False, "error": ..., "error_type": ...}，状态码取自异常
- 其他未处理异常 -> 500，生产环境不暴露详细错误
"""

import logging
import traceback
from typing import Any, Callable

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from divination.core.exceptions import BusinessError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "error_type": error_type
        }
    )


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """异常处理中间件"""

    def __init__(self, app, show_details: bool = True):
        super().__init__(app)
        self.show_details = show_details

    async def dispatch(self, request: Request, call_next: Callable) -> Any:
        try:
            return await call_next(request)
        except HTTPException:
            raise
        except BusinessError as e:
            logger.warning(f"业务异常: {e.message}")
            return error_response(e.code, e.message, e.error_type)
        except ValueError as e:
            logger.warning(f"参数验证错误: {str(e)}")
            return error_response(400, str(e), "validation_error")
        except Exception as e:
            logger.error(f"未处理的异常: {str(e)}\n{traceback.format_exc()}")
            if self.show_details:
                error_detail = f"错误: {str(e)}"
            else:
                error_detail = "服务器内部错误，请稍后重试"
            return error_response(500, error_detail, "internal_error")


async def business_error_handler(request: Request, exc: BusinessError) -> JSONResponse:
    """路由中抛出的业务异常"""
    logger.warning(f"业务异常 [{request.url.path}]: {exc.message}")
    return error_response(exc.code, exc.message, exc.error_type)


def install_exception_handlers(app: FastAPI, show_details: bool = True):
    app.add_exception_handler(BusinessError, business_error_handler)
    app.add_middleware(ExceptionHandlerMiddleware, show_details=show_details)
