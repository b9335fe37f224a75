"""
全局异常处理器
"""

import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from lms.core.config import settings
from lms.core.exceptions import BusinessException

logger = logging.getLogger(__name__)


def _error_body(error: str, message: str, **extra) -> dict:
    body = {"success": False, "error": error, "message": message}
    body.update(extra)
    return body


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """请求参数校验失败（包括UUID格式错误）"""
    logger.info(f"请求参数校验失败: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=422,
        content=_error_body(
            "validation_error",
            "请求参数校验失败",
            details=jsonable_encoder(exc.errors())
        )
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTP异常"""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("http_error", str(exc.detail)),
        headers=getattr(exc, "headers", None)
    )


async def business_exception_handler(request: Request, exc: BusinessException):
    """业务异常"""
    logger.warning(f"业务异常: {exc.code} - {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message, details=exc.details)
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """数据库异常，不重试直接返回"""
    logger.error(f"数据库操作失败: {request.method} {request.url.path}: {exc}")
    message = str(exc) if settings.debug else "数据库操作失败"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("database_error", message)
    )


async def general_exception_handler(request: Request, exc: Exception):
    """未处理异常"""
    logger.exception(f"未处理异常: {request.method} {request.url.path}")
    message = str(exc) if settings.debug else "服务器内部错误"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("internal_error", message)
    )
