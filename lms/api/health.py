from fastapi import APIRouter, HTTPException
import logging

from lms.core.config import settings
from lms.core.database import ping_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["健康检查"])


@router.get("")
async def health_check():
    """基础健康检查接口"""
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment
    }


@router.get("/database")
async def database_health():
    """数据库连通性检查，不可用时返回503"""
    result = await ping_database()

    if not result["healthy"]:
        logger.warning(f"数据库连接检查失败: {result['message']}")
        raise HTTPException(status_code=503, detail=result["message"])

    return {"database": True, "message": result["message"]}
