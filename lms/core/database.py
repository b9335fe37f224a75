"""
数据库引擎与请求级会话

应用启动时 init_database() 建立引擎，每个请求通过 get_db_session() 获得独立会话：
请求正常结束提交，出现异常回滚。
"""

from typing import Any, AsyncGenerator, Dict, Optional

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from lms.core.config import settings

logger = structlog.get_logger()

Base = declarative_base()

engine: Optional[AsyncEngine] = None
async_session_maker: Optional[async_sessionmaker] = None


def _engine_options() -> Dict[str, Any]:
    # 测试环境不复用连接，避免跨事件循环持有连接
    if settings.is_testing:
        return {"poolclass": NullPool}
    return {"pool_pre_ping": True, "pool_recycle": 3600}


async def init_database() -> None:
    """建立数据库引擎和会话工厂"""
    global engine, async_session_maker

    url = settings.database_url_computed
    try:
        engine = create_async_engine(
            url,
            echo=settings.debug and not settings.is_testing,
            **_engine_options(),
        )
    except Exception as e:
        logger.error("数据库引擎创建失败", error=str(e))
        raise

    async_session_maker = async_sessionmaker(engine, expire_on_commit=False)
    logger.info("数据库已连接", driver=engine.url.drivername, database=engine.url.database)


async def close_database() -> None:
    global engine, async_session_maker

    if engine is not None:
        await engine.dispose()
        logger.info("数据库连接已关闭")
    engine = None
    async_session_maker = None


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI依赖：一个请求一个会话"""
    if async_session_maker is None:
        raise RuntimeError("数据库未初始化，请先调用 init_database()")

    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def ping_database() -> Dict[str, Any]:
    """执行 SELECT 1，返回 {"healthy": bool, "message": str}"""
    if engine is None:
        return {"healthy": False, "message": "数据库引擎未初始化"}

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("数据库连通性检查失败", error=str(e))
        return {"healthy": False, "message": f"数据库连接失败: {e}"}

    return {"healthy": True, "message": "数据库连接正常"}
