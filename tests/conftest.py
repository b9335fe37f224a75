"""
测试配置文件 - pytest fixtures和共用配置
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from lms.core.database import Base
# 导入所有数据库模型以确保表被注册
from lms.models.database import CourseDB, CourseTopicDB, EnrollmentDB, CertificateDB, LearningHoursDB


TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture(scope="function")
async def test_db_engine():
    """测试数据库引擎 - 内存SQLite，每个测试独立"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,  # 设为True可以看到SQL语句
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    
    # 创建表结构
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    yield engine
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_db_engine) -> AsyncSession:
    """测试数据库会话"""
    async_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def _add_course(
    session: AsyncSession,
    title: str,
    category: Optional[str] = None,
    instructor_name: Optional[str] = None,
    topics: Optional[List[str]] = None,
    course_id: Optional[uuid.UUID] = None,
) -> CourseDB:
    """写入一门测试课程"""
    course = CourseDB(
        id=course_id or uuid.uuid4(),
        title=title,
        category=category,
        instructor_name=instructor_name,
        duration_minutes=60,
        thumbnail=f"https://img.example.com/{title}.png",
        topics=[CourseTopicDB(topic=t, position=i) for i, t in enumerate(topics or [])]
    )
    session.add(course)
    await session.commit()
    await session.refresh(course, attribute_names=["created_at", "updated_at"])
    return course


async def _add_enrollment(
    session: AsyncSession,
    user_id: uuid.UUID,
    course_id: uuid.UUID,
    progress_percent: Optional[int] = 0,
    status: Optional[str] = "active",
    last_accessed_at: Optional[datetime] = None,
) -> EnrollmentDB:
    """写入一条测试选课记录"""
    enrollment = EnrollmentDB(
        id=uuid.uuid4(),
        user_id=user_id,
        course_id=course_id,
        progress_percent=progress_percent,
        status=status,
        last_accessed_at=last_accessed_at
    )
    session.add(enrollment)
    await session.commit()
    return enrollment


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def course_factory(db_session):
    """课程工厂: await course_factory("标题", category=..., topics=[...])"""
    async def factory(title: str, **kwargs) -> CourseDB:
        return await _add_course(db_session, title, **kwargs)
    return factory


@pytest.fixture
def enrollment_factory(db_session):
    """选课工厂: await enrollment_factory(user_id, course_id, progress_percent=..., status=...)"""
    async def factory(user_id: uuid.UUID, course_id: uuid.UUID, **kwargs) -> EnrollmentDB:
        return await _add_enrollment(db_session, user_id, course_id, **kwargs)
    return factory
