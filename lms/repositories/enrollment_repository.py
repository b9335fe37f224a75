"""
选课数据库操作层
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lms.models.enrollment import Enrollment
from lms.models.database.enrollment_db import EnrollmentDB

logger = logging.getLogger(__name__)


class EnrollmentRepository:
    """选课数据库操作类"""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get_by_id(self, enrollment_id: UUID) -> Optional[EnrollmentDB]:
        """根据选课ID获取记录"""
        result = await self.db.execute(
            select(EnrollmentDB).where(EnrollmentDB.id == enrollment_id)
        )
        return result.scalar_one_or_none()
    
    async def get_by_user_id(self, user_id: UUID) -> List[EnrollmentDB]:
        """获取用户全部选课记录"""
        result = await self.db.execute(
            select(EnrollmentDB).where(EnrollmentDB.user_id == user_id)
        )
        return list(result.scalars().all())
    
    async def save(self, db_enrollment: EnrollmentDB) -> EnrollmentDB:
        """新增或更新选课记录，提交由会话依赖统一处理"""
        self.db.add(db_enrollment)
        await self.db.flush()
        logger.debug(f"选课记录已写入: {db_enrollment.id}")
        return db_enrollment
    
    def to_model(self, db_enrollment: EnrollmentDB) -> Enrollment:
        """转换为Pydantic模型"""
        return Enrollment(
            id=db_enrollment.id,
            user_id=db_enrollment.user_id,
            course_id=db_enrollment.course_id,
            progress_percent=db_enrollment.progress_percent,
            status=db_enrollment.status,
            last_accessed_at=db_enrollment.last_accessed_at
        )
