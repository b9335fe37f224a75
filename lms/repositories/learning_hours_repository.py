"""
学习时长数据库操作层
"""

from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from lms.models.analytics import LearningHours
from lms.models.database.learning_hours_db import LearningHoursDB


class LearningHoursRepository:
    """学习时长数据库操作类，用户ID为字符串"""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get_by_user_id(self, user_id: str) -> List[LearningHoursDB]:
        """获取用户各分类学习时长"""
        result = await self.db.execute(
            select(LearningHoursDB).where(LearningHoursDB.user_id == user_id)
        )
        return list(result.scalars().all())
    
    async def sum_total_hours(self, user_id: str) -> float:
        """汇总用户累计学习时长"""
        result = await self.db.execute(
            select(
                func.coalesce(func.sum(LearningHoursDB.total_hours), 0.0).label("total_hours")
            ).where(LearningHoursDB.user_id == user_id)
        )
        total = result.scalar_one()
        return float(total or 0.0)
    
    def to_model(self, db_hours: LearningHoursDB) -> LearningHours:
        return LearningHours(
            id=db_hours.id,
            user_id=db_hours.user_id,
            category=db_hours.category,
            total_hours=db_hours.total_hours or 0.0,
            month_hours=db_hours.month_hours or 0.0
        )
