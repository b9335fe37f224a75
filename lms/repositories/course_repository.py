"""
课程数据库操作层
"""

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import select, and_, func
from sqlalchemy.ext.asyncio import AsyncSession

from lms.models.course import Course
from lms.models.database.course_db import CourseDB, CourseTopicDB


class CourseRepository:
    """课程数据库操作类"""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get_by_id(self, course_id: UUID) -> Optional[CourseDB]:
        """根据课程ID获取课程"""
        result = await self.db.execute(
            select(CourseDB).where(CourseDB.id == course_id)
        )
        return result.scalar_one_or_none()
    
    async def get_all(self) -> List[CourseDB]:
        """获取全部课程"""
        result = await self.db.execute(select(CourseDB))
        return list(result.scalars().all())
    
    async def get_by_ids(self, course_ids: Iterable[UUID]) -> List[CourseDB]:
        """批量获取课程，不存在的ID直接忽略"""
        ids = list(course_ids)
        if not ids:
            return []
        
        result = await self.db.execute(
            select(CourseDB).where(CourseDB.id.in_(ids))
        )
        return list(result.scalars().all())
    
    async def search(
        self,
        category: Optional[str] = None,
        topic: Optional[str] = None,
        instructor: Optional[str] = None
    ) -> List[CourseDB]:
        """组合条件搜索课程，只对非空白参数生效"""
        conditions = []
        
        # 分类过滤（忽略大小写）
        if category and category.strip():
            conditions.append(func.lower(CourseDB.category) == category.lower())
        
        # 讲师过滤（忽略大小写）
        if instructor and instructor.strip():
            conditions.append(func.lower(CourseDB.instructor_name) == instructor.lower())
        
        # 主题过滤（主题列表包含）
        if topic and topic.strip():
            conditions.append(CourseDB.topics.any(CourseTopicDB.topic == topic))
        
        query = select(CourseDB)
        if conditions:
            query = query.where(and_(*conditions))
        
        result = await self.db.execute(query)
        return list(result.scalars().all())
    
    def to_model(self, db_course: CourseDB) -> Course:
        """转换为Pydantic模型"""
        return Course(
            id=db_course.id,
            title=db_course.title,
            category=db_course.category,
            topics=db_course.topic_names,
            instructor_name=db_course.instructor_name,
            duration_minutes=db_course.duration_minutes,
            thumbnail=db_course.thumbnail,
            created_at=db_course.created_at,
            updated_at=db_course.updated_at
        )
