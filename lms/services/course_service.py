"""
课程业务服务层
提供课程查询、已选课程、继续学习课程等业务逻辑
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from lms.core.exceptions import CourseNotFoundException
from lms.models.course import Course, CourseSearchQuery
from lms.models.enrollment import Enrollment
from lms.repositories.course_repository import CourseRepository
from lms.repositories.enrollment_repository import EnrollmentRepository

logger = logging.getLogger(__name__)


def _last_accessed_sort_key(enrollment: Enrollment):
    """按最后访问时间排序的键，None视为最早"""
    accessed_at = enrollment.last_accessed_at
    if accessed_at is None:
        return (0, datetime.min.replace(tzinfo=timezone.utc))
    if accessed_at.tzinfo is None:
        # sqlite等驱动读回的时间不带时区，统一按UTC处理
        accessed_at = accessed_at.replace(tzinfo=timezone.utc)
    return (1, accessed_at)


class CourseService:
    """课程业务服务"""
    
    def __init__(self, course_repo: CourseRepository, enrollment_repo: EnrollmentRepository):
        self.course_repo = course_repo
        self.enrollment_repo = enrollment_repo
    
    async def search(
        self,
        category: Optional[str] = None,
        topic: Optional[str] = None,
        instructor: Optional[str] = None
    ) -> List[Course]:
        """按分类、主题、讲师组合筛选课程，无条件时返回全部课程"""
        query = CourseSearchQuery(category=category, topic=topic, instructor=instructor)
        
        if query.is_empty:
            return await self.get_all()
        
        db_courses = await self.course_repo.search(
            category=query.category if query.has_category else None,
            topic=query.topic if query.has_topic else None,
            instructor=query.instructor if query.has_instructor else None
        )
        return [self.course_repo.to_model(db_course) for db_course in db_courses]
    
    async def get_all(self) -> List[Course]:
        """获取全部课程"""
        db_courses = await self.course_repo.get_all()
        return [self.course_repo.to_model(db_course) for db_course in db_courses]
    
    async def get_course(self, course_id: UUID) -> Course:
        """获取课程详情，不存在时抛出异常"""
        db_course = await self.course_repo.get_by_id(course_id)
        if not db_course:
            logger.warning(f"课程不存在: {course_id}")
            raise CourseNotFoundException(course_id)
        return self.course_repo.to_model(db_course)
    
    async def get_enrolled_courses(self, user_id: UUID) -> List[Course]:
        """获取用户已选课程，重复选课只返回一次"""
        db_enrollments = await self.enrollment_repo.get_by_user_id(user_id)
        
        # 去重并保持首次出现顺序
        course_ids = list(dict.fromkeys(e.course_id for e in db_enrollments))
        if not course_ids:
            return []
        
        db_courses = await self.course_repo.get_by_ids(course_ids)
        return [self.course_repo.to_model(db_course) for db_course in db_courses]
    
    async def get_continue_course(self, user_id: UUID) -> Optional[Course]:
        """
        继续学习课程：
        在状态为active且进度小于100的选课中，取最近访问的一门
        """
        db_enrollments = await self.enrollment_repo.get_by_user_id(user_id)
        enrollments = [self.enrollment_repo.to_model(e) for e in db_enrollments]
        
        candidates = [e for e in enrollments if e.is_in_progress()]
        if not candidates:
            return None
        
        # sorted是稳定排序，同一时间保持存储顺序
        candidates = sorted(candidates, key=_last_accessed_sort_key, reverse=True)
        target = candidates[0]
        
        db_course = await self.course_repo.get_by_id(target.course_id)
        if not db_course:
            logger.warning(f"继续学习课程不存在: enrollment={target.id}, course={target.course_id}")
            return None
        
        return self.course_repo.to_model(db_course)
