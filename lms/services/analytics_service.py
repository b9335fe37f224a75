"""
学习分析业务服务层
汇总选课数、完成数和累计学习时长
"""

from typing import List
from uuid import UUID

from lms.models.analytics import AnalyticsSummary, LearningHours
from lms.repositories.enrollment_repository import EnrollmentRepository
from lms.repositories.learning_hours_repository import LearningHoursRepository


class AnalyticsService:
    """学习分析业务服务"""
    
    def __init__(
        self,
        enrollment_repo: EnrollmentRepository,
        learning_hours_repo: LearningHoursRepository
    ):
        self.enrollment_repo = enrollment_repo
        self.learning_hours_repo = learning_hours_repo
    
    async def get_summary(self, user_id: UUID) -> AnalyticsSummary:
        """获取用户学习概况，统计不限时间范围"""
        db_enrollments = await self.enrollment_repo.get_by_user_id(user_id)
        enrollments = [self.enrollment_repo.to_model(e) for e in db_enrollments]
        
        completed_count = sum(1 for e in enrollments if e.is_completed())
        
        # 学习时长表中的用户ID为字符串
        hours_learned = await self.learning_hours_repo.sum_total_hours(str(user_id))
        
        return AnalyticsSummary(
            completed_count=completed_count,
            enrolled_count=len(enrollments),
            hours_learned=hours_learned
        )
    
    async def get_learning_hours(self, user_id: UUID) -> List[LearningHours]:
        """获取用户各分类学习时长明细"""
        db_hours = await self.learning_hours_repo.get_by_user_id(str(user_id))
        return [self.learning_hours_repo.to_model(h) for h in db_hours]
