from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lms.api.dependencies import get_analytics_service
from lms.models.analytics import AnalyticsSummary, LearningHours
from lms.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api/analytics", tags=["学习分析"])


@router.get("/summary", response_model=AnalyticsSummary)
async def summary(
    user_id: UUID = Query(..., alias="userId"),
    analytics_service: AnalyticsService = Depends(get_analytics_service)
):
    """学习概况：完成数、选课数、累计学习时长"""
    return await analytics_service.get_summary(user_id)


@router.get("/hours", response_model=List[LearningHours])
async def learning_hours(
    user_id: UUID = Query(..., alias="userId"),
    analytics_service: AnalyticsService = Depends(get_analytics_service)
):
    """各分类学习时长明细"""
    return await analytics_service.get_learning_hours(user_id)
