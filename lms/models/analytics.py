"""
学习分析数据模型
"""

from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class LearningHours(BaseModel):
    """学习时长汇总记录"""
    
    id: int
    user_id: str
    category: Optional[str] = None
    total_hours: float = 0.0
    month_hours: float = 0.0

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class AnalyticsSummary(BaseModel):
    """用户学习概况"""
    
    completed_count: int = Field(0, ge=0, description="已完成课程数")
    enrolled_count: int = Field(0, ge=0, description="选课总数")
    hours_learned: float = Field(0.0, description="累计学习时长")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
