"""
课程相关数据模型
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


def _is_present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


class Course(BaseModel):
    """课程基础模型，课程由外部维护，这里只读"""
    
    id: UUID = Field(..., description="课程唯一标识")
    title: str = Field(..., description="课程名称")
    category: Optional[str] = Field(None, description="课程分类")
    topics: List[str] = Field(default_factory=list, description="课程主题")
    instructor_name: Optional[str] = Field(None, description="讲师")
    duration_minutes: Optional[int] = Field(None, description="课程时长(分钟)")
    thumbnail: Optional[str] = Field(None, description="封面图")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CourseSearchQuery(BaseModel):
    """课程搜索查询模型，所有条件可选，空白条件忽略"""
    
    category: Optional[str] = Field(None, description="按分类筛选，忽略大小写")
    topic: Optional[str] = Field(None, description="按主题筛选")
    instructor: Optional[str] = Field(None, description="按讲师筛选，忽略大小写")

    @property
    def has_category(self) -> bool:
        return _is_present(self.category)

    @property
    def has_topic(self) -> bool:
        return _is_present(self.topic)

    @property
    def has_instructor(self) -> bool:
        return _is_present(self.instructor)

    @property
    def is_empty(self) -> bool:
        return not (self.has_category or self.has_topic or self.has_instructor)
