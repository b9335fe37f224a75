"""
选课相关数据模型
"""

import math
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


# 业务逻辑识别的状态值，其余字符串原样保存
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"


class Enrollment(BaseModel):
    """选课记录模型"""
    
    id: UUID = Field(..., description="选课ID")
    user_id: UUID = Field(..., description="用户ID")
    course_id: UUID = Field(..., description="课程ID")
    progress_percent: Optional[int] = Field(None, description="学习进度百分比")
    status: Optional[str] = Field(None, description="状态")
    last_accessed_at: Optional[datetime] = Field(None, description="最后访问时间")

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def is_active(self) -> bool:
        return self.status is not None and self.status.lower() == STATUS_ACTIVE

    def is_completed(self) -> bool:
        return self.status is not None and self.status.lower() == STATUS_COMPLETED

    def is_in_progress(self) -> bool:
        """进行中：状态为active，且进度存在并小于100"""
        return (
            self.is_active()
            and self.progress_percent is not None
            and self.progress_percent < 100
        )


class EnrollmentCreate(BaseModel):
    """选课请求体"""
    
    user_id: UUID = Field(..., description="用户ID")
    course_id: UUID = Field(..., description="课程ID")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class EnrollmentUpdate(BaseModel):
    """选课进度更新请求体，字段均可选"""
    
    progress_percent: Optional[int] = Field(None, description="学习进度百分比，不校验范围")
    status: Optional[str] = Field(None, description="状态，空白值忽略")

    @field_validator("progress_percent", mode="before")
    @classmethod
    def truncate_progress(cls, v):
        """任意数值均接受，小数部分截断"""
        if isinstance(v, float) and math.isfinite(v):
            return int(v)
        return v

    class Config:
        alias_generator = to_camel
        populate_by_name = True
