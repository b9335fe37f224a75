"""
证书数据模型
"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class Certificate(BaseModel):
    """证书模型，颁发后不可修改"""
    
    id: UUID
    user_id: UUID
    course_id: Optional[UUID] = None
    title: Optional[str] = None
    issued_at: Optional[datetime] = None
    url: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
