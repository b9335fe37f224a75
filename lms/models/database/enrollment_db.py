"""
选课数据库模型
"""

from sqlalchemy import Column, String, Integer, DateTime, Uuid
from lms.core.database import Base


class EnrollmentDB(Base):
    """选课记录表"""
    
    __tablename__ = "enrollments"
    
    id = Column(Uuid, primary_key=True, comment="选课ID")
    user_id = Column(Uuid, nullable=False, index=True, comment="用户ID")
    course_id = Column(Uuid, nullable=False, index=True, comment="课程ID")
    
    # 学习进度，0-100，不做范围约束
    progress_percent = Column(Integer, comment="学习进度百分比")
    status = Column(String(50), comment="状态 active/completed 等")
    last_accessed_at = Column(DateTime(timezone=True), comment="最后访问时间")
    
    __table_args__ = (
        {'comment': '选课记录表'}
    )
