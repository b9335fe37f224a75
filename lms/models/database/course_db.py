"""
课程数据库模型
"""

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from lms.core.database import Base


class CourseDB(Base):
    """课程数据库表"""
    
    __tablename__ = "courses"
    
    # 主键和基本信息
    id = Column(Uuid, primary_key=True, comment="课程ID")
    title = Column(String(200), nullable=False, comment="课程名称")
    category = Column(String(100), index=True, comment="课程分类")
    
    # 课程详情
    instructor_name = Column(String(100), index=True, comment="讲师")
    duration_minutes = Column(Integer, comment="课程时长(分钟)")
    thumbnail = Column(String(500), comment="封面图")
    
    # 时间
    created_at = Column(DateTime(timezone=True), server_default=func.now(), comment="创建时间")
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), comment="更新时间")
    
    # 关系映射
    topics = relationship(
        "CourseTopicDB",
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="CourseTopicDB.position",
        lazy="selectin"
    )
    
    __table_args__ = (
        {'comment': '课程信息表'}
    )

    @property
    def topic_names(self):
        return [t.topic for t in self.topics]


class CourseTopicDB(Base):
    """课程主题表"""
    
    __tablename__ = "course_topics"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    course_id = Column(Uuid, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True, comment="课程ID")
    topic = Column(String(100), nullable=False, index=True, comment="主题")
    position = Column(Integer, nullable=False, default=0, comment="排序")
    
    course = relationship("CourseDB", back_populates="topics")
    
    __table_args__ = (
        {'comment': '课程主题表'}
    )
