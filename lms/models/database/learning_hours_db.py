"""
学习时长数据库模型
"""

from sqlalchemy import Column, String, Integer, Float
from lms.core.database import Base


class LearningHoursDB(Base):
    """学习时长汇总表，由外部任务写入"""
    
    __tablename__ = "learning_hours"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    # 用户ID按字符串存储
    user_id = Column(String(64), nullable=False, index=True, comment="用户ID")
    category = Column(String(100), comment="分类")
    total_hours = Column(Float, nullable=False, default=0.0, comment="累计学习时长")
    month_hours = Column(Float, nullable=False, default=0.0, comment="本月学习时长")
    
    __table_args__ = (
        {'comment': '学习时长汇总表'}
    )
