"""
证书数据库模型
"""

from sqlalchemy import Column, String, DateTime, Uuid
from lms.core.database import Base


class CertificateDB(Base):
    """证书表，只读"""
    
    __tablename__ = "certificates"
    
    id = Column(Uuid, primary_key=True, comment="证书ID")
    user_id = Column(Uuid, nullable=False, index=True, comment="用户ID")
    course_id = Column(Uuid, comment="课程ID")
    title = Column(String(200), comment="证书标题")
    issued_at = Column(DateTime(timezone=True), comment="颁发时间")
    url = Column(String(500), comment="证书地址")
    
    __table_args__ = (
        {'comment': '证书表'}
    )
