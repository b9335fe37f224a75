"""
证书数据库操作层
"""

from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lms.models.certificate import Certificate
from lms.models.database.certificate_db import CertificateDB


class CertificateRepository:
    """证书数据库操作类"""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get_by_user_id(self, user_id: UUID) -> List[CertificateDB]:
        """获取用户的全部证书"""
        result = await self.db.execute(
            select(CertificateDB).where(CertificateDB.user_id == user_id)
        )
        return list(result.scalars().all())
    
    def to_model(self, db_certificate: CertificateDB) -> Certificate:
        return Certificate(
            id=db_certificate.id,
            user_id=db_certificate.user_id,
            course_id=db_certificate.course_id,
            title=db_certificate.title,
            issued_at=db_certificate.issued_at,
            url=db_certificate.url
        )
