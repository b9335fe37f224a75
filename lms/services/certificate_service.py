"""
证书业务服务层
"""

from typing import List
from uuid import UUID

from lms.models.certificate import Certificate
from lms.repositories.certificate_repository import CertificateRepository


class CertificateService:
    """证书业务服务"""
    
    def __init__(self, certificate_repo: CertificateRepository):
        self.certificate_repo = certificate_repo
    
    async def by_user(self, user_id: UUID) -> List[Certificate]:
        """获取用户证书，顺序由存储决定"""
        db_certificates = await self.certificate_repo.get_by_user_id(user_id)
        return [self.certificate_repo.to_model(c) for c in db_certificates]
