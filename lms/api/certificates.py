from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lms.api.dependencies import get_certificate_service
from lms.models.certificate import Certificate
from lms.services.certificate_service import CertificateService

router = APIRouter(prefix="/api/certificates", tags=["证书"])


@router.get("", response_model=List[Certificate])
async def list_certificates(
    user_id: UUID = Query(..., alias="userId"),
    certificate_service: CertificateService = Depends(get_certificate_service)
):
    """用户证书列表"""
    return await certificate_service.by_user(user_id)
