from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lms.api.dependencies import get_enrollment_service
from lms.models.enrollment import Enrollment, EnrollmentCreate, EnrollmentUpdate
from lms.services.enrollment_service import EnrollmentService

router = APIRouter(prefix="/api/enrollments", tags=["选课"])


@router.get("", response_model=List[Enrollment])
async def list_enrollments(
    user_id: UUID = Query(..., alias="userId"),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service)
):
    """用户选课列表"""
    return await enrollment_service.by_user(user_id)


@router.post("", response_model=Enrollment)
async def enroll(
    request: EnrollmentCreate,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service)
):
    """选课"""
    return await enrollment_service.enroll(request.user_id, request.course_id)


@router.patch("/{enrollment_id}", response_model=Enrollment)
async def patch_enrollment(
    enrollment_id: UUID,
    request: EnrollmentUpdate,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service)
):
    """更新学习进度或状态"""
    return await enrollment_service.patch(
        enrollment_id,
        progress_percent=request.progress_percent,
        status=request.status
    )
