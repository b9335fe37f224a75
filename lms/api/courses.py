from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lms.api.dependencies import get_course_service
from lms.models.course import Course
from lms.services.course_service import CourseService

router = APIRouter(prefix="/api/courses", tags=["课程"])


@router.get("", response_model=List[Course])
async def list_courses(
    category: Optional[str] = Query(None, description="分类，忽略大小写"),
    topic: Optional[str] = Query(None, description="主题"),
    instructor: Optional[str] = Query(None, description="讲师，忽略大小写"),
    course_service: CourseService = Depends(get_course_service)
):
    """课程列表，筛选条件均可选"""
    return await course_service.search(category=category, topic=topic, instructor=instructor)


@router.get("/enrolled", response_model=List[Course])
async def enrolled_courses(
    user_id: UUID = Query(..., alias="userId"),
    course_service: CourseService = Depends(get_course_service)
):
    """用户已选课程"""
    return await course_service.get_enrolled_courses(user_id)


@router.get("/continue", response_model=Optional[Course])
async def continue_course(
    user_id: UUID = Query(..., alias="userId"),
    course_service: CourseService = Depends(get_course_service)
):
    """继续学习课程，没有时返回null"""
    return await course_service.get_continue_course(user_id)


@router.get("/{course_id}", response_model=Course)
async def course_detail(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service)
):
    """课程详情"""
    return await course_service.get_course(course_id)
