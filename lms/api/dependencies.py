"""
API依赖注入：按请求会话构造仓库和服务
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lms.core.database import get_db_session
from lms.repositories.course_repository import CourseRepository
from lms.repositories.enrollment_repository import EnrollmentRepository
from lms.repositories.certificate_repository import CertificateRepository
from lms.repositories.learning_hours_repository import LearningHoursRepository
from lms.services.course_service import CourseService
from lms.services.enrollment_service import EnrollmentService
from lms.services.certificate_service import CertificateService
from lms.services.analytics_service import AnalyticsService


def get_course_service(db: AsyncSession = Depends(get_db_session)) -> CourseService:
    return CourseService(CourseRepository(db), EnrollmentRepository(db))


def get_enrollment_service(db: AsyncSession = Depends(get_db_session)) -> EnrollmentService:
    return EnrollmentService(EnrollmentRepository(db))


def get_certificate_service(db: AsyncSession = Depends(get_db_session)) -> CertificateService:
    return CertificateService(CertificateRepository(db))


def get_analytics_service(db: AsyncSession = Depends(get_db_session)) -> AnalyticsService:
    return AnalyticsService(EnrollmentRepository(db), LearningHoursRepository(db))
