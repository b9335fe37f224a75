"""
服务包初始化文件
"""

from .course_service import CourseService
from .enrollment_service import EnrollmentService
from .certificate_service import CertificateService
from .analytics_service import AnalyticsService

__all__ = [
    "CourseService",
    "EnrollmentService",
    "CertificateService",
    "AnalyticsService"
]
