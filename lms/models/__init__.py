"""
数据模型包初始化文件
"""

from .course import Course, CourseSearchQuery
from .enrollment import Enrollment, EnrollmentCreate, EnrollmentUpdate, STATUS_ACTIVE, STATUS_COMPLETED
from .certificate import Certificate
from .analytics import AnalyticsSummary, LearningHours

__all__ = [
    "Course",
    "CourseSearchQuery",
    "Enrollment",
    "EnrollmentCreate",
    "EnrollmentUpdate",
    "STATUS_ACTIVE",
    "STATUS_COMPLETED",
    "Certificate",
    "AnalyticsSummary",
    "LearningHours"
]
