"""
仓库包初始化文件 - 数据库访问层
"""

from .course_repository import CourseRepository
from .enrollment_repository import EnrollmentRepository
from .certificate_repository import CertificateRepository
from .learning_hours_repository import LearningHoursRepository

__all__ = [
    "CourseRepository",
    "EnrollmentRepository",
    "CertificateRepository",
    "LearningHoursRepository"
]
