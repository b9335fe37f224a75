"""
数据库模型包初始化文件
"""

from .course_db import CourseDB, CourseTopicDB
from .enrollment_db import EnrollmentDB
from .certificate_db import CertificateDB
from .learning_hours_db import LearningHoursDB

__all__ = [
    "CourseDB",
    "CourseTopicDB",
    "EnrollmentDB",
    "CertificateDB",
    "LearningHoursDB"
]
