"""
选课业务服务层
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from lms.core.exceptions import EnrollmentNotFoundException
from lms.models.enrollment import Enrollment, STATUS_ACTIVE
from lms.models.database.enrollment_db import EnrollmentDB
from lms.repositories.enrollment_repository import EnrollmentRepository

logger = logging.getLogger(__name__)


class EnrollmentService:
    """选课业务服务"""
    
    def __init__(self, enrollment_repo: EnrollmentRepository):
        self.enrollment_repo = enrollment_repo
    
    async def by_user(self, user_id: UUID) -> List[Enrollment]:
        """获取用户选课列表"""
        db_enrollments = await self.enrollment_repo.get_by_user_id(user_id)
        return [self.enrollment_repo.to_model(e) for e in db_enrollments]
    
    async def enroll(self, user_id: UUID, course_id: UUID) -> Enrollment:
        """
        选课
        
        不检查同一用户同一课程是否已选，每次调用都会新建一条记录
        """
        db_enrollment = EnrollmentDB(
            id=uuid.uuid4(),
            user_id=user_id,
            course_id=course_id,
            progress_percent=0,
            status=STATUS_ACTIVE,
            last_accessed_at=datetime.now(timezone.utc)
        )
        
        db_enrollment = await self.enrollment_repo.save(db_enrollment)
        logger.info(f"选课成功: user={user_id}, course={course_id}, enrollment={db_enrollment.id}")
        
        return self.enrollment_repo.to_model(db_enrollment)
    
    async def patch(
        self,
        enrollment_id: UUID,
        progress_percent: Optional[int] = None,
        status: Optional[str] = None
    ) -> Enrollment:
        """
        更新选课进度和状态
        
        - progress_percent 非None时写入，不做范围校验
        - status 非空白时写入
        - 最后访问时间每次都会刷新
        """
        db_enrollment = await self.enrollment_repo.get_by_id(enrollment_id)
        if not db_enrollment:
            logger.warning(f"选课记录不存在: {enrollment_id}")
            raise EnrollmentNotFoundException(enrollment_id)
        
        if progress_percent is not None:
            db_enrollment.progress_percent = progress_percent
        if status is not None and status.strip():
            db_enrollment.status = status
        db_enrollment.last_accessed_at = datetime.now(timezone.utc)
        
        db_enrollment = await self.enrollment_repo.save(db_enrollment)
        logger.info(
            f"选课记录已更新: {enrollment_id}, "
            f"progress={db_enrollment.progress_percent}, status={db_enrollment.status}"
        )
        
        return self.enrollment_repo.to_model(db_enrollment)
