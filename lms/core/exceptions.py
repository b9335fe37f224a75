"""
业务异常定义
服务层抛出，由 lms.api.exceptions 中的处理器转换为HTTP响应
"""

from typing import Any, Dict, Optional


class BusinessException(Exception):
    """业务异常基类"""

    def __init__(
        self,
        message: str,
        code: str = "business_error",
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}


class NotFoundException(BusinessException):
    """记录不存在"""

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            message=f"{resource}不存在: {resource_id}",
            code="not_found",
            status_code=404,
            details={"resource": resource, "id": str(resource_id)}
        )
        self.resource = resource
        self.resource_id = resource_id


class EnrollmentNotFoundException(NotFoundException):

    def __init__(self, enrollment_id: Any):
        super().__init__("选课记录", enrollment_id)


class CourseNotFoundException(NotFoundException):

    def __init__(self, course_id: Any):
        super().__init__("课程", course_id)
