"""
数据模型测试
"""

import uuid

import pytest
from pydantic import ValidationError

from lms.models.course import Course, CourseSearchQuery
from lms.models.enrollment import Enrollment, EnrollmentCreate, EnrollmentUpdate


def make_enrollment(**overrides):
    data = {
        "id": uuid.uuid4(),
        "user_id": uuid.uuid4(),
        "course_id": uuid.uuid4(),
        "progress_percent": 10,
        "status": "active",
    }
    data.update(overrides)
    return Enrollment(**data)


class TestEnrollmentModel:

    @pytest.mark.parametrize("status, progress, expected", [
        ("active", 0, True),
        ("Active", 99, True),
        ("active", 100, False),
        ("active", None, False),
        ("completed", 50, False),
        ("paused", 50, False),
        (None, 50, False),
    ])
    def test_is_in_progress(self, status, progress, expected):
        assert make_enrollment(status=status, progress_percent=progress).is_in_progress() is expected

    def test_is_completed_case_insensitive(self):
        assert make_enrollment(status="COMPLETED").is_completed()
        assert not make_enrollment(status="active").is_completed()

    def test_serializes_camel_case(self):
        data = make_enrollment().model_dump(by_alias=True)
        assert {"id", "userId", "courseId", "progressPercent", "status", "lastAccessedAt"} == set(data)


class TestRequestModels:

    def test_enrollment_create_from_camel_case(self):
        user_id, course_id = uuid.uuid4(), uuid.uuid4()
        request = EnrollmentCreate.model_validate({"userId": str(user_id), "courseId": str(course_id)})
        assert request.user_id == user_id
        assert request.course_id == course_id

    def test_enrollment_create_rejects_malformed_uuid(self):
        with pytest.raises(ValidationError):
            EnrollmentCreate.model_validate({"userId": "not-a-uuid", "courseId": str(uuid.uuid4())})

    def test_enrollment_create_requires_both_ids(self):
        with pytest.raises(ValidationError):
            EnrollmentCreate.model_validate({"userId": str(uuid.uuid4())})

    def test_enrollment_update_fields_optional(self):
        request = EnrollmentUpdate.model_validate({"progressPercent": 55})
        assert request.progress_percent == 55
        assert request.status is None
        assert EnrollmentUpdate.model_validate({}).progress_percent is None

    def test_enrollment_update_truncates_fractional_progress(self):
        assert EnrollmentUpdate.model_validate({"progressPercent": 55.5}).progress_percent == 55
        assert EnrollmentUpdate.model_validate({"progressPercent": 99.99}).progress_percent == 99
        with pytest.raises(ValidationError):
            EnrollmentUpdate.model_validate({"progressPercent": "abc"})


class TestCourseModels:

    def test_course_serializes_camel_case(self):
        data = Course(id=uuid.uuid4(), title="Python", instructor_name="Alice").model_dump(by_alias=True)
        assert data["instructorName"] == "Alice"
        assert "durationMinutes" in data

    def test_search_query_blank_values(self):
        assert CourseSearchQuery(category=" ", topic="", instructor=None).is_empty
        query = CourseSearchQuery(topic="python")
        assert query.has_topic and not query.has_category and not query.is_empty
