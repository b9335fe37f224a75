"""
API端到端流程测试 - 内存SQLite + httpx.AsyncClient
"""

import uuid

import httpx
import pytest
import pytest_asyncio

from lms.core.database import get_db_session
from lms.main import app


@pytest_asyncio.fixture
async def api_client(db_session):
    """请求共用测试会话，每次请求结束提交"""
    async def override_get_db_session():
        yield db_session
        await db_session.commit()

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
class TestLearningFlow:
    """选课、更新进度、继续学习、学习概况完整流程"""

    async def test_enroll_progress_continue_and_summary(self, api_client, course_factory, user_id):
        python = await course_factory("Python基础", category="Programming", topics=["python"])
        design = await course_factory("UI设计", category="Design", topics=["figma"])
        
        # 选课
        response = await api_client.post("/api/enrollments", json={"userId": str(user_id), "courseId": str(python.id)})
        assert response.status_code == 200
        python_enrollment = response.json()
        assert python_enrollment["progressPercent"] == 0
        assert python_enrollment["status"] == "active"
        
        response = await api_client.post("/api/enrollments", json={"userId": str(user_id), "courseId": str(design.id)})
        design_enrollment = response.json()
        
        # 已选课程
        response = await api_client.get("/api/courses/enrolled", params={"userId": str(user_id)})
        assert {c["id"] for c in response.json()} == {str(python.id), str(design.id)}
        
        # 完成设计课，Python课进行中
        response = await api_client.patch(
            f"/api/enrollments/{design_enrollment['id']}",
            json={"progressPercent": 100, "status": "completed"}
        )
        assert response.json()["status"] == "completed"
        
        response = await api_client.patch(f"/api/enrollments/{python_enrollment['id']}", json={"progressPercent": 55})
        assert response.json()["progressPercent"] == 55
        assert response.json()["status"] == "active"
        
        # 继续学习
        response = await api_client.get("/api/courses/continue", params={"userId": str(user_id)})
        assert response.json()["id"] == str(python.id)
        
        # 学习概况
        response = await api_client.get("/api/analytics/summary", params={"userId": str(user_id)})
        assert response.json() == {"completedCount": 1, "enrolledCount": 2, "hoursLearned": 0.0}

    async def test_search_courses(self, api_client, course_factory):
        await course_factory("Python基础", category="Programming", instructor_name="Alice", topics=["python"])
        await course_factory("Pandas", category="Data", instructor_name="Bob", topics=["python", "pandas"])
        
        response = await api_client.get("/api/courses")
        assert len(response.json()) == 2
        
        response = await api_client.get("/api/courses", params={"category": "PROGRAMMING"})
        assert [c["title"] for c in response.json()] == ["Python基础"]
        
        response = await api_client.get("/api/courses", params={"topic": "pandas", "instructor": "bob"})
        assert [c["title"] for c in response.json()] == ["Pandas"]

    async def test_patch_fractional_progress_is_truncated(self, api_client, course_factory, user_id):
        course = await course_factory("Python基础")
        response = await api_client.post("/api/enrollments", json={"userId": str(user_id), "courseId": str(course.id)})
        
        response = await api_client.patch(f"/api/enrollments/{response.json()['id']}", json={"progressPercent": 55.5})
        
        assert response.status_code == 200
        assert response.json()["progressPercent"] == 55

    async def test_patch_unknown_enrollment_returns_404(self, api_client):
        response = await api_client.patch(f"/api/enrollments/{uuid.uuid4()}", json={"progressPercent": 10})
        
        assert response.status_code == 404

    async def test_continue_course_without_enrollments(self, api_client, user_id):
        response = await api_client.get("/api/courses/continue", params={"userId": str(user_id)})
        
        assert response.status_code == 200
        assert response.json() is None
