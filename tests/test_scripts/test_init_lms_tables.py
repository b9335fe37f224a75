"""
数据库初始化脚本测试 - 使用临时SQLite文件
"""

import pytest

from lms.core import database
from lms.core.config import settings
from lms.scripts import init_lms_tables


@pytest.fixture
def sqlite_settings(tmp_path, monkeypatch):
    """把配置指向临时数据库，测试结束恢复全局引擎"""
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'lms.db'}")
    monkeypatch.setattr(database, "engine", None)
    monkeypatch.setattr(database, "async_session_maker", None)
    return settings


class TestInitLmsTables:

    def test_create_check_drop(self, sqlite_settings):
        assert init_lms_tables.main(["check"]) == 1
        
        assert init_lms_tables.main(["create", "--sample"]) == 0
        assert init_lms_tables.main(["check"]) == 0
        
        assert init_lms_tables.main(["drop"]) == 0
        assert init_lms_tables.main(["check"]) == 1

    def test_unknown_command(self, sqlite_settings):
        assert init_lms_tables.main(["migrate"]) == 2
