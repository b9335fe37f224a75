"""
LMS数据库表初始化脚本

运行方式:
python -m lms.scripts.init_lms_tables            # 创建表
python -m lms.scripts.init_lms_tables --sample   # 创建表并插入示例课程
python -m lms.scripts.init_lms_tables check      # 检查表是否存在
python -m lms.scripts.init_lms_tables drop       # 删除表（谨慎使用）
"""

import asyncio
import logging
import sys
import uuid

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

from lms.core import database
from lms.core.database import Base, init_database, close_database
# 导入所有数据库模型以确保表被注册
from lms.models.database import CourseDB, CourseTopicDB, EnrollmentDB, CertificateDB, LearningHoursDB

logger = logging.getLogger(__name__)

EXPECTED_TABLES = ["certificates", "course_topics", "courses", "enrollments", "learning_hours"]

SAMPLE_COURSES = [
    {
        "title": "Python编程基础",
        "category": "Programming",
        "instructor_name": "Alice Chen",
        "duration_minutes": 480,
        "topics": ["python", "basics"],
    },
    {
        "title": "数据分析实战",
        "category": "Data Science",
        "instructor_name": "Bob Li",
        "duration_minutes": 720,
        "topics": ["pandas", "python", "visualization"],
    },
    {
        "title": "Web前端入门",
        "category": "Web",
        "instructor_name": "Alice Chen",
        "duration_minutes": 360,
        "topics": ["html", "css", "javascript"],
    },
]


def _get_engine():
    if not database.engine:
        raise RuntimeError("数据库引擎未初始化")
    return database.engine


async def create_lms_tables(with_sample: bool = False):
    """创建LMS相关数据表"""
    try:
        await init_database()
        db_engine = _get_engine()
        
        logger.info("开始创建LMS数据表...")
        async with db_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("LMS数据表创建成功")
        
        if with_sample:
            await _insert_sample_courses(db_engine)
        
    except Exception as e:
        logger.error(f"创建LMS数据表失败: {e}")
        raise
    finally:
        await close_database()


async def _insert_sample_courses(db_engine):
    """插入示例课程"""
    session_maker = sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    
    async with session_maker() as session:
        for data in SAMPLE_COURSES:
            course = CourseDB(
                id=uuid.uuid4(),
                title=data["title"],
                category=data["category"],
                instructor_name=data["instructor_name"],
                duration_minutes=data["duration_minutes"],
                topics=[
                    CourseTopicDB(topic=topic, position=i)
                    for i, topic in enumerate(data["topics"])
                ]
            )
            session.add(course)
        await session.commit()
    
    logger.info(f"示例课程插入成功: {len(SAMPLE_COURSES)}门")


async def drop_lms_tables():
    """删除LMS相关数据表（谨慎使用）"""
    try:
        await init_database()
        db_engine = _get_engine()
        
        logger.warning("开始删除LMS数据表...")
        async with db_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.warning("LMS数据表删除完成")
        
    except Exception as e:
        logger.error(f"删除LMS数据表失败: {e}")
        raise
    finally:
        await close_database()


async def check_tables_exist() -> bool:
    """检查表是否存在"""
    try:
        await init_database()
        db_engine = _get_engine()
        
        async with db_engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        
        logger.info(f"现有表: {sorted(tables)}")
        missing_tables = set(EXPECTED_TABLES) - set(tables)
        if missing_tables:
            logger.warning(f"缺少表: {sorted(missing_tables)}")
            return False
        
        logger.info("所有LMS表都存在")
        return True
        
    except Exception as e:
        logger.error(f"检查表存在性失败: {e}")
        return False
    finally:
        await close_database()


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    command = args[0] if args and not args[0].startswith("--") else "create"
    
    if command == "create":
        asyncio.run(create_lms_tables(with_sample="--sample" in args))
        return 0
    if command == "check":
        return 0 if asyncio.run(check_tables_exist()) else 1
    if command == "drop":
        asyncio.run(drop_lms_tables())
        return 0
    
    logger.error(f"未知命令: {command}")
    return 2


if __name__ == "__main__":
    # 设置日志
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    sys.exit(main())
