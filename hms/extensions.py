"""数据库连接池

db 在这里只构造一次，由 create_app 绑定到具体的 app 与配置。
"""

import logging

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

db = SQLAlchemy()


def probe_connection(app) -> bool:
    """启动时探测一次数据库连通性

    失败只记录日志，不影响应用启动。
    """
    with app.app_context():
        try:
            with db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Database connection failed: %s", e)
            return False
    logger.info("Database connected!")
    return True


def dispose_pool(app) -> None:
    """关闭连接池中所有空闲连接"""
    with app.app_context():
        db.engine.dispose()
    logger.info("Database pool disposed")
