"""应用配置模块

提供不同环境的配置类，支持通过环境变量覆盖默认值。
"""

import os

from sqlalchemy.pool import StaticPool


class SqlConfig:
    SQLNAME = 'hms_db'
    SQLURL = 'localhost'
    SQLPORT = '3306'
    SQLUSER = 'root'
    SQLPASSWORD = ''


class AppConfig(SqlConfig):
    # 允许通过环境变量覆盖
    SQLNAME = os.getenv("SQLNAME", SqlConfig.SQLNAME)
    SQLURL = os.getenv("SQLURL", SqlConfig.SQLURL)
    SQLPORT = os.getenv("SQLPORT", SqlConfig.SQLPORT)
    SQLUSER = os.getenv("SQLUSER", SqlConfig.SQLUSER)
    SQLPASSWORD = os.getenv("SQLPASSWORD", SqlConfig.SQLPASSWORD)

    # 本地 MySQL 默认 root 无密码
    SQLALCHEMY_DATABASE_URI = (
        f"mysql+pymysql://{SQLUSER}:{SQLPASSWORD}@{SQLURL}:{SQLPORT}/{SQLNAME}?charset=utf8mb4"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PROBE_DATABASE = True


class TestConfig(AppConfig):
    TESTING = True
    # 内存 SQLite，StaticPool 让所有连接共享同一个库
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool,
    }
    PROBE_DATABASE = False


def get_config(env: str | None = None):
    """
    返回用于 Flask app.config.from_object 的配置类。
    env 为 "testing" 时返回测试配置，否则返回默认配置。
    """
    if env == "testing":
        return TestConfig
    return AppConfig
