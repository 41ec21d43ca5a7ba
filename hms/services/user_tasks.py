import logging

import bcrypt
from pydantic import BaseModel

from ..errors import ValidationError
from ..repositories import user_repo

logger = logging.getLogger(__name__)

# bcrypt cost factor
HASH_ROUNDS = 10
# bcrypt 只使用前 72 字节
MAX_PASSWORD_BYTES = 72

#####################################
# API Definition

class user_information(BaseModel):
    id: int
    name: str
    email: str
    password: str
#####################################


#####################################
# 密码哈希
def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str) -> str:
    """加盐单向哈希，每次调用生成新的盐"""
    salt = bcrypt.gensalt(rounds=HASH_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
#####################################


#####################################
# 新增用户
def Add_user(name: str, email: str, password: str) -> int:
    """哈希密码后写入 users 表

    Args:
        name: 用户名
        email: 邮箱，唯一性由数据库约束保证
        password: 明文密码

    Returns:
        int: 新用户的 id

    Raises:
        ValidationError: 任一字段为空
        DuplicateKey: 邮箱已存在
        StorageError: 其它数据库错误
    """
    missing = [k for k, v in (("name", name), ("email", email), ("password", password)) if not v]
    if missing:
        raise ValidationError(missing)

    user_id = user_repo.create_user(name, email, hash_password(password))
    logger.info("User %s created", user_id)
    return user_id
#####################################


#####################################
# 返回全部用户（不分页）
def List_users() -> list[user_information]:
    return [
        user_information(
            id=user.id,
            name=user.name,
            email=user.email,
            password=user.password,
        )
        for user in user_repo.list_users()
    ]
#####################################
