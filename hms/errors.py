"""存储层与校验错误类型

仓库层把驱动异常翻译为这里的类型，蓝图层再按类型映射 HTTP 状态码。
"""

import re

from sqlalchemy.exc import IntegrityError

# MySQL: (1062, "Duplicate entry 'a@b.c' for key 'users.email'")
_MYSQL_DUP_ENTRY = 1062
_MYSQL_KEY_RE = re.compile(r"for key '([^']+)'")
# SQLite: "UNIQUE constraint failed: users.email"
_SQLITE_UNIQUE_RE = re.compile(r"UNIQUE constraint failed: (.+)")


class StorageError(Exception):
    reason = "storage_error"


class ConstraintViolation(StorageError):
    reason = "constraint_violation"

    def __init__(self, message: str, constraint: str | None = None):
        super().__init__(message)
        self.constraint = constraint


class DuplicateKey(ConstraintViolation):
    reason = "duplicate_entry"


class ValidationError(Exception):
    reason = "invalid_payload"

    def __init__(self, fields: list[str]):
        super().__init__(f"missing required fields: {', '.join(fields)}")
        self.fields = fields


def unique_constraint_name(exc: IntegrityError) -> str | None:
    """唯一约束冲突时返回约束名，其它完整性错误返回 None"""
    orig = exc.orig
    args = getattr(orig, "args", ())
    if args and args[0] == _MYSQL_DUP_ENTRY:
        m = _MYSQL_KEY_RE.search(str(args[1]) if len(args) > 1 else "")
        return m.group(1) if m else "unknown"
    m = _SQLITE_UNIQUE_RE.search(str(orig))
    if m:
        return m.group(1)
    return None


def translate_integrity_error(exc: IntegrityError) -> ConstraintViolation:
    constraint = unique_constraint_name(exc)
    if constraint is not None:
        return DuplicateKey(f"duplicate entry for {constraint}", constraint=constraint)
    return ConstraintViolation(str(exc.orig))
