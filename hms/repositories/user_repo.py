"""用户数据访问仓库

抽象出数据库访问逻辑，方便后续替换为其它存储。
驱动异常在这里翻译为 hms.errors 中的类型。"""

from typing import Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import StorageError, translate_integrity_error
from ..extensions import db
from ..models.user import User


def create_user(name: str, email: str, password_hash: str) -> int:
	user = User(name=name,
			    email=email,
				password=password_hash)
	db.session.add(user)
	try:
		db.session.commit()
	except IntegrityError as e:
		db.session.rollback()
		raise translate_integrity_error(e) from e
	except SQLAlchemyError as e:
		db.session.rollback()
		raise StorageError(str(e)) from e
	return user.id


def list_users() -> Sequence[User]:
	# 不排序，顺序由存储引擎决定
	try:
		return User.query.all()
	except SQLAlchemyError as e:
		raise StorageError(str(e)) from e


def count_users() -> int:
	return User.query.count()
