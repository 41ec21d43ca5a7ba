from ..extensions import db


class User(db.Model):
	__tablename__ = "users"

	id = db.Column(db.Integer, primary_key=True)
	name = db.Column(db.String(120), nullable=False)
	email = db.Column(db.String(120), unique=True, nullable=False)
	# bcrypt 哈希，不保存明文
	password = db.Column(db.String(255), nullable=False)

	def __repr__(self) -> str:  # pragma: no cover 简单repr无需测试
		return f"<User {self.email}>"
