from flask import Blueprint

api_bp = Blueprint("api", __name__, url_prefix="/api")


def register_blueprints(app):
	# 导入即注册路由
	from . import user_api  # noqa: F401
	app.register_blueprint(api_bp)
