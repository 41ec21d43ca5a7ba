import logging

from flask import jsonify, request
from . import api_bp
from ..errors import DuplicateKey
from ..services import user_tasks as user_service

logger = logging.getLogger(__name__)


'''
通信数据格式：
发送格式：
{
	"name":"xxxx",
	"email":"xxxx",
	"password":"xxxx"
}
返回格式：
{
	"message": "xxxx",
	["userId": int],
	["error_reason": "xxxx"]
}
'''
@api_bp.post("/users/add")
@api_bp.post("/users")
def add_user():
	recived_data = request.get_json(silent=True) or {}
	if not isinstance(recived_data, dict):
		recived_data = {}

	name = recived_data.get("name")
	email = recived_data.get("email")
	password = recived_data.get("password")

	if not name or not email or not password:
		return jsonify({"message": "All fields are required"}), 400

	try:
		user_id = user_service.Add_user(name, email, password)
	except DuplicateKey:
		return jsonify({"message": "Email already exists"}), 400
	except Exception as e:
		# 详细错误只写日志，不返回给调用方
		logger.exception("add_user failed")
		return jsonify({"message": "Server error", "error_reason": getattr(e, "reason", "internal_error")}), 500

	return jsonify({"message": "User created successfully", "userId": user_id}), 201


'''
返回格式：
{
	"data": [{"id", "name", "email", "password"}, ...]
}
'''
@api_bp.get("/users/get")
@api_bp.get("/users")
def get_users():
	try:
		users = user_service.List_users()
	except Exception as e:
		logger.exception("get_users failed")
		return jsonify({"message": "Failed to fetch users", "error_reason": getattr(e, "reason", "internal_error")}), 500

	return jsonify({"data": [u.model_dump() for u in users]}), 200
