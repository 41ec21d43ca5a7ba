import logging

from flask import Flask
from .extensions import db, probe_connection
from .config import get_config
from .blueprints import register_blueprints


def create_app(config: str | None = None):
    app = Flask(__name__)
    app.config.from_object(get_config(config))

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    db.init_app(app)
    # 确保模型注册到 metadata
    from . import models  # noqa: F401

    register_blueprints(app)

    if app.config.get("PROBE_DATABASE"):
        probe_connection(app)
    return app
