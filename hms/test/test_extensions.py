import logging

from flask import Flask

from ..extensions import db, dispose_pool, probe_connection


def test_probe_connection_success(app, caplog):
    with caplog.at_level(logging.INFO):
        assert probe_connection(app) is True
    assert "Database connected!" in caplog.text


def test_probe_connection_failure_is_not_fatal(tmp_path, caplog):
    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{tmp_path / 'missing' / 'x.db'}"
    db.init_app(app)

    with caplog.at_level(logging.ERROR):
        assert probe_connection(app) is False
    assert "Database connection failed" in caplog.text


def test_dispose_pool(app):
    dispose_pool(app)
    # 释放后仍可重新建立连接
    assert probe_connection(app) is True
