import pytest

from .. import create_app
from ..extensions import db


##################################
# 单元测试创建运行环境
# 每个测试使用独立的内存库，测试结束 drop_all
@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()
##################################
