from mangum import Mangum

from app.handlers.todo_handler import handler
from app.main import app


def test_lambda_handler_wraps_app():
    assert isinstance(handler, Mangum)
    assert handler.app is app
    assert handler.lifespan == "auto"
