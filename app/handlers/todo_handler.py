from mangum import Mangum
from app.logging_config import configure_logging
from app.main import app

configure_logging()

handler = Mangum(app)
