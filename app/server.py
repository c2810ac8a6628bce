import uvicorn

from app.config import HOST, PORT, LOG_LEVEL
from app.logging_config import configure_logging


def main():
    configure_logging()
    # uvicorn exits non-zero when the lifespan liveness check fails.
    uvicorn.run("app.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
