"""Entry point for serving the API with Uvicorn.

Host and port come from ``settings.HOST`` / ``settings.PORT``.

Usage:
    python run.py
"""

import uvicorn

from app.core.config import settings


def main() -> None:
    """Serve ``app.main:app`` until interrupted."""
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
