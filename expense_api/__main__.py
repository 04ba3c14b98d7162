"""Standalone listener: ``python -m expense_api`` (HOST / PORT from settings)."""

import uvicorn

from expense_api.core.config import get_settings
from expense_api.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
