"""Run the API server: ``python -m friend`` or ``friend-api``."""

import uvicorn

from friend.config import get_settings
from friend.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
