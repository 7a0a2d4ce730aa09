"""Run the API under uvicorn: ``python -m museum_api`` or ``museum-api``."""

import uvicorn

from museum_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "museum_api.main:app",
        host="0.0.0.0",
        port=settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
