"""Process entry point — `python -m user_api` serves the app with uvicorn."""

import uvicorn

from user_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "user_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
