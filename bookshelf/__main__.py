"""Run the Bookshelf API under uvicorn: `python -m bookshelf`."""

import uvicorn

from bookshelf.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bookshelf.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
