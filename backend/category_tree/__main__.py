"""Run the API server with uvicorn: ``python -m category_tree``."""

import uvicorn

from category_tree.config import settings


def main() -> None:
    uvicorn.run(
        "category_tree.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
