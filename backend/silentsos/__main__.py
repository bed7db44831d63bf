"""Run the API with uvicorn: ``python -m silentsos``."""

import uvicorn

from silentsos.core.config import settings


def main() -> None:
    uvicorn.run(
        "silentsos.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
