"""Entry point for running the weather service."""

import logging
import uvicorn

from .config import get_settings


def main():
    """Run the weather service."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    logger.info(f"Starting weather service on {settings.app_host}:{settings.app_port}")

    uvicorn.run(
        "weather_service.api.app:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
