"""`python -m image_scraper` 진입점"""
import uvicorn

from image_scraper.core.config import settings
from image_scraper.core.logging import logger


def main() -> None:
    logger.info(f"Server is running on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "image_scraper.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
