# careerconnect/__main__.py
import logging

import uvicorn

from careerconnect.core.config import get_settings

logger = logging.getLogger("careerconnect")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on port %s", settings.PORT)
    uvicorn.run(
        "careerconnect.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
