"""Run the API with uvicorn: python -m personas_api"""
import uvicorn

from personas_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "personas_api.app_factory:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
