"""
Run the API server: ``python -m fitlab_auth``.

Settings are loaded before uvicorn starts, so a missing JWT_SECRET stops
the process here with a validation error.
"""
import uvicorn

from fitlab_auth.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "fitlab_auth.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
