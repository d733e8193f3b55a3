# main.py

from uvicorn import run

from blog_api.configs import settings


def main() -> None:
    run(
        "blog_api.main:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level="info",
    )


if __name__ == "__main__":
    main()
