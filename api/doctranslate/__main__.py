import uvicorn

from doctranslate.config import settings


def main():
    print(f"DocTranslate on http://{settings.api_host}:{settings.api_port}")
    print(f"Docs: http://{settings.api_host}:{settings.api_port}/docs")
    uvicorn.run(
        "doctranslate.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
