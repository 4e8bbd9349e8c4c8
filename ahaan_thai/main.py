"""HTTP 서버 실행 (ahaan-thai-api)"""
import uvicorn

from ahaan_thai.core.config import settings


def main() -> None:
    uvicorn.run(
        "ahaan_thai.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
