"""FastAPI 앱 팩토리"""
import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ahaan_thai.api import (
    book_router,
    dictionary_router,
    encyclopedia_router,
    get_services,
    health_router,
    library_router,
)
from ahaan_thai.clients import shutdown_shared_http_client
from ahaan_thai.core.config import settings
from ahaan_thai.core.logging import logger


async def warmup_datasets() -> None:
    """4개 데이터셋을 동시에 미리 로드. 실패해도 앱은 뜨고 첫 요청에서 다시 시도"""
    services = get_services()
    datasets = services.datasets()
    results = await asyncio.gather(
        *(ds.fetch_dataset() for ds in datasets),
        return_exceptions=True,
    )
    for ds, result in zip(datasets, results):
        if isinstance(result, Exception):
            logger.warning(f"[WARMUP] {ds.name} failed: {result}")
        else:
            logger.info(f"[WARMUP] {ds.name} ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    if settings.dataset_warmup:
        await warmup_datasets()
    logger.info("Application started")
    yield
    logger.info("Shutting down application...")
    await shutdown_shared_http_client()


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(dictionary_router)
    app.include_router(book_router)
    app.include_router(library_router)
    app.include_router(encyclopedia_router)

    return app


# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
