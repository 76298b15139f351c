from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from loguru import logger
from framework.config import settings
from framework.database.manager import DatabaseManager
from framework.middleware.logging_md import LoggingMiddleware
from framework.logging.logger import LogConfig
from framework.exceptions.handler import BusinessException, global_exception_handler
from apps.diaries.api.router import router as diary_router
from apps.tasks.api.router import router as task_router

# Initialize logging configuration
LogConfig.setup_logging()

@asynccontextmanager
async def lifespan(_: FastAPI):
    # Check the database once per process; dispose the pool on shutdown.
    manager = DatabaseManager.get_instance()
    await manager.mysql.connect()
    logger.info(f"{settings.APP_NAME} started ({settings.APP_ENV})")
    try:
        yield
    finally:
        await DatabaseManager.shutdown()

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Register global exception handlers
app.add_exception_handler(BusinessException, global_exception_handler)
app.add_exception_handler(RequestValidationError, global_exception_handler)
app.add_exception_handler(SQLAlchemyError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(LoggingMiddleware)

# Mount routers (prefix from config)
app.include_router(
    diary_router,
    prefix=settings.API_DIARIES_PREFIX,
    tags=["Diaries"]
)

app.include_router(
    task_router,
    prefix=settings.API_TASKS_PREFIX,
    tags=["Tasks"]
)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
