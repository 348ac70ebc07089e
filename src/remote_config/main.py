import logging
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from remote_config.db.session import engine
from remote_config.db.init_db import init_db
from remote_config.core.config import settings
from remote_config.core.logging import configure_logging
from remote_config.api.router import router
from remote_config.services.exceptions import (
    ServiceException, NotFoundError, ValidationError, StorageError, UpstreamError
)
from remote_config.services.notification.notification_relay import NotificationRelay
from remote_config.schemas.common import JsonFaildResponse

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()

    if settings.DB_AUTO_CREATE:
        logger.info("DB_AUTO_CREATE is enabled, creating missing tables...")
        await init_db(engine)

    # 推送转发客户端在整个进程内共享一个连接池
    app.state.notification_relay = NotificationRelay()
    logger.info(f"Remote config service started ({settings.APP_ENV}).")

    yield

    # --- 清理 ---
    logger.info("Shutting down, closing relay client and database pool...")
    await app.state.notification_relay.close()
    await engine.dispose()

app = FastAPI(
    title="Remote Config Service",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"])

app.include_router(router)

@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok"}

def _failed(status_code: int, error: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=JsonFaildResponse(error=error).model_dump(),
        headers=headers,
    )

@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    return _failed(status.HTTP_404_NOT_FOUND, exc.message)

@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    return _failed(status.HTTP_400_BAD_REQUEST, exc.message)

@app.exception_handler(StorageError)
async def storage_exception_handler(request: Request, exc: StorageError):
    """
    存储层错误只记录日志，不把驱动/SQL 的原始信息返回给调用方。
    """
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc.message}", exc_info=exc)
    return _failed(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal storage error.")

@app.exception_handler(UpstreamError)
async def upstream_exception_handler(request: Request, exc: UpstreamError):
    return _failed(status.HTTP_502_BAD_GATEWAY, exc.message)

@app.exception_handler(ServiceException)
async def service_exception_handler(request: Request, exc: ServiceException):
    # 处理所有来自服务层的、可预期的业务逻辑错误
    logger.warning(f"Unhandled service error on {request.url.path}: {exc.message}")
    return _failed(status.HTTP_400_BAD_REQUEST, exc.message)

@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # 请求体/参数校验失败统一按 400 返回，而不是 FastAPI 默认的 422
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request."
    return _failed(status.HTTP_400_BAD_REQUEST, message)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # 重写 FastAPI 默认的 HTTPException 处理器，以匹配我们的响应格式
    return _failed(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    # 这个处理器现在只处理真正未预料到的服务器内部错误
    logger.exception(f"Unexpected error on {request.method} {request.url.path}", exc_info=exc)
    return _failed(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")

if __name__ == "__main__":
    uvicorn.run("remote_config.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
