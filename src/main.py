"""
Главный файл приложения FastAPI
JSON API сайта: каталог услуг, контент страниц, заявки и админ-панель
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from src.config.settings import settings
from src.domain.entities.lead import LeadFailure, LeadResult
from src.domain.services.lead_submission import VALIDATION_ERROR
from src.infrastructure.database.connection import create_tables, get_db_health
from src.infrastructure.logging.hybrid_logger import hybrid_logger
from src.application.web.routes.admin import admin_router, auth_router
from src.application.web.routes.catalog import catalog_router
from src.application.web.routes.leads import router as leads_router
from src.application.web.routes.logs import logs_router
from src.application.web.routes.site import router as site_router

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle события приложения"""
    await hybrid_logger.info(f"Запуск API сайта {settings.site_name} (хранилище: {settings.storage_backend})")

    try:
        if settings.use_database:
            await create_tables()
            await hybrid_logger.info("База данных инициализирована")
        else:
            settings.data_dir.mkdir(parents=True, exist_ok=True)
            await hybrid_logger.info(f"Файловое хранилище: {settings.data_dir}")

        if settings.admin_password == "admin123":
            await hybrid_logger.warning("⚠️  Используется пароль администратора по умолчанию, смените его после первого входа!")

        yield

    except Exception as e:
        await hybrid_logger.critical(f"Ошибка запуска приложения: {e}")
        raise
    finally:
        await hybrid_logger.info("Завершение работы приложения")


app = FastAPI(
    title=settings.site_name,
    description="API сайта компании по предоставлению рабочего персонала",
    version=APP_VERSION,
    debug=settings.debug,
    lifespan=lifespan
)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Ошибки валидации тела запроса в формате {success, error}"""
    if request.url.path.rstrip("/") == leads_router.prefix:
        # Форма заявки получает тот же ответ, что и при пустых имени или телефоне
        return JSONResponse(
            status_code=200,
            content=LeadResult.fail(LeadFailure.VALIDATION_FAILED, VALIDATION_ERROR).to_dict()
        )

    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Некорректный запрос")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": f"{field}: {message}" if field else message}
    )


app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    max_age=settings.session_max_age,
    same_site="lax",
    https_only=settings.is_production
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # В production ограничить
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router)
app.include_router(site_router)
app.include_router(leads_router)
app.include_router(auth_router)
app.include_router(admin_router)
app.include_router(logs_router)


@app.get("/health")
async def health_check():
    """
    Health check endpoint для мониторинга
    При хранилище в БД проверяет подключение
    """
    health_data = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": APP_VERSION,
        "environment": settings.environment,
        "components": {"storage": settings.storage_backend},
    }

    if not settings.use_database:
        return JSONResponse(content=health_data)

    db_status = await get_db_health()
    health_data["components"].update(db_status)

    if db_status["database"] != "connected":
        health_data["status"] = "degraded"
        return JSONResponse(status_code=503, content=health_data)

    return JSONResponse(content=health_data)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
