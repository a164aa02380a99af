from fastapi import FastAPI

from app.features.health.routes.health import router as health_router
from app.features.otp.routes.otp import router as otp_router
from app.platform.config import get_settings
from app.platform.exceptions import add_exception_handlers
from app.platform.logger import get_logger

logger = get_logger("main")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Delivers one-time passcodes for PLV Lost and Found by email",
        version="1.0.0",
        debug=settings.DEBUG,
    )

    # Root endpoint for basic info
    @app.get("/", tags=["Info"])
    def root():
        return {
            "app_name": settings.APP_NAME,
            "version": "1.0.0",
            "docs_url": "/docs",
            "send_otp_url": "/send-otp",
        }

    add_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(otp_router)

    logger.info(f"{settings.APP_NAME} ready, relaying via {settings.SMTP_HOST}:{settings.SMTP_PORT}")
    return app


app = create_app()
