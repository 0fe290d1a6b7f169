# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI
from sqlmodel import Session

from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.database import create_db_and_tables, engine

# Import models so SQLModel metadata is populated before create_all()
from app.models import user as _user_models  # noqa: F401
from app.models import profile as _profile_models  # noqa: F401
from app.models import showcase as _showcase_models  # noqa: F401
from app.models import student as _student_models  # noqa: F401
from app.models import inquiry as _inquiry_models  # noqa: F401
from app.models import mail as _mail_models  # noqa: F401

# Routers
from app.routers.auth import router as auth_router
from app.routers.password import router as password_router
from app.routers.profiles import router as profile_router
from app.routers.profiles import student_router as student_profile_router
from app.routers.gallery import router as gallery_router
from app.routers.products import router as products_router
from app.routers.services import router as services_router
from app.routers.testimonials import router as testimonials_router
from app.routers.appointments import router as appointments_router
from app.routers.student_portfolio import routers as student_routers
from app.routers.inquiries import router as inquiries_router
from app.routers.mail import router as mail_router
from app.routers.auth import service as auth_service

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("uvicorn")


def bootstrap_admin() -> None:
    """
    Create (or promote) the operator-configured admin account.

    No-op when ADMIN_EMAIL / ADMIN_PASSWORD are not set.
    """
    if not (settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD):
        logger.info("Startup: no admin credentials configured, skipping bootstrap.")
        return
    with Session(engine) as session:
        auth_service.ensure_admin_user(session, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.
      - Ensure the configured admin account exists.

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("🔄 Startup: Connecting to database...")
    try:
        create_db_and_tables()
        logger.info("✅ Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"❌ Startup: DB connection FAILED: {e}")
        raise
    bootstrap_admin()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

API_ROUTERS = [
    auth_router,
    password_router,
    profile_router,
    student_profile_router,
    gallery_router,
    products_router,
    services_router,
    testimonials_router,
    appointments_router,
    *student_routers,
    inquiries_router,
    mail_router,
]

for api_router in API_ROUTERS:
    app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "elite-cards-backend"}


@app.get(f"{settings.API_PREFIX}/debug/routes")
def list_mounted_routes():
    """List the mounted API prefixes (deployment check)."""
    return {
        "success": True,
        "routes": [f"{settings.API_PREFIX}{r.prefix}" for r in API_ROUTERS],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
