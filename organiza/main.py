"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from organiza.config import get_settings
from organiza.infrastructure.database import Base, SessionLocal, engine
from organiza.core.logging import configure_logging
from organiza.core.middleware import setup_middleware
from organiza.core.exceptions import AppError, global_exception_handler

# Import all models so SQLAlchemy knows about them
from organiza.domain.models.client import Client  # noqa: F401
from organiza.domain.models.company_settings import CompanySettings  # noqa: F401
from organiza.domain.models.master_data import MasterDataItem  # noqa: F401
from organiza.domain.models.project import Payment, Project  # noqa: F401
from organiza.domain.models.user import User  # noqa: F401
from organiza.domain.models.visit import Visit  # noqa: F401

# Import routers
from organiza.interfaces.api.admin import router as admin_router
from organiza.interfaces.api.auth import router as auth_router
from organiza.interfaces.api.clients import router as clients_router
from organiza.interfaces.api.dashboard import router as dashboard_router
from organiza.interfaces.api.finance import router as finance_router
from organiza.interfaces.api.master_data import router as master_data_router
from organiza.interfaces.api.projects import router as projects_router
from organiza.interfaces.api.reports import router as reports_router
from organiza.interfaces.api.visits import router as visits_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


def init_db() -> None:
    """Create tables and seed the admin user and default option lists."""
    from organiza.application.services.auth_service import ensure_default_admin
    from organiza.application.services.master_data_service import seed_master_data

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_admin(db)
        seeded = seed_master_data(db)
        logger.info("Database ready", seeded_options=seeded)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Organiza...", env=settings.ENVIRONMENT)

    # dev only, use migrations in production
    init_db()

    if settings.SCHEDULER_ENABLED:
        from organiza.scheduler.jobs import start_scheduler
        start_scheduler()

    yield

    from organiza.scheduler.jobs import stop_scheduler
    stop_scheduler()
    logger.info("Organiza stopped")


app = FastAPI(
    title="Organiza — Gestão de Clientes, Visitas e Projetos",
    description="API Backend — agenda de visitas, projetos, parcelas e relatórios",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

# Global Exception Handling
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Starlette runs middleware LIFO, so CORS added last wraps everything
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(admin_router)
app.include_router(clients_router)
app.include_router(visits_router)
app.include_router(projects_router)
app.include_router(finance_router)
app.include_router(dashboard_router)
app.include_router(master_data_router)
app.include_router(reports_router)


@app.get("/")
def root():
    return {
        "name": "Organiza",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
