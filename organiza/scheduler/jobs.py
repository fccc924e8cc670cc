"""APScheduler jobs — flags overdue projects every day at 00:05."""

import structlog
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
import pytz

from organiza.config import get_settings
from organiza.infrastructure.database import SessionLocal

settings = get_settings()
logger = structlog.get_logger(__name__)
tz = pytz.timezone(settings.TIMEZONE)

scheduler = AsyncIOScheduler(timezone=tz)


def overdue_projects_job() -> int:
    """Mark running projects whose end date has passed as 'Atrasado'."""
    from organiza.application.services.dashboard_service import mark_overdue_projects
    from organiza.domain.models.project import Project
    from organiza.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository

    db = SessionLocal()
    try:
        changed = mark_overdue_projects(SQLAlchemyProjectRepository(db, Project))
        logger.info("Overdue project check finished", changed=changed)
        return changed
    except Exception as e:
        logger.error("Overdue project job failed", error=str(e))
        db.rollback()
        return 0
    finally:
        db.close()


def start_scheduler():
    scheduler.add_job(
        overdue_projects_job,
        trigger=CronTrigger(hour=0, minute=5, timezone=tz),
        id="overdue_projects",
        name="Overdue Projects (Daily 00:05)",
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Scheduler started", timezone=settings.TIMEZONE)


def stop_scheduler():
    """Stop the scheduler gracefully."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
