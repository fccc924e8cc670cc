"""Dashboard service — today's agenda, active work and visit counts."""

from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

from organiza.application.services.finance import total_pending_revenue, total_realized_revenue
from organiza.application.services.scheduling import (
    ACTIVE_PROJECT_STATUSES,
    OVERDUE_PROJECT_STATUS,
    is_project_overdue,
    is_visit_overdue,
)
from organiza.core.clock import now_local
from organiza.domain.models.project import Project
from organiza.domain.models.visit import Visit
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.domain.schemas.schedule import ScheduleItem

IN_PROGRESS_STATUSES = ("Em andamento", "Atrasado")


def get_todays_schedule(
    client_repo: ClientRepository,
    visit_repo: VisitRepository,
    project_repo: ProjectRepository,
    now: Optional[datetime] = None,
) -> List[ScheduleItem]:
    """Visits booked today plus in-progress projects running today, in time order."""
    now = now or now_local()
    today = now.date()
    clients = {c.id: c for c in client_repo.list_all()}

    entries: List[tuple[datetime, ScheduleItem]] = []

    for visit in visit_repo.list_between(datetime.combine(today, time.min), datetime.combine(today, time.max)):
        client = clients.get(visit.client_id)
        if client is None:
            continue
        entries.append((visit.date, ScheduleItem(
            id=f"visit-{visit.id}",
            type="visit",
            date=visit.date.isoformat(),
            time=visit.date.strftime("%H:%M"),
            title="Visita Agendada",
            client_id=client.id,
            client_name=client.name,
            client_phone=client.phone,
            client_address=client.address,
            status=visit.status,
            path=f"/visits/{visit.id}",
            is_overdue=is_visit_overdue(visit, now),
        )))

    for project in project_repo.list_by_status(IN_PROGRESS_STATUSES, ending_after=today):
        client = clients.get(project.client_id)
        if client is None or project.start_date > today:
            continue
        overdue = is_project_overdue(project, today)
        entries.append((datetime.combine(project.start_date, time.min), ScheduleItem(
            id=f"project-{project.id}",
            type="project",
            date=project.start_date.isoformat(),
            title=project.name,
            client_id=client.id,
            client_name=client.name,
            client_phone=client.phone,
            client_address=client.address,
            status=OVERDUE_PROJECT_STATUS if overdue else project.status,
            path=f"/projects/{project.id}",
            project_start_date=project.start_date,
            project_end_date=project.end_date,
            is_overdue=overdue,
        )))

    entries.sort(key=lambda entry: entry[0])
    return [item for _, item in entries]


def get_active_projects(repo: ProjectRepository, today: Optional[date] = None) -> List[Project]:
    """Projects not finished yet, soonest deadline first."""
    return repo.list_by_status(ACTIVE_PROJECT_STATUSES, ending_after=today or now_local().date())


def get_upcoming_visits(repo: VisitRepository, now: Optional[datetime] = None, days: int = 7) -> List[Visit]:
    now = now or now_local()
    return repo.list_between(now, now + timedelta(days=days))


def get_visits_summary(repo: VisitRepository) -> Dict[str, int]:
    return repo.count_by_status()


def get_dashboard_summary(
    client_repo: ClientRepository,
    visit_repo: VisitRepository,
    project_repo: ProjectRepository,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    now = now or now_local()
    projects = project_repo.list_all()
    return {
        "schedule": get_todays_schedule(client_repo, visit_repo, project_repo, now),
        "active_projects": get_active_projects(project_repo, now.date()),
        "upcoming_visits": get_upcoming_visits(visit_repo, now),
        "visits_by_status": get_visits_summary(visit_repo),
        "revenue": {
            "realized": total_realized_revenue(projects),
            "pending": total_pending_revenue(projects),
        },
    }


def mark_overdue_projects(repo: ProjectRepository, today: Optional[date] = None) -> int:
    """Flag running projects past their end date as 'Atrasado'. Returns how many changed."""
    today = today or now_local().date()
    running = [s for s in ACTIVE_PROJECT_STATUSES if s != OVERDUE_PROJECT_STATUS]
    changed = 0
    for project in repo.list_by_status(running):
        if is_project_overdue(project, today):
            project.status = OVERDUE_PROJECT_STATUS
            repo.save(project)
            changed += 1
    return changed
