"""
Tests for the overdue project job
"""
from datetime import date

import pytest

from organiza.application.services.dashboard_service import mark_overdue_projects
from organiza.scheduler.jobs import overdue_projects_job


@pytest.mark.unit
class TestMarkOverdueProjects:

    def test_flags_running_projects_past_end(self, repos, ana, make_project):
        late = make_project(ana, date(2024, 7, 1), date(2024, 7, 15))
        on_time = make_project(ana, date(2024, 7, 20), date(2024, 8, 15))
        done = make_project(ana, date(2024, 6, 1), date(2024, 6, 10), status="Concluído")

        changed = mark_overdue_projects(repos.projects, today=date(2024, 8, 1))

        assert changed == 1
        assert late.status == "Atrasado"
        assert on_time.status == "Em andamento"
        assert done.status == "Concluído"

    def test_already_overdue_projects_are_not_counted_again(self, repos, ana, make_project):
        make_project(ana, date(2024, 7, 1), date(2024, 7, 15))
        mark_overdue_projects(repos.projects, today=date(2024, 8, 1))
        assert mark_overdue_projects(repos.projects, today=date(2024, 8, 2)) == 0


@pytest.mark.integration
class TestOverdueJob:

    def test_job_runs_in_its_own_session(self, db, ana, make_project):
        project = make_project(ana, date(2020, 1, 1), date(2020, 1, 31))

        assert overdue_projects_job() == 1

        db.expire_all()
        assert project.status == "Atrasado"
