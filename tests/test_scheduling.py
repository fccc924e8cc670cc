"""
Tests for booking conflict detection
"""
from datetime import date, datetime, timedelta

import pytest

from organiza.application.services.scheduling import (
    check_project_conflict,
    check_visit_conflict,
    is_project_overdue,
    ranges_overlap,
)
from organiza.core.exceptions import (
    BusinessRuleViolationException,
    InvalidRangeError,
    UnknownClientError,
    UnknownProjectError,
    UnknownVisitError,
)

TEN_AM = datetime(2024, 7, 2, 10, 0)


@pytest.mark.unit
class TestVisitConflict:
    """Tests for checkVisitConflict"""

    def test_same_timestamp_returns_existing_visit(self, repos, ana, make_visit):
        """Test that a visit at the same instant is reported"""
        existing = make_visit(ana, TEN_AM)
        conflict = check_visit_conflict(repos.clients, repos.visits, ana.id, TEN_AM)
        assert conflict is not None
        assert conflict.id == existing.id

    def test_excluding_the_clashing_visit_returns_none(self, repos, ana, make_visit):
        """Test that the visit being edited does not conflict with itself"""
        existing = make_visit(ana, TEN_AM)
        assert check_visit_conflict(repos.clients, repos.visits, ana.id, TEN_AM, existing.id) is None

    def test_two_clashing_visits_report_one_of_them(self, repos, ana, make_visit):
        """Test that with two visits at the same instant one of them is returned"""
        first = make_visit(ana, TEN_AM)
        second = make_visit(ana, TEN_AM)
        conflict = check_visit_conflict(repos.clients, repos.visits, ana.id, TEN_AM)
        assert conflict.id in (first.id, second.id)

    def test_excluding_one_of_two_clashing_visits_still_conflicts(self, repos, ana, make_visit):
        """Test that excluding one visit leaves the other one as a conflict"""
        first = make_visit(ana, TEN_AM)
        second = make_visit(ana, TEN_AM)
        conflict = check_visit_conflict(repos.clients, repos.visits, ana.id, TEN_AM, first.id)
        assert conflict.id == second.id

    def test_one_minute_apart_is_not_a_conflict(self, repos, ana, make_visit):
        """Test that only exact timestamps collide by default"""
        make_visit(ana, TEN_AM)
        later = TEN_AM + timedelta(minutes=1)
        assert check_visit_conflict(repos.clients, repos.visits, ana.id, later) is None

    def test_tolerance_widens_the_slot(self, repos, ana, make_visit):
        """Test that an explicit tolerance catches nearby visits"""
        make_visit(ana, TEN_AM)
        later = TEN_AM + timedelta(minutes=30)
        conflict = check_visit_conflict(repos.clients, repos.visits, ana.id, later, tolerance=timedelta(hours=1))
        assert conflict is not None

    def test_other_clients_do_not_conflict(self, repos, ana, make_client, make_visit):
        """Test that visits of another client are ignored"""
        bruno = make_client("Bruno Costa")
        make_visit(bruno, TEN_AM)
        assert check_visit_conflict(repos.clients, repos.visits, ana.id, TEN_AM) is None

    def test_cancelled_visits_still_occupy_the_slot(self, repos, ana, make_visit):
        """Test that visit status does not matter for conflicts"""
        make_visit(ana, TEN_AM, status="cancelada")
        assert check_visit_conflict(repos.clients, repos.visits, ana.id, TEN_AM) is not None

    def test_aware_candidate_is_compared_in_local_time(self, repos, ana, make_visit):
        """Test that a UTC candidate is converted before comparing"""
        from datetime import timezone

        make_visit(ana, TEN_AM)
        # America/Sao_Paulo is UTC-3
        candidate = datetime(2024, 7, 2, 13, 0, tzinfo=timezone.utc)
        assert check_visit_conflict(repos.clients, repos.visits, ana.id, candidate) is not None

    def test_unknown_client_raises(self, repos):
        """Test that an unknown client is an error, not 'no conflict'"""
        with pytest.raises(UnknownClientError):
            check_visit_conflict(repos.clients, repos.visits, 999, TEN_AM)

    def test_unknown_excluded_visit_raises(self, repos, ana):
        """Test that an unknown excluded visit id is an error"""
        with pytest.raises(UnknownVisitError):
            check_visit_conflict(repos.clients, repos.visits, ana.id, TEN_AM, 999)

    def test_missing_timestamp_raises(self, repos, ana):
        """Test that a candidate without a date is rejected"""
        with pytest.raises(BusinessRuleViolationException):
            check_visit_conflict(repos.clients, repos.visits, ana.id, None)


@pytest.mark.unit
class TestProjectConflict:
    """Tests for checkProjectConflict"""

    @pytest.mark.parametrize(
        "start, end, expected",
        [
            (date(2024, 7, 10), date(2024, 7, 20), True),   # partial overlap
            (date(2024, 7, 15), date(2024, 7, 30), True),   # touching on the last day
            (date(2024, 6, 20), date(2024, 7, 1), True),    # touching on the first day
            (date(2024, 7, 3), date(2024, 7, 4), True),     # contained
            (date(2024, 6, 1), date(2024, 8, 1), True),     # containing
            (date(2024, 7, 16), date(2024, 7, 30), False),  # right after
            (date(2024, 6, 1), date(2024, 6, 30), False),   # right before
        ],
    )
    def test_overlap_iff_max_start_le_min_end(self, repos, ana, ana_project, start, end, expected):
        """Test that a conflict exists exactly when the ranges share a day"""
        conflict = check_project_conflict(repos.clients, repos.projects, ana.id, start, end)
        assert (conflict is not None) == expected
        assert ranges_overlap(ana_project.start_date, ana_project.end_date, start, end) == expected
        if expected:
            assert conflict.id == ana_project.id

    def test_excluding_the_project_itself(self, repos, ana, ana_project):
        """Test that an edited project does not conflict with itself"""
        conflict = check_project_conflict(
            repos.clients, repos.projects, ana.id, date(2024, 7, 1), date(2024, 7, 15), ana_project.id,
        )
        assert conflict is None

    def test_single_day_project(self, repos, ana, ana_project):
        """Test that a one-day range on the boundary conflicts"""
        day = date(2024, 7, 15)
        assert check_project_conflict(repos.clients, repos.projects, ana.id, day, day) is not None

    def test_end_before_start_raises_invalid_range(self, repos, ana):
        """Test that an inverted range is rejected, not swapped"""
        with pytest.raises(InvalidRangeError):
            check_project_conflict(repos.clients, repos.projects, ana.id, date(2024, 7, 15), date(2024, 7, 1))

    def test_unknown_client_raises(self, repos):
        with pytest.raises(UnknownClientError):
            check_project_conflict(repos.clients, repos.projects, 999, date(2024, 7, 1), date(2024, 7, 2))

    def test_unknown_excluded_project_raises(self, repos, ana):
        with pytest.raises(UnknownProjectError):
            check_project_conflict(repos.clients, repos.projects, ana.id, date(2024, 7, 1), date(2024, 7, 2), 999)


@pytest.mark.unit
class TestOverdue:
    """Tests for overdue project detection"""

    def test_running_project_past_end_is_overdue(self, ana_project):
        assert is_project_overdue(ana_project, date(2024, 7, 16))

    def test_project_on_end_date_is_not_overdue(self, ana_project):
        assert not is_project_overdue(ana_project, date(2024, 7, 15))

    def test_finished_project_is_never_overdue(self, make_project, ana):
        project = make_project(ana, date(2024, 7, 1), date(2024, 7, 15), status="Concluído")
        assert not is_project_overdue(project, date(2024, 12, 1))
