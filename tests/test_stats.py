"""
Tests for application statistics
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from admissions.schemas.applications import Application, ApplicationStatus
from admissions.services.statistics import compute_statistics
from admissions.services.store import ApplicationStore

URL = "/api/applications/stats"


def _application(app_id: str, status: ApplicationStatus, generation: int, submitted_at: datetime) -> Application:
    return Application(
        id=app_id,
        name="테스트",
        phone=f"010-0000-{int(app_id):04d}",
        company_position="테스트 / 테스트",
        interests=["경제"],
        golf="No",
        tax_invoice="미발행",
        generation=generation,
        status=status,
        submitted_at=submitted_at,
    )


@pytest.mark.unit
class TestComputeStatistics:

    def test_empty(self):
        stats = compute_statistics([])

        assert stats.total == 0
        assert stats.approval_rate == 0
        assert stats.status_breakdown == {
            "PENDING": 0, "REVIEWING": 0, "APPROVED": 0, "REJECTED": 0, "WAITLIST": 0,
        }
        assert stats.generation_breakdown == []
        assert stats.monthly_trend == []

    def test_breakdowns(self):
        # Arrange
        applications = [
            _application("1", ApplicationStatus.APPROVED, 2, datetime(2026, 9, 3, tzinfo=timezone.utc)),
            _application("2", ApplicationStatus.PENDING, 3, datetime(2026, 10, 1, tzinfo=timezone.utc)),
            _application("3", ApplicationStatus.REJECTED, 2, datetime(2026, 10, 15, tzinfo=timezone.utc)),
        ]

        # Act
        stats = compute_statistics(applications)

        # Assert
        assert stats.total == 3
        assert stats.status_breakdown["APPROVED"] == 1
        assert stats.status_breakdown["PENDING"] == 1
        assert stats.status_breakdown["REJECTED"] == 1
        assert stats.status_breakdown["WAITLIST"] == 0
        assert [(g.generation, g.count) for g in stats.generation_breakdown] == [(2, 2), (3, 1)]
        assert [(m.month, m.count) for m in stats.monthly_trend] == [("2026-09", 1), ("2026-10", 2)]
        assert stats.approval_rate == 33

    def test_approval_rate_rounds(self):
        submitted = datetime(2026, 10, 1, tzinfo=timezone.utc)
        applications = [
            _application("1", ApplicationStatus.APPROVED, 2, submitted),
            _application("2", ApplicationStatus.APPROVED, 2, submitted),
            _application("3", ApplicationStatus.PENDING, 2, submitted),
        ]

        assert compute_statistics(applications).approval_rate == 67

    def test_month_bucket_uses_utc(self):
        # 2026-11-01 01:00 in Seoul is still October in UTC
        seoul = timezone(timedelta(hours=9))
        applications = [
            _application("1", ApplicationStatus.PENDING, 2, datetime(2026, 11, 1, 1, 0, tzinfo=seoul)),
        ]

        assert compute_statistics(applications).monthly_trend[0].month == "2026-10"


@pytest.mark.integration
class TestStatsEndpoint:

    def test_sample_data(self, client: TestClient):
        response = client.get(URL)

        assert response.status_code == 200
        stats = response.json()
        assert stats["total"] == 2
        assert stats["statusBreakdown"]["APPROVED"] == 1
        assert stats["statusBreakdown"]["REVIEWING"] == 1
        assert stats["generationBreakdown"] == [{"generation": 2, "count": 2}]
        assert sum(point["count"] for point in stats["monthlyTrend"]) == 2
        assert stats["approvalRate"] == 50

    def test_reflects_changes(self, client: TestClient, application_payload):
        # Arrange
        client.post("/api/applications", json=application_payload(generation=4))
        client.patch("/api/applications/2", json={"status": "APPROVED"})
        client.delete("/api/applications/1")

        # Act
        stats = client.get(URL).json()

        # Assert
        assert stats["total"] == 2
        assert stats["statusBreakdown"]["APPROVED"] == 1
        assert stats["statusBreakdown"]["PENDING"] == 1
        assert stats["statusBreakdown"]["REVIEWING"] == 0
        assert stats["generationBreakdown"] == [
            {"generation": 2, "count": 1},
            {"generation": 4, "count": 1},
        ]
        assert stats["approvalRate"] == 50

    def test_stats_route_is_not_an_id(self, client: TestClient):
        response = client.get(URL)

        assert "statusBreakdown" in response.json()

    def test_fault(self, client_for):
        broken = Mock(spec=ApplicationStore)
        broken.list_all.side_effect = RuntimeError("boom")

        response = client_for(broken).get(URL)

        assert response.status_code == 500
        assert response.json() == {"error": "통계를 불러오는데 실패했습니다"}
