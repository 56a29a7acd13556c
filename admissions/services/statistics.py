from collections import Counter
from datetime import timezone
from typing import Iterable

from ..schemas.applications import Application, ApplicationStatus
from ..schemas.stats import ApplicationStats, GenerationCount, MonthlyCount


def compute_statistics(applications: Iterable[Application]) -> ApplicationStats:
    """
    Aggregate applications by status, generation and submission month.

    approval_rate is APPROVED / total as a rounded integer percentage, 0 for
    an empty collection. Months are UTC calendar months formatted YYYY-MM.
    """
    applications = list(applications)
    total = len(applications)

    by_status = Counter(app.status for app in applications)
    by_generation = Counter(app.generation for app in applications)
    by_month = Counter(
        app.submitted_at.astimezone(timezone.utc).strftime("%Y-%m") for app in applications
    )

    approved = by_status[ApplicationStatus.APPROVED]
    approval_rate = round(approved / total * 100) if total else 0

    return ApplicationStats(
        total=total,
        status_breakdown={status.value: by_status[status] for status in ApplicationStatus},
        generation_breakdown=[
            GenerationCount(generation=generation, count=count)
            for generation, count in sorted(by_generation.items())
        ],
        monthly_trend=[
            MonthlyCount(month=month, count=count)
            for month, count in sorted(by_month.items())
        ],
        approval_rate=approval_rate,
    )
