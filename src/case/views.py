"""
Views for read operations - separate from command/write path.

Case list filtering works on the loaded case list; dashboard counts are
aggregated in SQL on the cases table.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping
from sqlalchemy import text

from case.domain.domain import Case, CASE_STATUSES
from case.service_layer.unit_of_work import AbstractCaseUnitOfWork

logger = logging.getLogger(__name__)

ALL = "All"

# order of the KPI cards on the dashboard
DASHBOARD_STATUSES = ["Confirmed", "Suspected", "Recovered", "Critical"]


def filter_cases(cases: List[Case], status: str = ALL, query: str = "") -> List[Case]:
    """
    Keep cases matching the status filter and search text, in input order.

    The search text matches patient name or address, case-insensitively.
    """
    query = (query or "").lower()

    def matches(case: Case) -> bool:
        matches_status = status == ALL or case.status == status
        return matches_status and (
            not query
            or query in case.patient_name.lower()
            or query in case.address.lower()
        )

    return [case for case in cases if matches(case)]


def share_percent(value: int, total: int) -> int:
    """Whole-number share of the total, halves rounded up."""
    if total <= 0:
        return 0
    return math.floor(value * 100 / total + 0.5)


def summarize_status_counts(counts: Mapping[str, int]) -> Dict[str, Any]:
    """Dashboard payload from per-status case counts."""
    total = sum(counts.get(status, 0) for status in CASE_STATUSES)
    kpis = [
        {
            "label": status,
            "status": status,
            "value": counts.get(status, 0),
            "percent": share_percent(counts.get(status, 0), total),
        }
        for status in DASHBOARD_STATUSES
    ]
    return {
        "total": total,
        "kpis": kpis,
        "quick_links": [
            {"label": "Directory", "status": ALL},
            {"label": "Priority", "status": "Critical"},
        ],
    }


def get_dashboard(uow: AbstractCaseUnitOfWork) -> Dict[str, Any]:
    """
    Case counts per status for the dashboard.

    Returns:
        - total: number of cases
        - kpis: one entry per status with count, share of total and the
          case-list status filter it links to
        - quick_links: shortcuts to all cases and to critical cases
    """
    with uow:
        rows = uow.session.execute(
            text("SELECT status, COUNT(*) FROM cases GROUP BY status")
        ).fetchall()

    counts = {status: count for status, count in rows}
    dashboard = summarize_status_counts(counts)
    dashboard["queried_at"] = datetime.now(timezone.utc).isoformat()
    return dashboard
