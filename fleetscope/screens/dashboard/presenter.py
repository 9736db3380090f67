"""Dashboard presenter - fleet status, clusters and job overview."""

from __future__ import annotations

from typing import Any

from fleetscope.constants.enums import JobRunStatus
from fleetscope.constants.limits import DASHBOARD_PREVIEW_LIMIT
from fleetscope.constants.values import NOT_AVAILABLE
from fleetscope.models.telemetry.cluster_info import DashboardOverview
from fleetscope.screens.base_presenter import FleetPresenter
from fleetscope.utils.formatters import format_last_run


class DashboardPresenter(FleetPresenter[DashboardOverview]):
    """Presenter for DashboardScreen."""

    def __init__(self, screen: Any, controller: Any, interval: float) -> None:
        super().__init__(screen, controller, interval, name="dashboard")

    @property
    def overview(self) -> DashboardOverview | None:
        return self._data

    async def _fetch(self, target: str) -> DashboardOverview:
        return await self._controller.fetch_all()

    def get_status_text(self) -> str:
        overview = self._data
        if overview is None:
            return "Status: Unknown"
        status = overview.status
        return (
            f"Status: {status.status}\n"
            f"Clusters: {status.cluster_count}\n"
            f"Rates tracked: {status.rates_tracked}"
        )

    def get_clusters_text(self) -> str:
        overview = self._data
        if overview is None:
            return "Total clusters: 0"
        clusters = overview.clusters
        lines = [f"Total clusters: {len(clusters)}"]
        lines.extend(f"- {name}" for name in clusters[:DASHBOARD_PREVIEW_LIMIT])
        hidden = len(clusters) - DASHBOARD_PREVIEW_LIMIT
        if hidden > 0:
            lines.append(f"... and {hidden} more")
        return "\n".join(lines)

    def get_job_counts(self) -> tuple[int, int, int]:
        """(total, enabled, last run succeeded)."""
        overview = self._data
        if overview is None:
            return (0, 0, 0)
        jobs = overview.jobs
        return (
            len(jobs),
            sum(1 for job in jobs if job.enabled),
            sum(1 for job in jobs if job.last_status == JobRunStatus.SUCCESS.value),
        )

    def get_jobs_text(self) -> str:
        total, enabled, succeeded = self.get_job_counts()
        return f"Total jobs: {total}\nEnabled: {enabled}\nLast run success: {succeeded}"

    def get_recent_job_rows(self) -> list[tuple[str, tuple[str, ...]]]:
        overview = self._data
        if overview is None:
            return []
        return [
            (
                job.name,
                (
                    job.name,
                    job.last_status or NOT_AVAILABLE,
                    str(job.run_count),
                    format_last_run(job.last_run),
                ),
            )
            for job in overview.jobs[:DASHBOARD_PREVIEW_LIMIT]
        ]
