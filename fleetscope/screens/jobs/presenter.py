"""Jobs presenter - job listing and fire-and-forget triggers."""

from __future__ import annotations

import logging
from typing import Any

from fleetscope.constants.timeouts import JOB_FOLLOWUP_REFRESH_DELAY
from fleetscope.constants.values import NOT_AVAILABLE
from fleetscope.models.telemetry.cluster_info import JobInfo, JobTriggerAck
from fleetscope.screens.base_presenter import FleetPresenter
from fleetscope.utils.formatters import format_last_run

logger = logging.getLogger(__name__)


class JobsPresenter(FleetPresenter[list[JobInfo]]):
    """Presenter for JobsScreen."""

    def __init__(
        self,
        screen: Any,
        controller: Any,
        interval: float,
        *,
        followup_delay: float = JOB_FOLLOWUP_REFRESH_DELAY,
    ) -> None:
        super().__init__(screen, controller, interval, name="jobs")
        self._followup_delay = followup_delay

    @property
    def jobs(self) -> list[JobInfo]:
        return list(self._data or [])

    async def _fetch(self, target: str) -> list[JobInfo]:
        return await self._controller.get_jobs()

    async def trigger_job(self, job_name: str) -> JobTriggerAck:
        """Trigger ``job_name`` and schedule one follow-up refresh.

        Raises:
            TransportFailure: If the trigger request fails.
        """
        ack = await self._controller.trigger_job(job_name)
        self.poller.schedule_refresh(self._followup_delay)
        logger.debug(f"Follow-up refresh in {self._followup_delay}s after triggering {job_name}")
        return ack

    def get_job_rows(self) -> list[tuple[str, tuple[str, ...]]]:
        return [
            (
                job.name,
                (
                    job.name,
                    job.job_type or NOT_AVAILABLE,
                    "Yes" if job.enabled else "No",
                    job.last_status or NOT_AVAILABLE,
                    str(job.run_count),
                    format_last_run(job.last_run),
                ),
            )
            for job in self._data or []
        ]
