"""Jobs screen - background job status and manual triggers."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.css.query import NoMatches, WrongType

from fleetscope.errors import TelemetryError
from fleetscope.keyboard import JOBS_SCREEN_BINDINGS
from fleetscope.screens.base_screen import BaseScreen
from fleetscope.screens.jobs.presenter import JobsPresenter
from fleetscope.widgets import TelemetryTable

JOBS_TABLE_ID = "jobs-table"
JOBS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Job", 36),
    ("Type", 16),
    ("Enabled", 8),
    ("Last Status", 12),
    ("Runs", 8),
    ("Last Run", 22),
]


class JobsScreen(BaseScreen):
    """Job listing with a trigger action."""

    BINDINGS = JOBS_SCREEN_BINDINGS

    presenter: JobsPresenter

    @property
    def screen_title(self) -> str:
        return "Jobs"

    def create_presenter(self) -> JobsPresenter:
        return JobsPresenter(
            self,
            self.controller,
            self.settings.jobs_refresh_interval,
            followup_delay=self.settings.job_followup_delay_seconds,
        )

    def compose_body(self) -> ComposeResult:
        yield TelemetryTable(JOBS_TABLE_COLUMNS, id=JOBS_TABLE_ID)

    def render_data(self) -> None:
        with suppress(NoMatches, WrongType):
            table = self.query_one(f"#{JOBS_TABLE_ID}", TelemetryTable)
            if self.presenter.data is None and self.presenter.no_data_reason:
                table.show_message(self.presenter.no_data_reason)
            else:
                table.set_rows(self.presenter.get_job_rows())

    def action_trigger_job(self) -> None:
        with suppress(NoMatches, WrongType):
            job_name = self.query_one(f"#{JOBS_TABLE_ID}", TelemetryTable).cursor_row_key
            if job_name is None or job_name not in {job.name for job in self.presenter.jobs}:
                return

            async def trigger() -> None:
                await self._trigger(job_name)

            self.start_worker(trigger, name=f"trigger-{job_name}")

    async def _trigger(self, job_name: str) -> None:
        try:
            await self.presenter.trigger_job(job_name)
        except TelemetryError as exc:
            self.notify(f"Could not trigger {job_name}: {exc}", severity="error")
            return
        self.notify(f"Job {job_name} triggered", timeout=3)
