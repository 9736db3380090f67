"""Telemetry controller - retrieves fleet telemetry from the collector service.

Every transport problem (connection error, timeout, non-success status,
undecodable body) surfaces as ``TransportFailure``; every schema problem
surfaces as ``MalformedSnapshot`` from the parsers.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import httpx

from fleetscope.constants.defaults import API_BASE_URL_DEFAULT
from fleetscope.constants.limits import QUEUE_CHART_POINTS
from fleetscope.constants.timeouts import HTTP_CONNECT_TIMEOUT, HTTP_REQUEST_TIMEOUT
from fleetscope.controllers.base import BaseController
from fleetscope.controllers.telemetry.parsers import (
    BulkTaskParser,
    ClusterParser,
    JobParser,
)
from fleetscope.errors import TransportFailure
from fleetscope.models.telemetry import (
    AppStatus,
    ClusterListEntry,
    ClusterSnapshot,
    DashboardOverview,
    IndexingRate,
    JobInfo,
    JobTriggerAck,
    NodeInfo,
    QueueDepthSeries,
)

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Quote a value for use as a single URL path segment."""
    return quote(value, safe="")


class TelemetryController(BaseController):
    """Client for the telemetry collector's HTTP API."""

    def __init__(
        self,
        base_url: str = API_BASE_URL_DEFAULT,
        timeout: float = HTTP_REQUEST_TIMEOUT,
        verify_ssl: bool = True,
        max_queue_points: int = QUEUE_CHART_POINTS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the telemetry controller.

        Args:
            base_url: Root of the collector API, e.g. ``http://host:8080/api``.
            timeout: Overall request timeout in seconds.
            verify_ssl: Whether to verify TLS certificates.
            max_queue_points: Most recent queue samples kept per host.
            transport: Optional transport override (used by tests).
        """
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout, connect=min(timeout, HTTP_CONNECT_TIMEOUT)),
            verify=verify_ssl,
            headers={"Accept": "application/json"},
            transport=transport,
        )
        self._bulk_parser = BulkTaskParser()
        self._cluster_parser = ClusterParser(max_queue_points=max_queue_points)
        self._job_parser = JobParser()

    # ========================================================================
    # Transport
    # ========================================================================

    async def _request_json(self, method: str, path: str, operation: str) -> Any:
        started = self._start_load_timer()
        try:
            response = await self._client.request(method, path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning(f"{operation}: HTTP {status} from {path}")
            raise TransportFailure(
                operation,
                exc.response.reason_phrase or "unexpected status",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning(f"{operation}: request to {path} failed: {exc!r}")
            raise TransportFailure(operation, str(exc) or type(exc).__name__) from exc

        logger.debug(f"{operation}: {method} {path} took {self._elapsed_ms(started):.0f}ms")
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.warning(f"{operation}: undecodable body from {path}")
            raise TransportFailure(
                operation,
                "response body is not valid JSON",
                status_code=response.status_code,
            ) from exc

    async def _get_json(self, path: str, operation: str) -> Any:
        return await self._request_json("GET", path, operation)

    # ========================================================================
    # BaseController
    # ========================================================================

    async def check_connection(self) -> bool:
        """Return True if the collector answers its status endpoint."""
        try:
            await self.get_status()
        except TransportFailure:
            return False
        return True

    async def fetch_all(self) -> DashboardOverview:
        """Fetch status, cluster names and jobs concurrently for the dashboard."""
        status, clusters, jobs = await asyncio.gather(
            self.get_status(), self.list_clusters(), self.get_jobs()
        )
        return DashboardOverview(
            status=status,
            clusters=tuple(entry.cluster_name for entry in clusters),
            jobs=tuple(jobs),
        )

    # ========================================================================
    # Read operations
    # ========================================================================

    async def list_clusters(self) -> list[ClusterListEntry]:
        payload = await self._get_json("/clusters", "list_clusters")
        return self._bulk_parser.parse_cluster_list(payload or {})

    async def list_bulk_task_clusters(self) -> list[ClusterListEntry]:
        """Clusters that currently report bulk write-task snapshots."""
        payload = await self._get_json("/bulkTasks/clusters", "list_bulk_task_clusters")
        return self._bulk_parser.parse_cluster_list(payload or {})

    async def get_cluster_nodes(self, cluster_name: str) -> list[NodeInfo]:
        payload = await self._get_json(
            f"/clusters/{_segment(cluster_name)}/nodes", "get_cluster_nodes"
        )
        return self._cluster_parser.parse_nodes(payload or {})

    async def get_bulk_task_snapshot(self, cluster_name: str) -> ClusterSnapshot:
        payload = await self._get_json(
            f"/bulkTasks/{_segment(cluster_name)}/latest", "get_bulk_task_snapshot"
        )
        return self._bulk_parser.parse_snapshot(payload, cluster_name)

    async def get_indexing_rate(self, cluster_name: str) -> list[IndexingRate]:
        payload = await self._get_json(
            f"/indexingRate/{_segment(cluster_name)}", "get_indexing_rate"
        )
        return self._cluster_parser.parse_indexing_rates(payload or {})

    async def get_queue_depth_series(self, cluster_name: str) -> QueueDepthSeries:
        payload = await self._get_json(
            f"/tpwqueue/{_segment(cluster_name)}", "get_queue_depth_series"
        )
        return self._cluster_parser.parse_queue_series(payload or {}, cluster_name)

    async def get_status(self) -> AppStatus:
        payload = await self._get_json("/status", "get_status")
        return self._job_parser.parse_status(payload or {})

    async def get_jobs(self) -> list[JobInfo]:
        payload = await self._get_json("/jobs", "get_jobs")
        return self._job_parser.parse_jobs(payload or {})

    # ========================================================================
    # Commands
    # ========================================================================

    async def trigger_job(self, job_name: str) -> JobTriggerAck:
        """Ask the collector to run ``job_name`` now."""
        payload = await self._request_json(
            "POST", f"/jobs/{_segment(job_name)}/trigger", "trigger_job"
        )
        logger.info(f"Triggered job {job_name}")
        return self._job_parser.parse_trigger_ack(payload, job_name)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> TelemetryController:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
