"""Cluster-level telemetry models: nodes, indexing rates, queue depth, jobs."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

NonNegativeInt = Annotated[int, Field(ge=0)]


class NodeInfo(BaseModel):
    """One node of a cluster as reported by the topology listing."""

    model_config = ConfigDict(frozen=True)

    host_name: str = Field(min_length=1)
    ip_address: str | None = None
    port: int | None = None
    roles: tuple[str, ...] = ()
    zone: str | None = None
    tier: str | None = None


class IndexingRate(BaseModel):
    """Per-index indexing throughput over several windows (docs per second)."""

    model_config = ConfigDict(frozen=True)

    index_name: str = Field(min_length=1)
    shard_count: NonNegativeInt = 0
    from_creation: float | None = None
    last_3m: float | None = None
    last_15m: float | None = None
    last_60m: float | None = None


class QueueDepthPoint(BaseModel):
    """One sample of a host's write thread-pool queue."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    queue_depth: NonNegativeInt


class HostQueueSeries(BaseModel):
    """Recent queue-depth samples of one host, oldest first."""

    model_config = ConfigDict(frozen=True)

    host_name: str
    data_points: tuple[QueueDepthPoint, ...] = ()
    total_points_retained: NonNegativeInt = 0
    total_points_requested: NonNegativeInt = 0

    @property
    def latest_depth(self) -> int | None:
        if not self.data_points:
            return None
        return self.data_points[-1].queue_depth

    @property
    def peak_depth(self) -> int:
        return max((point.queue_depth for point in self.data_points), default=0)


class QueueDepthSeries(BaseModel):
    """Queue-depth series for every host of a cluster."""

    model_config = ConfigDict(frozen=True)

    cluster_name: str
    hosts: dict[str, HostQueueSeries] = Field(default_factory=dict)


class JobInfo(BaseModel):
    """A background job known to the data source."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    job_type: str | None = None
    enabled: bool = False
    last_status: str | None = None
    run_count: NonNegativeInt = 0
    last_run: datetime | None = None


class AppStatus(BaseModel):
    """Health summary of the data source."""

    model_config = ConfigDict(frozen=True)

    status: str
    cluster_count: NonNegativeInt = 0
    rates_tracked: NonNegativeInt = 0


class JobTriggerAck(BaseModel):
    """Acknowledgement returned when a job is triggered."""

    model_config = ConfigDict(frozen=True)

    job_name: str
    message: str | None = None


class DashboardOverview(BaseModel):
    """Everything the dashboard renders, fetched together."""

    model_config = ConfigDict(frozen=True)

    status: AppStatus
    clusters: tuple[str, ...] = ()
    jobs: tuple[JobInfo, ...] = ()


__all__ = [
    "AppStatus",
    "DashboardOverview",
    "HostQueueSeries",
    "IndexingRate",
    "JobInfo",
    "JobTriggerAck",
    "NodeInfo",
    "QueueDepthPoint",
    "QueueDepthSeries",
]
