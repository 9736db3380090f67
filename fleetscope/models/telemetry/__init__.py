"""Telemetry payload models."""

from fleetscope.models.telemetry.bulk_tasks import (
    ClusterListEntry,
    ClusterSnapshot,
    DataInconsistency,
    HostTaskSummary,
    IndexTaskSummary,
    ShardTaskSummary,
)
from fleetscope.models.telemetry.cluster_info import (
    AppStatus,
    DashboardOverview,
    HostQueueSeries,
    IndexingRate,
    JobInfo,
    JobTriggerAck,
    NodeInfo,
    QueueDepthPoint,
    QueueDepthSeries,
)

__all__ = [
    "AppStatus",
    "ClusterListEntry",
    "ClusterSnapshot",
    "DashboardOverview",
    "DataInconsistency",
    "HostQueueSeries",
    "HostTaskSummary",
    "IndexTaskSummary",
    "IndexingRate",
    "JobInfo",
    "JobTriggerAck",
    "NodeInfo",
    "QueueDepthPoint",
    "QueueDepthSeries",
    "ShardTaskSummary",
]
