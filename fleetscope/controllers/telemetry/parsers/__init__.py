"""Wire payload parsers for the telemetry controller."""

from fleetscope.controllers.telemetry.parsers.bulk_task_parser import BulkTaskParser
from fleetscope.controllers.telemetry.parsers.cluster_parser import (
    ClusterParser,
    parse_timestamp,
)
from fleetscope.controllers.telemetry.parsers.job_parser import JobParser

__all__ = [
    "BulkTaskParser",
    "ClusterParser",
    "JobParser",
    "parse_timestamp",
]
