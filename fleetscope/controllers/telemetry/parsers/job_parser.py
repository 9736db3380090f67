"""Job parser - parses application status, job listings and trigger acknowledgements."""

from __future__ import annotations

from typing import Any

from fleetscope.controllers.telemetry.parsers._common import (
    build_model,
    first_present,
    optional_list,
    require_mapping,
)
from fleetscope.controllers.telemetry.parsers.cluster_parser import parse_timestamp
from fleetscope.models.telemetry.cluster_info import AppStatus, JobInfo, JobTriggerAck


class JobParser:
    """Parses job and status payloads."""

    def parse_status(self, payload: Any) -> AppStatus:
        body = require_mapping(payload, "$")
        clusters = first_present(body, "clusters", "clusterCount", default=0)
        if isinstance(clusters, list):
            clusters = len(clusters)
        return build_model(
            AppStatus,
            "$",
            status=str(body.get("status") or "unknown"),
            cluster_count=clusters or 0,
            rates_tracked=body.get("ratesTracked") or 0,
        )

    def parse_jobs(self, payload: Any) -> list[JobInfo]:
        """Parse ``{"jobs": [...]}`` into JobInfo models."""
        body = require_mapping(payload, "$")
        jobs: list[JobInfo] = []
        for position, raw in enumerate(optional_list(body.get("jobs"), "jobs")):
            path = f"jobs.{position}"
            job = require_mapping(raw, path)
            last_run = job.get("lastRun")
            jobs.append(
                build_model(
                    JobInfo,
                    path,
                    name=job.get("name"),
                    job_type=job.get("type"),
                    enabled=bool(job.get("enabled", False)),
                    last_status=job.get("lastStatus"),
                    run_count=job.get("runCount") or 0,
                    last_run=(
                        parse_timestamp(last_run, f"{path}.lastRun") if last_run else None
                    ),
                )
            )
        return jobs

    def parse_trigger_ack(self, payload: Any, job_name: str) -> JobTriggerAck:
        """Parse a trigger response; an empty body is a plain acknowledgement."""
        if not isinstance(payload, dict):
            return JobTriggerAck(job_name=job_name)
        message = payload.get("message")
        return build_model(
            JobTriggerAck,
            "$",
            job_name=job_name,
            message=str(message) if message is not None else None,
        )
