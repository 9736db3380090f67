"""Bulk tasks screen configuration - tab IDs, column definitions and widget IDs."""

from __future__ import annotations

from fleetscope.constants.enums import BulkTab, LoadLevel

# =============================================================================
# Tab IDs
# =============================================================================

TAB_HOSTS = "tab-hosts"
TAB_INDICES = "tab-indices"

TAB_FOR_BULK_TAB: dict[BulkTab, str] = {
    BulkTab.HOSTS: TAB_HOSTS,
    BulkTab.INDICES: TAB_INDICES,
}
BULK_TAB_FOR_TAB: dict[str, BulkTab] = {tab_id: tab for tab, tab_id in TAB_FOR_BULK_TAB.items()}

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

HOSTS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("", 2),
    ("Host", 36),
    ("Zone", 14),
    ("Tasks", 10),
    ("Requests", 12),
    ("Time", 10),
    ("Shards", 8),
    ("Check", 24),
]

SHARDS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Shard", 40),
    ("Tasks", 10),
    ("Requests", 12),
    ("Time", 10),
]

INDICES_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Index", 48),
    ("Tasks", 10),
    ("Requests", 12),
    ("Time", 10),
    ("Avg Time/Task", 14),
]

# =============================================================================
# Summary cards: (widget id, title)
# =============================================================================

CARD_ACTIVE_TASKS = "card-active-tasks"
CARD_TOTAL_REQUESTS = "card-total-requests"
CARD_TOTAL_TIME = "card-total-time"
CARD_HOSTS = "card-hosts"
CARD_INDICES = "card-indices"

SUMMARY_CARDS: list[tuple[str, str]] = [
    (CARD_ACTIVE_TASKS, "Active Tasks"),
    (CARD_TOTAL_REQUESTS, "Total Requests"),
    (CARD_TOTAL_TIME, "Total Time"),
    (CARD_HOSTS, "Hosts"),
    (CARD_INDICES, "Indices"),
]

# =============================================================================
# Load presentation
# =============================================================================

LOAD_STATUS: dict[LoadLevel, str] = {
    LoadLevel.IDLE: "info",
    LoadLevel.NORMAL: "success",
    LoadLevel.ELEVATED: "warning",
    LoadLevel.CRITICAL: "error",
}

LOAD_STYLE: dict[LoadLevel, str] = {
    LoadLevel.IDLE: "dim",
    LoadLevel.NORMAL: "green",
    LoadLevel.ELEVATED: "yellow",
    LoadLevel.CRITICAL: "bold red",
}

EXPANDED_MARKER = "v"
COLLAPSED_MARKER = ">"
SUSPECT_MARKER = "shard sum used"

# =============================================================================
# Widget IDs
# =============================================================================

CLUSTER_SELECT_ID = "cluster-select"
HOSTS_TABLE_ID = "hosts-table"
SHARDS_TABLE_ID = "shards-table"
INDICES_TABLE_ID = "indices-table"
SHARDS_TITLE_ID = "shards-title"
