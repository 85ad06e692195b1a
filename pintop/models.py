"""Snapshot data shown on the monitoring dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class ThroughputPoint:
    """One persisted throughput sample of an interface."""

    rx_bps: float = 0.0
    tx_bps: float = 0.0
    captured_at: Optional[datetime] = None


@dataclass
class InterfaceSnapshot:
    """Current state and recent history of one network interface."""

    name: str = ""
    display_name: str = ""
    is_loopback: bool = False
    is_active: bool = False
    rx_bps: float = 0.0
    tx_bps: float = 0.0
    rx_bytes_total: int = 0
    tx_bytes_total: int = 0
    captured_at: Optional[datetime] = None
    history: List[ThroughputPoint] = field(default_factory=list)

    def total_bps(self) -> float:
        """Combined receive and transmit rate in bits per second."""
        return self.rx_bps + self.tx_bps


@dataclass
class TraceHopSnapshot:
    """One hop of a traceroute run with its health estimates."""

    hop_index: int = 0
    address: str = ""
    hostname: str = ""
    avg_rtt_ms: float = 0.0
    jitter_ms: float = 0.0
    loss_pct: float = 0.0
    is_timeout: bool = False
    is_degraded: bool = False


@dataclass
class TraceRunSummary:
    """Short description of a past traceroute run."""

    started_at: Optional[datetime] = None
    route_changed: bool = False
    hop_count: int = 0
    degraded_hop_count: int = 0


@dataclass
class TraceRunDetail:
    """The most recent traceroute run with all of its hops."""

    status: str = ""
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    hop_count: int = 0
    degraded_hop_count: int = 0
    route_changed: bool = False
    error_message: str = ""
    hops: List[TraceHopSnapshot] = field(default_factory=list)


@dataclass
class TargetPathSnapshot:
    """Path discovery state for one trace target."""

    name: str = ""
    host: str = ""
    status: str = ""
    route_changed: bool = False
    has_degraded_hop: bool = False
    probe_interval_seconds: int = 0
    latest_run: Optional[TraceRunDetail] = None
    recent_runs: List[TraceRunSummary] = field(default_factory=list)


@dataclass
class SpeedTestPoint:
    """One historical speed test measurement."""

    download_bps: float = 0.0
    upload_bps: float = 0.0
    latency_ms: float = 0.0
    completed_at: Optional[datetime] = None


@dataclass
class SpeedTestResult:
    """The latest speed test measurement of a target."""

    download_bps: float = 0.0
    upload_bps: float = 0.0
    latency_ms: float = 0.0
    download_bytes: int = 0
    upload_bytes: int = 0
    status: str = ""
    completed_at: Optional[datetime] = None
    error_message: str = ""


@dataclass
class SpeedTargetSnapshot:
    """Speed test state for one configured endpoint."""

    name: str = ""
    download_url: str = ""
    upload_url: str = ""
    status: str = ""
    has_upload: bool = False
    is_healthy: bool = False
    interval_seconds: int = 0
    latest_test: Optional[SpeedTestResult] = None
    history: List[SpeedTestPoint] = field(default_factory=list)


@dataclass
class AlertSnapshot:
    """An active threshold alert."""

    source_name: str = ""
    metric_key: str = ""
    severity: str = ""
    message: str = ""
    current_value: float = 0.0
    threshold_value: float = 0.0
    last_seen_at: Optional[datetime] = None


@dataclass
class RetentionSnapshot:
    """Retention policy windows and the outcome of the latest cleanup pass."""

    interface_raw_seconds: int = 0
    interface_rollup_seconds: int = 0
    trace_retention_seconds: int = 0
    speed_retention_seconds: int = 0
    resolved_alert_seconds: int = 0
    job_interval_seconds: int = 0
    last_run_at: Optional[datetime] = None
    last_success_at: Optional[datetime] = None
    last_error: str = ""
    upserted_interface_rollups: int = 0
    deleted_interface_samples: int = 0
    deleted_trace_runs: int = 0
    deleted_speed_tests: int = 0
    deleted_resolved_alerts: int = 0


@dataclass
class DashboardSnapshot:
    """Everything the dashboard page renders."""

    generated_at: Optional[datetime] = None
    sample_interval_seconds: int = 0
    active_interface_count: int = 0
    monitored_target_count: int = 0
    speed_target_count: int = 0
    degraded_path_count: int = 0
    failed_speed_test_count: int = 0
    active_alert_count: int = 0
    total_rx_bps: float = 0.0
    total_tx_bps: float = 0.0
    average_download_bps: float = 0.0
    average_upload_bps: float = 0.0
    interfaces: List[InterfaceSnapshot] = field(default_factory=list)
    path_targets: List[TargetPathSnapshot] = field(default_factory=list)
    speed_targets: List[SpeedTargetSnapshot] = field(default_factory=list)
    alerts: List[AlertSnapshot] = field(default_factory=list)
    retention: RetentionSnapshot = field(default_factory=RetentionSnapshot)