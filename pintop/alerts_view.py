"""Rendering of the alert queue and retention status cards."""

from __future__ import annotations

from typing import Sequence

from .formatting import (
    format_bitrate,
    format_date_time,
    format_milliseconds,
    format_retention_window,
    title_case,
)
from .markup import escape
from .models import AlertSnapshot, RetentionSnapshot

_METRIC_TITLES = {
    "download_bps": "Low throughput",
    "latency_ms": "High latency",
    "loss_pct": "Packet loss",
    "route_changed": "Route change",
    "availability": "Collector failure",
}


def render_alert_grid(
    alerts: Sequence[AlertSnapshot], total: int, retention: RetentionSnapshot
) -> str:
    """The alert queue card followed by the retention card."""
    return render_alerts_card(alerts, total) + render_retention_card(retention)


def render_alerts_card(alerts: Sequence[AlertSnapshot], total: int) -> str:
    """Card listing active alerts, with a count of how many exist in total."""
    parts = [
        '<article class="monitor-card"><header class="monitor-header"><div>'
        '<p class="section-label">Alert queue</p>'
        '<h3 class="interface-name">Active alerts</h3>'
        f'<p class="metric-total" id="alerts-summary">{total} active issue(s)</p>'
        '</div><div class="interface-badges">'
        f'<span class="interface-badge" id="active-alerts-panel">{total}</span>'
        "</div></header>"
    ]

    if total == 0:
        parts.append(
            '<p class="stat-detail">Threshold checks are healthy. Alerts here resolve '
            "automatically when the latest measurements return inside policy.</p></article>"
        )
        return "".join(parts)

    parts.append('<ul id="alerts-list" style="display:grid; gap:0.75rem; margin-top:0.5rem;">')
    parts.extend(render_alert_row(alert) for alert in alerts)
    parts.append("</ul>")

    if total > len(alerts):
        parts.append(
            '<footer class="monitor-footer">'
            f"<span>Showing {len(alerts)} of {total} alerts</span>"
            "<span>Refreshes automatically</span></footer>"
        )

    parts.append("</article>")
    return "".join(parts)


def render_alert_row(alert: AlertSnapshot) -> str:
    """One list item describing an active alert."""
    source = escape(alert.source_name.replace("_", " "))
    title = escape(alert_metric_title(alert.metric_key))
    severity = escape(title_case(alert.severity))
    current = escape(alert_value_text(alert.metric_key, alert.current_value))
    threshold = escape(alert_value_text(alert.metric_key, alert.threshold_value))
    last_seen = escape(format_date_time(alert.last_seen_at))
    return (
        '<li style="display:grid; gap:0.45rem; padding:0.85rem 0; '
        'border-top:1px solid rgba(120,131,152,0.18);">'
        '<div style="display:flex; justify-content:space-between; gap:1rem; align-items:center;">'
        f'<div><p class="metric-caption">{source}</p>'
        f'<p class="metric-value" style="font-size:1.05rem;">{title}</p></div>'
        f'<span class="interface-badge{alert_severity_class(alert.severity)}">{severity}</span>'
        "</div>"
        f'<p class="stat-detail">{escape(alert.message)}</p>'
        f'<p class="metric-total">Current {current} · threshold {threshold} · '
        f"last seen {last_seen}</p></li>"
    )


def render_retention_card(retention: RetentionSnapshot) -> str:
    """Card describing retention windows and the latest cleanup pass."""
    raw = escape(format_retention_window(retention.interface_raw_seconds))
    rollup = escape(format_retention_window(retention.interface_rollup_seconds))
    run_label = escape(retention_run_label(retention))
    status = escape(retention_status_text(retention))
    samples = retention.deleted_interface_samples
    runs = retention.deleted_trace_runs
    tests = retention.deleted_speed_tests
    resolved = retention.deleted_resolved_alerts
    trace_window = escape(format_retention_window(retention.trace_retention_seconds))
    speed_window = escape(format_retention_window(retention.speed_retention_seconds))
    alert_window = escape(format_retention_window(retention.resolved_alert_seconds))
    cadence = escape(format_retention_window(retention.job_interval_seconds))
    return (
        '<article class="monitor-card"><header class="monitor-header"><div>'
        '<p class="section-label">Retention policies</p>'
        '<h3 class="interface-name">Downsampling and cleanup</h3>'
        '<p class="metric-total">One-minute interface rollups plus expiry windows for traces, '
        "speed tests, and resolved alerts.</p></div>"
        '<div class="interface-badges"><span class="interface-badge">1m rollups</span></div>'
        "</header>"
        '<div class="metric-pair"><div class="metric-block">'
        '<p class="metric-caption">Raw samples</p>'
        f'<p class="metric-value">{raw}</p>'
        '<p class="metric-total">Per-second interface samples stay raw for this long.</p></div>'
        '<div class="metric-block"><p class="metric-caption">Rollup retention</p>'
        f'<p class="metric-value">{rollup}</p>'
        '<p class="metric-total">One-minute interface aggregates remain queryable for this '
        "window.</p></div></div>"
        '<div class="chart-grid"><section class="chart-panel"><div class="chart-header">'
        f'<span>Retention job</span><strong id="retention-last-run">{run_label}</strong></div>'
        f'<p class="stat-detail" id="retention-summary" style="margin-top:0.75rem;">{status}</p>'
        '</section><section class="chart-panel"><div class="chart-header">'
        f"<span>Cleanup counts</span><strong>{samples} / {runs} / {tests}</strong></div>"
        '<p class="stat-detail" id="retention-counts" style="margin-top:0.75rem;">'
        f"Deleted {samples} interface samples, {runs} trace runs, {tests} speed tests, "
        f"and {resolved} resolved alerts in the last successful pass.</p></section></div>"
        '<footer class="monitor-footer">'
        f"<span>Trace retention {trace_window} · speed retention {speed_window}</span>"
        f"<span>Resolved alerts {alert_window} · cadence {cadence}</span>"
        "</footer></article>"
    )


def alert_metric_title(metric_key: str) -> str:
    """Headline for an alert of the given metric."""
    return _METRIC_TITLES.get(metric_key, "Alert")


def alert_value_text(metric_key: str, value: float) -> str:
    """Format an alert's current or threshold value for its metric."""
    if metric_key == "download_bps":
        return format_bitrate(value)
    if metric_key == "latency_ms":
        return format_milliseconds(value)
    if metric_key == "loss_pct":
        return f"{value:.1f}%"
    if metric_key == "availability":
        return "up" if value > 0 else "down"
    return f"{value:.2f}"


def alert_severity_class(severity: str) -> str:
    """Extra badge class for critical alerts."""
    return " interface-badge-live" if severity == "critical" else ""


def retention_run_label(retention: RetentionSnapshot) -> str:
    """When the retention job last succeeded, or last ran, or "Pending"."""
    if retention.last_success_at is not None:
        return format_date_time(retention.last_success_at)
    if retention.last_run_at is not None:
        return format_date_time(retention.last_run_at)
    return "Pending"


def retention_status_text(retention: RetentionSnapshot) -> str:
    """Summary of the latest retention pass."""
    if retention.last_error:
        return retention.last_error
    if retention.last_success_at is None:
        return "Waiting for the first retention pass."
    return (
        f"Last pass wrote {retention.upserted_interface_rollups} rollup row(s) "
        "and cleaned up expired records."
    )