"""Rendering of the end-to-end speed test cards."""

from __future__ import annotations

from typing import Sequence

from .formatting import (
    format_bitrate,
    format_bytes,
    format_clock,
    format_interval,
    format_milliseconds,
    sparkline_points,
)
from .markup import escape, render_chart_panel
from .models import SpeedTargetSnapshot

_EMPTY_STATE = (
    '<article class="empty-state"><p class="section-label">No speed targets yet</p>'
    "<h3>Speed testing is waiting for configured endpoints</h3>"
    '<p>Set <span class="mono">PI_NTOP_SPEED_TEST_TARGETS</span> to one or more HTTP '
    "endpoints and restart the app to begin download and upload measurements.</p></article>"
)


def render_speed_grid(targets: Sequence[SpeedTargetSnapshot]) -> str:
    """All speed target cards, or an empty-state notice when none are configured."""
    if not targets:
        return _EMPTY_STATE
    return "".join(render_speed_card(target) for target in targets)


def render_speed_card(target: SpeedTargetSnapshot) -> str:
    """Card with the latest measurement and history of one speed target."""
    parts = [
        '<article class="monitor-card"><header class="monitor-header"><div>'
        '<p class="interface-label">Speed target</p>'
        f'<h3 class="interface-name">{escape(target.name)}</h3>'
        f'<p class="metric-total">{escape(target.download_url)}</p></div>'
        f'<div class="interface-badges">{speed_target_badges(target)}</div></header>'
    ]

    test = target.latest_test
    if test is None:
        parts.append(
            '<div class="metric-pair"><div class="metric-block">'
            '<p class="metric-caption">Status</p><p class="metric-value">Pending</p>'
            '<p class="metric-total">Waiting for the first HTTP speed test to complete.</p></div>'
            '<div class="metric-block"><p class="metric-caption">Probe cadence</p>'
            f'<p class="metric-value">{escape(format_interval(target.interval_seconds))}</p>'
            '<p class="metric-total">Configured speed-test interval for this target.</p>'
            "</div></div></article>"
        )
        return "".join(parts)

    history = target.history
    if target.has_upload:
        caption = "Upload"
        value = format_bitrate(test.upload_bps)
        detail = "Latest persisted upload throughput."
        chart_label = "Upload history"
        chart_class = "sparkline-tx"
        chart_points = sparkline_points(point.upload_bps for point in history)
    else:
        caption = "Latency"
        value = format_milliseconds(test.latency_ms)
        detail = "HTTP time-to-first-byte from the most recent download measurement."
        chart_label = "Latency history"
        chart_class = "sparkline-rx"
        chart_points = sparkline_points(point.latency_ms for point in history)

    download = format_bitrate(test.download_bps)
    parts.append(
        '<div class="metric-pair"><div class="metric-block">'
        '<p class="metric-caption">Download</p>'
        f'<p class="metric-value metric-download">{escape(download)}</p>'
        f'<p class="metric-total">Transferred {escape(format_bytes(test.download_bytes))} '
        "in the latest test.</p></div>"
        f'<div class="metric-block"><p class="metric-caption">{escape(caption)}</p>'
        f'<p class="metric-value metric-upload">{escape(value)}</p>'
        f'<p class="metric-total">{escape(detail)}</p></div></div>'
    )

    parts.append('<div class="chart-grid">')
    parts.append(
        render_chart_panel(
            "Download history",
            download,
            sparkline_points(point.download_bps for point in history),
            "sparkline-rx",
        )
    )
    parts.append(render_chart_panel(chart_label, value, chart_points, chart_class))
    parts.append("</div>")

    latency = escape(format_milliseconds(test.latency_ms))
    if test.error_message:
        trailer = escape(test.error_message)
    else:
        trailer = f"Last updated {escape(format_clock(test.completed_at))}"
    parts.append(
        f'<footer class="monitor-footer"><span>Latest latency {latency}</span>'
        f"<span>{trailer}</span></footer></article>"
    )
    return "".join(parts)


def speed_target_badges(target: SpeedTargetSnapshot) -> str:
    """Status, upload and health badges of a speed target."""
    badges = [f'<span class="interface-badge">{escape(speed_status_text(target.status))}</span>']
    if target.has_upload:
        badges.append('<span class="interface-badge">Upload</span>')
    if target.is_healthy:
        badges.append('<span class="interface-badge interface-badge-live">Healthy</span>')
    return "".join(badges)


def speed_status_text(status: str) -> str:
    """Capitalised status, or "Pending" when unknown."""
    if not status:
        return "Pending"
    return status[0].upper() + status[1:]