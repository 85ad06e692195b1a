"""Rendering of the traceroute path discovery cards."""

from __future__ import annotations

from typing import Sequence

from .formatting import (
    format_clock,
    format_interval,
    format_milliseconds,
    format_percent,
)
from .markup import escape
from .models import TargetPathSnapshot, TraceHopSnapshot, TraceRunSummary

_EMPTY_STATE = (
    '<article class="empty-state"><p class="section-label">No trace targets yet</p>'
    "<h3>Path discovery is waiting for configured targets</h3>"
    '<p>Set <span class="mono">PI_NTOP_TRACE_TARGETS</span> to one or more hosts or IPs '
    "and restart the app to begin traceroute snapshots.</p></article>"
)

_ROW_BORDER = "border-top:1px solid rgba(120,131,152,0.18);"


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _title_words(value: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched."""
    chars = []
    previous = " "
    for char in value:
        chars.append(char.upper() if not _is_word_char(previous) else char)
        previous = char
    return "".join(chars)


def render_path_grid(targets: Sequence[TargetPathSnapshot]) -> str:
    """All trace target cards, or an empty-state notice when none are configured."""
    if not targets:
        return _EMPTY_STATE
    return "".join(render_path_card(target) for target in targets)


def render_path_card(target: TargetPathSnapshot) -> str:
    """Card with the current path, hop health and route history of one target."""
    parts = [
        '<article class="monitor-card"><header class="monitor-header"><div>'
        '<p class="interface-label">Trace target</p>'
        f'<h3 class="interface-name">{escape(target.name)}</h3>'
        f'<p class="metric-total">{escape(target.host)}</p></div>'
        f'<div class="interface-badges">{target_badges(target)}</div></header>'
    ]
    cadence = escape(format_interval(target.probe_interval_seconds))

    run = target.latest_run
    if run is None:
        parts.append(
            '<div class="metric-pair"><div class="metric-block">'
            '<p class="metric-caption">Status</p><p class="metric-value">Pending</p>'
            '<p class="metric-total">Waiting for the first traceroute run to complete.</p></div>'
            '<div class="metric-block"><p class="metric-caption">Probe cadence</p>'
            f'<p class="metric-value">{cadence}</p>'
            '<p class="metric-total">Configured discovery interval for this target.</p>'
            "</div></div></article>"
        )
        return "".join(parts)

    latency = latest_hop_latency(run.hops)
    latency_text = format_milliseconds(latency) if latency > 0 else "No reply"
    completed = escape(format_clock(run.completed_at))
    run_count = len(target.recent_runs)

    parts.append(
        '<div class="metric-pair"><div class="metric-block">'
        '<p class="metric-caption">End-to-end RTT</p>'
        f'<p class="metric-value">{escape(latency_text)}</p>'
        '<p class="metric-total">Last reachable hop from the most recent path snapshot.</p>'
        '</div><div class="metric-block"><p class="metric-caption">Hop health</p>'
        f'<p class="metric-value">{run.degraded_hop_count} / {run.hop_count}</p>'
        '<p class="metric-total">Degraded hops in the current path.</p></div></div>'
    )
    parts.append('<div class="chart-grid">')
    parts.append(
        '<section class="chart-panel"><div class="chart-header"><span>Latest trace</span>'
        f"<strong>{escape(_title_words(run.status))}</strong></div>"
        '<p class="stat-detail" style="margin-top:0.75rem;">'
        f"Completed {completed} with {run.hop_count} discovered hops.</p></section>"
    )
    history_text = f"{run_count} recent runs persisted for this target."
    parts.append(
        '<section class="chart-panel"><div class="chart-header"><span>Route history</span>'
        f"<strong>{run_count} runs</strong></div>"
        f'<p class="stat-detail" style="margin-top:0.75rem;">{escape(history_text)}</p>'
        "</section></div>"
    )

    parts.append(
        '<section style="margin-top:1.5rem;"><p class="section-label">Current path</p>'
        '<ol style="display:grid; gap:0.75rem; margin-top:0.75rem;">'
    )
    parts.extend(render_hop_row(hop) for hop in run.hops)
    parts.append("</ol></section>")

    parts.append(
        '<section style="margin-top:1.5rem;"><p class="section-label">Recent route history</p>'
        '<ul style="display:grid; gap:0.6rem; margin-top:0.75rem;">'
    )
    parts.extend(render_recent_run(summary) for summary in target.recent_runs)
    parts.append("</ul></section>")

    if run.error_message:
        parts.append(
            '<footer class="monitor-footer"><span>Collector note</span>'
            f"<span>{escape(run.error_message)}</span></footer>"
        )
    else:
        parts.append(
            f'<footer class="monitor-footer"><span>Probe cadence {cadence}</span>'
            f"<span>Last updated {completed}</span></footer>"
        )

    parts.append("</article>")
    return "".join(parts)


def render_hop_row(hop: TraceHopSnapshot) -> str:
    """One list item describing a hop of the current path."""
    if hop.is_timeout:
        status = "Timeout"
    elif hop.is_degraded:
        status = "Degraded"
    else:
        status = "Stable"

    address = hop.address or hop.hostname or "No reply"

    return (
        '<li style="display:flex; justify-content:space-between; gap:1rem; '
        f'padding:0.85rem 0 0.85rem; {_ROW_BORDER}">'
        f'<div><p class="metric-caption">Hop {hop.hop_index}</p>'
        f'<p class="metric-value" style="font-size:1.05rem;">{escape(address)}</p>'
        f'<p class="metric-total">{escape(hop.hostname)}</p></div>'
        '<div style="text-align:right; min-width:12rem;">'
        f'<p class="metric-caption">{escape(status)}</p>'
        f'<p class="metric-total">RTT {escape(format_milliseconds(hop.avg_rtt_ms))} · '
        f"jitter {escape(format_milliseconds(hop.jitter_ms))} · "
        f"loss {escape(format_percent(hop.loss_pct))}</p></div></li>"
    )


def render_recent_run(run: TraceRunSummary) -> str:
    """One list item summarising a past traceroute run."""
    change_text = "Route changed" if run.route_changed else "Stable route"
    if run.degraded_hop_count > 0:
        degraded_text = f"{run.degraded_hop_count} degraded hop(s)"
    else:
        degraded_text = "healthy"
    return (
        '<li style="display:flex; justify-content:space-between; gap:1rem; '
        f'padding:0.75rem 0; {_ROW_BORDER}">'
        f"<span>{escape(format_clock(run.started_at))}</span>"
        f"<span>{escape(change_text)} · {run.hop_count} hops · {escape(degraded_text)}</span>"
        "</li>"
    )


def target_badges(target: TargetPathSnapshot) -> str:
    """Status, route change and degradation badges of a trace target."""
    badges = [f'<span class="interface-badge">{escape(_title_words(target.status))}</span>']
    if target.route_changed:
        badges.append('<span class="interface-badge">Route change</span>')
    if target.has_degraded_hop:
        badges.append('<span class="interface-badge interface-badge-live">Degraded</span>')
    return "".join(badges)


def latest_hop_latency(hops: Sequence[TraceHopSnapshot]) -> float:
    """Average RTT of the last hop that replied, or 0 when none did."""
    for hop in reversed(hops):
        if not hop.is_timeout:
            return hop.avg_rtt_ms
    return 0.0