from datetime import datetime, timezone

from pintop.formatting import format_clock, format_interval, format_milliseconds
from pintop.models import (
    TargetPathSnapshot,
    TraceHopSnapshot,
    TraceRunDetail,
    TraceRunSummary,
)
from pintop.paths_view import (
    latest_hop_latency,
    render_hop_row,
    render_path_card,
    render_path_grid,
    render_recent_run,
    target_badges,
)

COMPLETED = datetime(2024, 5, 1, 12, 30, 15, tzinfo=timezone.utc)


def _target(**kwargs):
    base = dict(name="gateway", host="192.0.2.1", status="healthy", probe_interval_seconds=30)
    base.update(kwargs)
    return TargetPathSnapshot(**base)


def _run(**kwargs):
    base = dict(
        status="completed",
        completed_at=COMPLETED,
        hop_count=2,
        degraded_hop_count=0,
        hops=[
            TraceHopSnapshot(hop_index=1, address="10.0.0.1", avg_rtt_ms=1.5),
            TraceHopSnapshot(hop_index=2, address="192.0.2.1", avg_rtt_ms=12.5),
        ],
    )
    base.update(kwargs)
    return TraceRunDetail(**base)


def test_latest_hop_latency_empty_is_zero():
    assert latest_hop_latency([]) == 0


def test_latest_hop_latency_skips_trailing_timeouts():
    hops = [
        TraceHopSnapshot(hop_index=1, avg_rtt_ms=3.0),
        TraceHopSnapshot(hop_index=2, avg_rtt_ms=7.0),
        TraceHopSnapshot(hop_index=3, avg_rtt_ms=99.0, is_timeout=True),
    ]
    assert latest_hop_latency(hops) == 7.0


def test_latest_hop_latency_all_timeouts_is_zero():
    hops = [TraceHopSnapshot(avg_rtt_ms=5.0, is_timeout=True)] * 3
    assert latest_hop_latency(hops) == 0


def test_hop_row_statuses():
    assert "Timeout" in render_hop_row(TraceHopSnapshot(is_timeout=True, is_degraded=True))
    assert "Degraded" in render_hop_row(TraceHopSnapshot(is_degraded=True))
    assert "Stable" in render_hop_row(TraceHopSnapshot())


def test_hop_row_address_fallbacks():
    row = render_hop_row(TraceHopSnapshot(hop_index=4, hostname="router.example.com"))
    assert "Hop 4" in row
    assert '<p class="metric-value" style="font-size:1.05rem;">router.example.com</p>' in row
    assert '<p class="metric-value" style="font-size:1.05rem;">No reply</p>' in render_hop_row(
        TraceHopSnapshot()
    )


def test_hop_row_escapes_and_formats():
    row = render_hop_row(TraceHopSnapshot(address="<x>", avg_rtt_ms=12.5, jitter_ms=0.0))
    assert "&lt;x&gt;" in row
    assert "<x>" not in row
    assert f"RTT {format_milliseconds(12.5)}" in row
    assert "jitter 0.0 ms" in row


def test_recent_run_texts():
    stable = render_recent_run(TraceRunSummary(started_at=COMPLETED, hop_count=5))
    assert "Stable route · 5 hops · healthy" in stable
    assert format_clock(COMPLETED) in stable
    changed = render_recent_run(TraceRunSummary(route_changed=True, hop_count=6, degraded_hop_count=2))
    assert "Route changed · 6 hops · 2 degraded hop(s)" in changed


def test_recent_run_without_start_waits():
    assert "Waiting for samples" in render_recent_run(TraceRunSummary())


def test_target_badges():
    plain = target_badges(_target(status="degraded"))
    assert plain == '<span class="interface-badge">Degraded</span>'
    full = target_badges(_target(status="multi word", route_changed=True, has_degraded_hop=True))
    assert full.startswith('<span class="interface-badge">Multi Word</span>')
    assert "Route change" in full
    assert full.endswith('<span class="interface-badge interface-badge-live">Degraded</span>')


def test_path_grid_empty_state():
    html = render_path_grid([])
    assert "PI_NTOP_TRACE_TARGETS" in html
    assert html.startswith('<article class="empty-state">')


def test_path_grid_renders_each_target():
    html = render_path_grid([_target(name="a"), _target(name="b", latest_run=_run())])
    assert html.count('<article class="monitor-card">') == 2
    assert html.index(">a</h3>") < html.index(">b</h3>")


def test_pending_card():
    html = render_path_card(_target())
    assert "Waiting for the first traceroute run to complete." in html
    assert format_interval(30) in html
    assert html.endswith("</article>")
    assert "Current path" not in html


def test_card_with_run():
    target = _target(
        latest_run=_run(),
        recent_runs=[TraceRunSummary(hop_count=2), TraceRunSummary(hop_count=3)],
    )
    html = render_path_card(target)
    assert format_milliseconds(12.5) in html
    assert "<strong>Completed</strong>" in html
    assert "<strong>2 runs</strong>" in html
    assert "0 / 2" in html
    assert html.index("10.0.0.1") < html.index("Hop 2")
    assert f"Probe cadence {format_interval(30)}" in html
    assert f"Last updated {format_clock(COMPLETED)}" in html
    assert html.endswith("</footer></article>")


def test_card_no_reply_and_error_note():
    run = _run(
        hops=[TraceHopSnapshot(hop_index=1, is_timeout=True)],
        error_message="trace & probe failed",
    )
    html = render_path_card(_target(latest_run=run))
    assert '<p class="metric-value">No reply</p>' in html
    assert "<span>Collector note</span><span>trace &amp; probe failed</span>" in html
    assert "Last updated" not in html