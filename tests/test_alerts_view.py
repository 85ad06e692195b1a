from datetime import datetime, timezone

import pytest

from pintop.alerts_view import (
    alert_metric_title,
    alert_severity_class,
    alert_value_text,
    render_alert_grid,
    render_alert_row,
    render_alerts_card,
    render_retention_card,
    retention_run_label,
    retention_status_text,
)
from pintop.formatting import (
    format_bitrate,
    format_date_time,
    format_milliseconds,
    format_retention_window,
)
from pintop.models import AlertSnapshot, RetentionSnapshot

SEEN = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


def _alert(**kwargs):
    values = dict(
        source_name="wan_link",
        metric_key="latency_ms",
        severity="critical",
        message="latency too high",
        current_value=250.0,
        threshold_value=100.0,
        last_seen_at=SEEN,
    )
    values.update(kwargs)
    return AlertSnapshot(**values)


@pytest.mark.parametrize(
    "key, title",
    [
        ("download_bps", "Low throughput"),
        ("latency_ms", "High latency"),
        ("loss_pct", "Packet loss"),
        ("route_changed", "Route change"),
        ("availability", "Collector failure"),
        ("something_else", "Alert"),
    ],
)
def test_alert_metric_title(key, title):
    assert alert_metric_title(key) == title


def test_alert_value_text_delegates_to_formatters():
    assert alert_value_text("download_bps", 1500000) == format_bitrate(1500000)
    assert alert_value_text("latency_ms", 42.5) == format_milliseconds(42.5)


def test_alert_value_text_loss_and_default():
    assert alert_value_text("loss_pct", 12.34) == "12.3%"
    assert alert_value_text("route_changed", 1.5) == "1.50"


def test_alert_value_text_availability():
    assert alert_value_text("availability", 1) == "up"
    assert alert_value_text("availability", 0) == "down"


def test_alert_severity_class():
    assert alert_severity_class("critical") == " interface-badge-live"
    assert alert_severity_class("warning") == ""


def test_retention_run_label_precedence():
    earlier = datetime(2024, 4, 1, 8, 0, 0, tzinfo=timezone.utc)
    assert retention_run_label(RetentionSnapshot()) == "Pending"
    assert retention_run_label(RetentionSnapshot(last_run_at=earlier)) == format_date_time(earlier)
    both = RetentionSnapshot(last_run_at=earlier, last_success_at=SEEN)
    assert retention_run_label(both) == format_date_time(SEEN)


def test_retention_status_text():
    assert retention_status_text(RetentionSnapshot()) == "Waiting for the first retention pass."
    failing = RetentionSnapshot(last_error="disk full", last_success_at=SEEN)
    assert retention_status_text(failing) == "disk full"
    ok = RetentionSnapshot(last_success_at=SEEN, upserted_interface_rollups=7)
    assert "wrote 7 rollup row(s)" in retention_status_text(ok)


def test_render_alert_row():
    row = render_alert_row(_alert())
    assert row.startswith("<li") and row.endswith("</li>")
    assert '<p class="metric-caption">wan link</p>' in row
    assert "High latency" in row
    assert 'class="interface-badge interface-badge-live">Critical</span>' in row
    assert f"Current {format_milliseconds(250.0)}" in row
    assert f"threshold {format_milliseconds(100.0)}" in row
    assert f"last seen {format_date_time(SEEN)}" in row


def test_render_alert_row_escapes_message():
    row = render_alert_row(_alert(message="<b>bad</b>", severity="warning"))
    assert "<b>" not in row
    assert "&lt;b&gt;bad&lt;/b&gt;" in row


def test_render_alerts_card_empty():
    card = render_alerts_card([], 0)
    assert "Threshold checks are healthy" in card
    assert "<ul" not in card
    assert card.endswith("</article>")


def test_render_alerts_card_lists_rows_and_footer():
    alerts = [_alert(), _alert(source_name="dns")]
    card = render_alerts_card(alerts, 5)
    assert card.count("<li") == len(alerts)
    assert "5 active issue(s)" in card
    assert "Showing 2 of 5 alerts" in card
    assert card.endswith("</ul>" + card.split("</ul>", 1)[1])


def test_render_alerts_card_without_footer_when_all_shown():
    card = render_alerts_card([_alert()], 1)
    assert "Showing" not in card
    assert card.endswith("</ul></article>")


def test_render_retention_card():
    retention = RetentionSnapshot(
        interface_raw_seconds=3600,
        interface_rollup_seconds=86400 * 7,
        trace_retention_seconds=86400,
        job_interval_seconds=300,
        deleted_interface_samples=4,
        deleted_trace_runs=2,
        deleted_speed_tests=1,
        deleted_resolved_alerts=3,
    )
    card = render_retention_card(retention)
    assert "Deleted 4 interface samples, 2 trace runs, 1 speed tests, and 3 resolved alerts" in card
    assert "<strong>4 / 2 / 1</strong>" in card
    assert format_retention_window(3600) in card
    assert f"Trace retention {format_retention_window(86400)}" in card
    assert f"speed retention {format_retention_window(0)}" in card
    assert f"cadence {format_retention_window(300)}" in card


def test_render_alert_grid_concatenates_cards():
    alerts = [_alert()]
    retention = RetentionSnapshot()
    grid = render_alert_grid(alerts, 1, retention)
    assert grid == render_alerts_card(alerts, 1) + render_retention_card(retention)