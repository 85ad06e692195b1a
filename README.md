# pintop

`pintop` turns snapshots from a small local network monitor into HTML fragments
for a monitoring page. It covers these sections:

- end-to-end HTTP speed tests, for download, upload and latency, with sparkline
  history charts;
- traceroute path discovery, showing per-hop RTT, jitter, loss, degraded hops and
  route changes;
- active threshold alerts and the state of the data-retention job.

It also provides the shared pieces these sections use: value formatting, HTML
escaping, stat cards, SVG sparkline panels and a complete HTML document shell.

The package has no runtime dependencies. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Modules

- `pintop.models` holds the dataclasses that describe a snapshot:
  `ThroughputPoint`, `InterfaceSnapshot`, `TraceHopSnapshot`, `TraceRunSummary`,
  `TraceRunDetail`, `TargetPathSnapshot`, `SpeedTestPoint`, `SpeedTestResult`,
  `SpeedTargetSnapshot`, `AlertSnapshot`, `RetentionSnapshot` and
  `DashboardSnapshot`. Every field has a default, and timestamps are optional
  `datetime` values.
- `pintop.formatting` turns values into readable text:
  - `format_bitrate(12_500_000)` gives `"12.5 Mbps"`.
  - `format_bytes(999)` gives `"999 B"`.
  - `format_milliseconds` shows zero or negative values as `"0.0 ms"`.
  - `format_retention_window(172800)` gives `"2 days"`, and `0` gives `"Disabled"`.
  - `format_clock` and `format_date_time` show local times, with `None` shown as
    a waiting or `"Pending"` message.
  - Also `format_interval`, `format_percent`, `title_case`, `scaled_y` and
    `sparkline_points`. The last one builds the points of a 240×72 SVG polyline.
- `pintop.markup` provides `escape`, `stat_card`, `app_shell` and
  `render_chart_panel`.
- `pintop.speed_view` provides `render_speed_grid`, `render_speed_card`,
  `speed_target_badges` and `speed_status_text`.
- `pintop.paths_view` provides `render_path_grid`, `render_path_card`,
  `render_hop_row`, `render_recent_run`, `target_badges` and
  `latest_hop_latency`.
- `pintop.alerts_view` provides `render_alert_grid`, `render_alerts_card`,
  `render_alert_row`, `render_retention_card`, `alert_metric_title`,
  `alert_value_text`, `alert_severity_class`, `retention_run_label` and
  `retention_status_text`.

When a grid renderer gets an empty list, it returns an empty-state notice instead
of cards.

## Usage

```python
from datetime import datetime, timezone

from pintop.alerts_view import render_alert_grid
from pintop.markup import app_shell
from pintop.models import (
    AlertSnapshot,
    RetentionSnapshot,
    SpeedTargetSnapshot,
    SpeedTestPoint,
    SpeedTestResult,
)
from pintop.speed_view import render_speed_grid

now = datetime.now(timezone.utc)

alerts = [
    AlertSnapshot(
        source_name="edge_router",
        metric_key="latency_ms",
        severity="critical",
        message="Latency above threshold",
        current_value=180.0,
        threshold_value=100.0,
        last_seen_at=now,
    ),
]
retention = RetentionSnapshot(interface_raw_seconds=86400, job_interval_seconds=300)

speed_targets = [
    SpeedTargetSnapshot(
        name="mirror",
        download_url="http://localhost:8081/file.bin",
        status="ok",
        is_healthy=True,
        interval_seconds=600,
        latest_test=SpeedTestResult(
            download_bps=95_000_000.0,
            latency_ms=12.4,
            download_bytes=10_000_000,
            completed_at=now,
        ),
        history=[SpeedTestPoint(download_bps=90_000_000.0, latency_ms=13.0)],
    ),
]

body = render_alert_grid(alerts, len(alerts), retention) + render_speed_grid(speed_targets)
html = app_shell("pintop", body)
```

Every renderer returns a string. All text from the snapshot is HTML-escaped.

## What this package does not do

- It does not collect anything. It does not sample interfaces, run traceroutes,
  perform speed tests or evaluate alert thresholds. It only renders snapshots
  that you build.
- It does not store data and does not serve HTTP. You write the returned HTML to
  a file or serve it with a web framework of your choice.
- It does not assemble the full monitoring page and has no per-interface
  throughput cards. `InterfaceSnapshot`, `render_chart_panel` and
  `sparkline_points` are available if you want to build them yourself.
- The HTML it produces contains no script that refreshes the page in the browser.

## Running the tests

```
pytest
```