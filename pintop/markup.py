"""Shared HTML building blocks: escaping, stat cards, page shell and chart panels."""

from __future__ import annotations

_ESCAPES = (
    ("&", "&amp;"),
    ("'", "&#39;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&#34;"),
)


def escape(value: object) -> str:
    """Escape text for safe inclusion in HTML content and attribute values."""
    text = str(value)
    for raw, entity in _ESCAPES:
        text = text.replace(raw, entity)
    return text


def stat_card(label: str, value: str, detail: str) -> str:
    """A small card with a label, a headline value and a detail line."""
    return (
        '<article class="stat-card">'
        f'<p class="stat-label">{escape(label)}</p>'
        f'<p class="stat-value">{escape(value)}</p>'
        f'<p class="stat-detail">{escape(detail)}</p>'
        "</article>"
    )


def app_shell(title: str, body: str) -> str:
    """Wrap already rendered body markup in a complete HTML document."""
    return (
        '<!doctype html><html lang="en"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{escape(title)}</title>"
        '<link rel="stylesheet" href="/assets/css/output.css"></head><body>'
        f"{body}"
        "</body></html>"
    )


def render_chart_panel(label: str, value: str, points: str, line_class: str) -> str:
    """A chart panel holding a heading, the current value and an SVG sparkline."""
    return (
        '<section class="chart-panel"><div class="chart-header">'
        f"<span>{escape(label)}</span><strong>{escape(value)}</strong></div>"
        f'<svg class="sparkline {escape(line_class)}" viewBox="0 0 240 72" '
        'preserveAspectRatio="none" aria-hidden="true">'
        f'<polyline points="{escape(points)}"></polyline></svg></section>'
    )