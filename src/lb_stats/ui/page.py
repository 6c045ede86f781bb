"""Static dashboard page rendering."""

from __future__ import annotations

from html import escape
from typing import Sequence

from lb_stats.common import StatsSlots, TableView
from lb_stats.explorer import render_table_html
from lb_stats.ui.view import SLOT_LABELS

_PAGE_STYLE = """
    :root { --bg: #f8fafc; --surface: #ffffff; --text: #0f172a; --muted: #64748b;
            --border: #e2e8f0; --accent: #00c030; }
    [data-theme="dark"] { --bg: #14181c; --surface: #1c2228; --text: #e2e8f0;
                          --muted: #94a3b8; --border: #2c3440; --accent: #40bcf4; }
    body { margin: 0; background: var(--bg); color: var(--text);
           font-family: -apple-system, "Segoe UI", sans-serif; font-size: 14px; }
    .layout { display: flex; min-height: 100vh; }
    .sidebar { width: 200px; padding: 16px; border-right: 1px solid var(--border); }
    .menu-item { display: block; padding: 6px 8px; color: var(--text); text-decoration: none; }
    .menu-item.active { color: var(--accent); font-weight: 600; }
    .content { flex: 1; padding: 20px 24px; }
    .stats-view { display: grid; grid-template-columns: repeat(3, 1fr); gap: 12px; }
    .stat-card { background: var(--surface); border: 1px solid var(--border);
                 border-radius: 8px; padding: 12px; }
    .stat-card .label { color: var(--muted); font-size: 12px; }
    .stat-card .value { font-size: 20px; font-weight: 700; }
    .error-container { color: #b91c1c; margin-bottom: 12px; }
    table { border-collapse: collapse; width: 100%; background: var(--surface); }
    th, td { border: 1px solid var(--border); padding: 6px 8px; text-align: left; }
    .sort-arrow { color: var(--muted); margin-left: 4px; }
    .sort-arrow.active { color: var(--accent); }
    .movie-link { color: var(--accent); }
    .no-data { color: var(--muted); padding: 24px; }
"""


def render_dashboard_page(
    slots: StatsSlots,
    datasets: Sequence[str],
    theme: str = "default",
    table_view: TableView | None = None,
    active_dataset: str | None = None,
    error: str | None = None,
) -> str:
    """Render a self-contained page with the stats cards and, optionally, one table."""

    stats_active = "" if active_dataset else " active"
    menu = [f'<a class="menu-item{stats_active}" href="#stats">Stats</a>']
    for dataset_id in datasets:
        active = " active" if dataset_id == active_dataset else ""
        menu.append(
            f'<a class="menu-item{active}" href="#{escape(dataset_id)}">'
            f"{escape(dataset_id.title())}</a>"
        )

    cards = []
    for name, value in slots.as_dict().items():
        cards.append(
            '<div class="stat-card">'
            f'<div class="label">{escape(SLOT_LABELS[name])}</div>'
            f'<div class="value" id="{name.replace("_", "-")}">{escape(value or "-")}</div>'
            "</div>"
        )

    error_html = f'<div class="error-container">{escape(error)}</div>' if error else ""
    table_html = ""
    if table_view is not None:
        title = escape(active_dataset or "")
        table_html = (
            f'<h2 id="{title}">{title}</h2>'
            f'<div id="table-container">{render_table_html(table_view)}</div>'
        )

    return (
        "<!doctype html>\n"
        f"<html lang='en' data-theme='{escape(theme)}'>\n"
        "<head>\n"
        "  <meta charset='utf-8' />\n"
        "  <title>Letterboxd Stats</title>\n"
        f"  <style>{_PAGE_STYLE}</style>\n"
        "</head>\n"
        "<body>\n"
        "<div class='layout'>\n"
        f"  <nav class='sidebar'>{''.join(menu)}</nav>\n"
        "  <main class='content'>\n"
        f"    {error_html}\n"
        "    <h1 id='stats'>Letterboxd Stats</h1>\n"
        f"    <section class='stats-view'>{''.join(cards)}</section>\n"
        f"    {table_html}\n"
        "  </main>\n"
        "</div>\n"
        "</body>\n"
        "</html>\n"
    )
