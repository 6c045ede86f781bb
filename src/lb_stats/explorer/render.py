"""HTML rendering of a table view model."""

from __future__ import annotations

from html import escape

from lb_stats.common import Cell, HeaderCell, TableView

NO_DATA_HTML = '<div class="no-data">No data available</div>'


def render_table_html(view: TableView) -> str:
    if view.is_empty:
        return NO_DATA_HTML

    header_html = "".join(_render_header(header) for header in view.headers)
    rows_html = "".join(
        "<tr>" + "".join(_render_cell(cell) for cell in row) + "</tr>" for row in view.rows
    )
    return (
        "<table>"
        f"<thead><tr>{header_html}</tr></thead>"
        f"<tbody>{rows_html}</tbody>"
        "</table>"
    )


def _render_header(header: HeaderCell) -> str:
    arrow_class = "sort-arrow active" if header.active else "sort-arrow"
    return (
        f'<th data-column="{escape(header.name)}">'
        f"{escape(header.name)}"
        f'<span class="{arrow_class}">{header.indicator}</span>'
        "</th>"
    )


def _render_cell(cell: Cell) -> str:
    if cell.href:
        return (
            "<td>"
            f'<a href="{escape(cell.href)}" target="_blank" rel="noopener" class="movie-link">'
            f'{escape(cell.text)}<span class="external-icon">↗</span>'
            "</a>"
            "</td>"
        )
    return f"<td>{escape(cell.text)}</td>"
