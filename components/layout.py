from __future__ import annotations
from dash import html


def page_shell(*, filters=None, kpis=None, left_map=None, right_content=None, footnote=None, page_class: str | None = None):
    """Shared page wrapper: map on the left (long), bar chart and treemap stacked on the right."""
    return html.Div(
        [
            html.Div(filters, className="row-filters",
                     style={"display": "flex", "gap": "24px", "alignItems": "flex-end", "flexWrap": "wrap"}),
            html.Div(kpis, className="row-kpis",
                     style={"display": "flex", "gap": "12px", "margin": "12px 0"}),
            html.Div(
                [
                    html.Div(left_map, className="col-left", style={"flex": "2 1 0", "minWidth": 0}),
                    html.Div(right_content, className="col-right", style={"flex": "1 1 0", "minWidth": 0}),
                ],
                className="row-body",
                style={"display": "flex", "gap": "10px"},
            ),
            html.Div(footnote, className="row-foot"),
        ],
        className="page-wrap" + (f" {page_class}" if page_class else ""),
    )


def section_header(title: str, subtitle: str | None = None):
    return html.Div(
        [
            html.H1(title, style={"textAlign": "center", "margin": "0 0 4px 0"}),
            html.Div(subtitle or "", style={"textAlign": "center", "opacity": 0.75, "marginBottom": "16px"}),
        ],
        className="page-header",
    )


def panel(title: str | None, body, class_name: str = ""):
    """Bordered box; `class_name` is the CSS hook of the container (e.g. 'map-container')."""
    return html.Div(
        [
            html.Div(title, className="panel-head") if title else None,
            html.Div(body, className="panel-body"),
        ],
        className=f"panel {class_name}".strip(),
        style={"border": "1px solid #ccc", "borderRadius": "8px", "overflow": "hidden", "marginBottom": "10px"},
    )
