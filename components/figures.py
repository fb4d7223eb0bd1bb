# components/figures.py
from __future__ import annotations
import plotly.graph_objects as go

from components.colors import (
    BAR_FILL, BAR_LINE, CONTINENT_COLORS, UNKNOWN_CONTINENT_COLOR, TREEMAP_BACKGROUND,
)
from components.stat_utils import (
    MONTH_LABELS, CONTINENT_KEY, basin_name, feature_value, features_of, monthly_series,
)
from components.utils_format import fmt_compact, truncate_label

TREEMAP_ROOT = "Water Scarcity * Population"


def apply_white(fig: go.Figure, title: str | None = None) -> go.Figure:
    fig.update_layout(
        template="plotly_white",
        title=title,
        margin=dict(l=10, r=10, t=48, b=10),
    )
    return fig


def empty_fig(title: str | None = None, message: str = "No data available") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        template="plotly_white",
        title=title,
        xaxis={"visible": False},
        yaxis={"visible": False},
        annotations=[dict(text=message, x=0.5, y=0.5, xref="paper", yref="paper", showarrow=False)],
        margin=dict(l=10, r=10, t=48, b=10),
    )
    return fig


# ---------- bar chart ----------
def bar_chart_data(feature: dict | None) -> dict | None:
    """Twelve monthly bars for one basin (missing months drawn as 0)."""
    if not feature:
        return None
    name = basin_name(feature) or "Unknown Basin"
    return {"basin": name, "labels": list(MONTH_LABELS), "values": monthly_series(feature)}


def build_bar_figure(feature: dict | None, selected: str | None, *, height: int = 300) -> go.Figure:
    """Monthly scarcity bars for the resolved basin.

    `selected` is the raw selection: None shows the prompt, a selection that
    resolved to no feature (not even the default basin) shows "no data".
    """
    if not selected:
        return empty_fig(message="Select a basin on the map to see the chart")
    data = bar_chart_data(feature)
    if data is None:
        return empty_fig(message="No data available for this basin")

    fig = go.Figure(go.Bar(
        x=data["labels"], y=data["values"],
        name=f"Monthly Water Shortage for {data['basin']}",
        marker=dict(color=BAR_FILL, line=dict(color=BAR_LINE, width=1)),
        hovertemplate="%{x}: %{y} mm of water shortage<extra></extra>",
    ))
    apply_white(fig, f"Water Scarcity Trends for {data['basin']}")
    fig.update_layout(height=height, margin=dict(l=20, r=20, t=48, b=20), showlegend=False)
    fig.update_xaxes(gridcolor="rgba(0, 0, 0, 0.1)", tickfont=dict(color="rgba(0, 0, 0, 0.7)"))
    fig.update_yaxes(gridcolor="rgba(0, 0, 0, 0.1)", tickfont=dict(color="rgba(0, 0, 0, 0.7)"))
    return fig


# ---------- treemap ----------
def treemap_hierarchy(data) -> dict:
    """Basins ranked by population x average scarcity (largest first).

    Basins missing either number are left out.
    """
    children = []
    for ft in features_of(data):
        scarcity = feature_value(ft, "average")
        population = feature_value(ft, "population")
        name = basin_name(ft)
        if name is None or scarcity is None or population is None:
            continue
        children.append({
            "id": name,
            "value": population * scarcity,
            "population": population,
            "average_scarcity": scarcity,
            "continent": (ft.get("properties") or {}).get(CONTINENT_KEY),
        })
    children.sort(key=lambda c: c["value"], reverse=True)
    return {"name": TREEMAP_ROOT, "children": children}


def build_treemap_figure(hierarchy: dict, *, height: int = 380) -> go.Figure:
    children = hierarchy.get("children") or []
    if not children:
        return empty_fig(message="No data available")

    root = hierarchy.get("name", TREEMAP_ROOT)
    ids = [root] + [c["id"] for c in children]
    fig = go.Figure(go.Treemap(
        ids=ids,
        labels=[root] + [truncate_label(c["id"]) for c in children],
        parents=[""] + [root] * len(children),
        values=[0] + [c["value"] for c in children],
        branchvalues="remainder",
        marker=dict(colors=[TREEMAP_BACKGROUND] + [
            CONTINENT_COLORS.get(c["continent"], UNKNOWN_CONTINENT_COLOR) for c in children
        ]),
        # customdata[0] is the basin name used for hover selection; "" on the root
        customdata=[["", "", "", ""]] + [
            [c["id"], f"{c['average_scarcity']:g}", f"{c['population']:,.0f}", fmt_compact(c["value"])]
            for c in children
        ],
        hovertemplate=("<b>%{customdata[0]}</b><br>Water Scarcity: %{customdata[1]} mm"
                       "<br>Population: %{customdata[2]}<br><b>Value: %{customdata[3]}</b><extra></extra>"),
        tiling=dict(pad=0),
    ))
    fig.update_layout(height=height, margin=dict(l=0, r=0, t=0, b=0),
                      paper_bgcolor=TREEMAP_BACKGROUND)
    return fig
