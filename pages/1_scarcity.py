# pages/1_scarcity.py
from __future__ import annotations
import dash
from dash import html, dcc, Input, Output, State, ctx

from components.cards import kpi_card, basin_kpis
from components.dashboard import BasinDashboard
from components.figures import build_bar_figure, build_treemap_figure, treemap_hierarchy
from components.filters import statistic_select, month_slider, rivers_toggle
from components.layout import page_shell, panel, section_header
from components.loaders import load_basins, load_rivers
from components.map_utils import build_map_figure, legend_spec, add_legend
from components.selection import SelectionState, event_from_hover
from components.stat_utils import StatisticSelector

dash.register_page(__name__, path="/", name="Water Scarcity")
PAGE_ID = "ws"


def layout():
    geo = load_basins()

    header = section_header("Water Scarcity Through Time",
                            "Hover a basin on the map or in the treemap to see its monthly water shortage.")

    filters = [
        statistic_select(PAGE_ID),
        month_slider(PAGE_ID),
        rivers_toggle(PAGE_ID),
    ]

    kpis = [
        kpi_card("Basin", f"{PAGE_ID}-kpi-basin"),
        kpi_card("Population", f"{PAGE_ID}-kpi-pop"),
        kpi_card("Average scarcity", f"{PAGE_ID}-kpi-avg"),
    ]

    left = panel(
        None,
        dcc.Graph(id=f"{PAGE_ID}-map", clear_on_unhover=True, style={"height": "720px"}),
        class_name="map-container",
    )

    right = html.Div(
        [
            panel(None, dcc.Graph(id=f"{PAGE_ID}-bar", style={"height": "300px"}),
                  class_name="bar-chart-container"),
            # static: the treemap reads the collection, not the selection
            panel(None, dcc.Graph(id=f"{PAGE_ID}-treemap", figure=build_treemap_figure(treemap_hierarchy(geo)),
                                  style={"height": "380px"}),
                  class_name="tree-map-container"),
        ]
    )

    foot = html.Div(
        f"{len(geo.get('features', []))} basins • Treemap area is water scarcity × population.",
        style={"textAlign": "right", "opacity": 0.8},
    )

    return html.Div([
        dcc.Store(id=f"{PAGE_ID}-selected", data=None),
        header,
        page_shell(filters=filters, kpis=kpis, left_map=left, right_content=right, footnote=foot),
    ])


@dash.callback(
    Output(f"{PAGE_ID}-month-wrap", "style"),
    Input(f"{PAGE_ID}-stat", "value"),
    State(f"{PAGE_ID}-month-wrap", "style"),
)
def toggle_month(statistic, style):
    style = dict(style or {})
    style["display"] = "block" if statistic == "monthly" else "none"
    return style


@dash.callback(
    Output(f"{PAGE_ID}-selected", "data"),
    Input(f"{PAGE_ID}-map", "hoverData"),
    Input(f"{PAGE_ID}-treemap", "hoverData"),
    State(f"{PAGE_ID}-selected", "data"),
    prevent_initial_call=True,
)
def update_selection(map_hover, tree_hover, current):
    """Last writer wins: whichever view fired this callback decides."""
    state = SelectionState(current)
    if ctx.triggered_id == f"{PAGE_ID}-treemap":
        state.handle(event_from_hover("treemap", tree_hover))
    else:
        state.handle(event_from_hover("map", map_hover))
    return state.get()


@dash.callback(
    Output(f"{PAGE_ID}-map", "figure"),
    Output(f"{PAGE_ID}-bar", "figure"),
    Output(f"{PAGE_ID}-kpi-basin", "children"),
    Output(f"{PAGE_ID}-kpi-pop", "children"),
    Output(f"{PAGE_ID}-kpi-avg", "children"),
    Input(f"{PAGE_ID}-stat", "value"),
    Input(f"{PAGE_ID}-month", "value"),
    Input(f"{PAGE_ID}-rivers", "value"),
    Input(f"{PAGE_ID}-selected", "data"),
)
def render_page(statistic, month, layers, selected):
    geo = load_basins()
    show_rivers = "rivers" in (layers or [])
    rivers = load_rivers() if show_rivers else None

    board = BasinDashboard(geo, StatisticSelector(statistic or "population", int(month or 0)),
                           selection=SelectionState(selected))

    def _map_view(b: BasinDashboard):
        prop = b.selector.key
        fig = build_map_figure(b.collection, b.scale, prop, highlighted=b.highlighted_basin(),
                               show_rivers=show_rivers, rivers=rivers)
        return add_legend(fig, legend_spec(b.scale, prop)) if b.has_data else fig

    board.register_view("map", _map_view)
    board.register_view("bar", lambda b: build_bar_figure(b.resolved_feature(), b.selection.get()))
    board.register_view("kpis", lambda b: basin_kpis(b.resolved_feature()))

    views = board.views
    board.close()
    return (views["map"], views["bar"], *views["kpis"])
