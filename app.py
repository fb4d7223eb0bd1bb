import logging

import dash
from dash import html, dcc
import dash_bootstrap_components as dbc

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = dash.Dash(
    __name__,
    use_pages=True,
    external_stylesheets=[dbc.themes.SANDSTONE],
    suppress_callback_exceptions=True,
    title="Water Scarcity Through Time",
)
server = app.server

def sidebar():
    links = [
        html.Div(dcc.Link(p["name"], href=p["path"], className="sidebar-link"))
        for p in dash.page_registry.values()
    ]
    return html.Div(
        [
            html.H2("MRB", style={"margin":"0 0 6px 0","fontWeight":"800","letterSpacing":"1px"}),
            html.Div("Major River Basins", style={"color":"#6b7280","marginBottom":"10px","fontSize":"0.9rem"}),
            html.Hr(),
            html.Nav(links, style={"display":"grid","gap":"8px"}),
            html.Hr(),
            html.Div(
                "Population, average and monthly water scarcity per river basin.",
                style={"fontSize":"0.9rem","color":"#6b7280","marginTop":"auto"},
            ),
        ],
        className="sidebar",
        style={"padding":"16px"},
    )

app.layout = dbc.Container(
    [
        dbc.Row(
            [
                dbc.Col(sidebar(), width=2, className="g-0"),
                dbc.Col(html.Main(dash.page_container, className="main", style={"padding":"20px"}),
                        width=10, className="g-0"),
            ],
            className="g-0",
        )
    ],
    fluid=True,
)

if __name__ == "__main__":
    logger.info("Starting dashboard on http://127.0.0.1:8050")
    app.run(debug=True, port=8050)
