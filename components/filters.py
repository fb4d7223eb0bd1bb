# components/filters.py
from dash import html, dcc

from components.stat_utils import STATISTICS, MONTH_LABELS


def statistic_select(page_id, value="population"):
    return html.Div(
        [
            html.Label("Statistic"),
            dcc.Dropdown(
                id=f"{page_id}-stat",
                options=[{"label": label, "value": key} for key, label in STATISTICS.items()],
                value=value,
                clearable=False,
                style={"width": "220px"},
            ),
        ]
    )


def month_slider(page_id, value=0):
    # hidden until the "monthly" statistic is picked
    return html.Div(
        [
            html.Label("Month"),
            dcc.Slider(
                id=f"{page_id}-month",
                min=0, max=11, step=1, value=value,
                marks={i: m for i, m in enumerate(MONTH_LABELS)},
            ),
        ],
        id=f"{page_id}-month-wrap",
        style={"display": "none", "minWidth": "420px"},
    )


def rivers_toggle(page_id, on=False):
    return html.Div(
        [
            html.Label("Layers"),
            dcc.Checklist(
                id=f"{page_id}-rivers",
                options=[{"label": " Show rivers", "value": "rivers"}],
                value=["rivers"] if on else [],
            ),
        ]
    )
