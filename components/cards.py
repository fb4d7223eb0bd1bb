# components/cards.py
from dash import html

from components.stat_utils import basin_name, feature_value
from components.utils_format import fmt_number


def kpi_card(title: str, value_id: str):
    """Small, reusable KPI card."""
    return html.Div(
        [
            html.Div(title, className="kpi-title"),
            html.Div(id=value_id, children="—", className="kpi-value"),
        ],
        className="kpi-card",
        style={"border": "1px solid #ccc", "borderRadius": "8px", "padding": "6px 12px", "minWidth": "160px"},
    )


def basin_kpis(feature: dict | None) -> tuple[str, str, str]:
    """(basin, population, average scarcity) texts for the KPI row."""
    if not feature:
        return "—", "—", "—"
    avg = feature_value(feature, "average")
    return (
        basin_name(feature) or "Unknown Basin",
        fmt_number(feature_value(feature, "population"), max_decimals=0),
        "No Data" if avg is None else f"{fmt_number(avg)} mm",
    )
