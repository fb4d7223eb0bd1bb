# components/map_utils.py
"""
Basin map helpers:
- feature_style(feature, scale, prop, ...)      -> per-polygon fill/border style
- build_map_figure(collection, scale, prop, ...) -> choropleth, one exact color per polygon
- legend_spec(scale, label) / add_legend(fig, spec) -> gradient colorbar at the breakpoints
- river_traces(rivers)                          -> optional rivers overlay
- apply_tight_geos(fig, geojson, ...)           -> map frame fitted to the polygons
"""

from __future__ import annotations
import plotly.graph_objects as go

from components.colors import (
    NO_DATA_COLOR, NO_DATA_OPACITY, DATA_OPACITY,
    BORDER_DEFAULT, BORDER_SELECTED, BORDER_WIDTH_DEFAULT, BORDER_WIDTH_SELECTED,
    RIVER_COLOR, RIVER_WIDTH,
)
from components.figures import empty_fig
from components.scales import ColorScale
from components.stat_utils import BASIN_KEY, basin_name, feature_value, features_of
from components.utils_format import fmt_number


# ---------- internal: compute lon/lat bounds ----------
def _geo_bounds(geojson: dict) -> tuple[float, float, float, float]:
    min_lon, max_lon, min_lat, max_lat = 180.0, -180.0, 90.0, -90.0

    def _walk(x):
        nonlocal min_lon, max_lon, min_lat, max_lat
        if not isinstance(x, (list, tuple)):
            return
        if len(x) >= 2 and all(isinstance(v, (int, float)) for v in x[:2]):
            lon, lat = x[0], x[1]
            min_lon, max_lon = min(lon, min_lon), max(lon, max_lon)
            min_lat, max_lat = min(lat, min_lat), max(lat, max_lat)
            return
        for y in x:
            _walk(y)

    for feat in geojson.get("features", []):
        _walk((feat.get("geometry") or {}).get("coordinates", []))
    return min_lon, max_lon, min_lat, max_lat


def apply_tight_geos(fig: go.Figure, geojson: dict, *, height: int = 720, pad_frac: float = 0.02) -> go.Figure:
    min_lon, max_lon, min_lat, max_lat = _geo_bounds(geojson)
    if min_lon <= max_lon and min_lat <= max_lat:
        pad_lon, pad_lat = (max_lon - min_lon) * pad_frac, (max_lat - min_lat) * pad_frac
        fig.update_geos(
            lonaxis_range=[min_lon - pad_lon, max_lon + pad_lon],
            lataxis_range=[min_lat - pad_lat, max_lat + pad_lat],
        )
    fig.update_geos(
        showcountries=True, countrycolor="#bbb",
        showland=True, landcolor="#f3efe6",
        showocean=True, oceancolor="#dde8f0",
        showframe=False,
    )
    fig.update_layout(
        height=int(height),
        margin=dict(l=0, r=0, t=0, b=0),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig


# ---------- public: polygon styling ----------
def feature_style(feature: dict, scale: ColorScale | None, prop: str, *,
                  highlighted: str | None = None, show_rivers: bool = False) -> dict:
    """Fill and border for one basin polygon.

    Absent values get the no-data grey and never reach the color function.
    """
    value = feature_value(feature, prop)
    no_data = value is None or scale is None
    selected = highlighted is not None and basin_name(feature) == highlighted
    return {
        "fillColor": NO_DATA_COLOR if no_data else scale(value),
        "fillOpacity": NO_DATA_OPACITY if no_data else DATA_OPACITY,
        "weight": BORDER_WIDTH_SELECTED if selected else BORDER_WIDTH_DEFAULT,
        "color": BORDER_SELECTED if selected else BORDER_DEFAULT,
        "interactive": not show_rivers,
    }


def _exact_colorscale(colors: list[str]) -> list[list]:
    # z = polygon index lands exactly on its own stop
    if len(colors) == 1:
        return [[0.0, colors[0]], [1.0, colors[0]]]
    n = len(colors) - 1
    return [[i / n, c] for i, c in enumerate(colors)]


# ---------- public: legend ----------
def legend_spec(scale: ColorScale | None, label: str) -> dict | None:
    if scale is None:
        return None
    return {
        "title": label.upper() if scale.mode == "diverging" else label,
        "colorscale": scale.to_plotly_colorscale(),
        "tickvals": scale.breakpoints,
        "ticktext": [fmt_number(b) for b in scale.breakpoints],
    }


def add_legend(fig: go.Figure, spec: dict | None) -> go.Figure:
    """Colorbar-only trace; draws nothing on the map itself."""
    if not spec:
        return fig
    lo, hi = spec["tickvals"][0], spec["tickvals"][-1]
    fig.add_trace(go.Scattergeo(
        lon=[None, None], lat=[None, None], mode="markers",
        marker=dict(
            color=[lo, hi], cmin=lo, cmax=hi if hi > lo else lo + 1,
            colorscale=spec["colorscale"], showscale=True,
            colorbar=dict(title=dict(text=spec["title"]), tickvals=spec["tickvals"],
                          ticktext=spec["ticktext"], orientation="h",
                          x=0.98, xanchor="right", y=0.02, yanchor="bottom",
                          len=0.35, thickness=10),
        ),
        hoverinfo="skip", showlegend=False,
    ))
    return fig


# ---------- public: rivers overlay ----------
def river_traces(rivers: dict | None) -> list[go.Scattergeo]:
    lons, lats, names = [], [], []

    def _add_line(coords, name):
        for pt in coords:
            lons.append(pt[0]); lats.append(pt[1]); names.append(name)
        lons.append(None); lats.append(None); names.append(None)

    for ft in (rivers or {}).get("features", []):
        geom = ft.get("geometry") or {}
        name = (ft.get("properties") or {}).get("RIVER") or "Unnamed River"
        if geom.get("type") == "LineString":
            _add_line(geom.get("coordinates", []), name)
        elif geom.get("type") == "MultiLineString":
            for line in geom.get("coordinates", []):
                _add_line(line, name)
    if not lons:
        return []
    return [go.Scattergeo(
        lon=lons, lat=lats, mode="lines", text=names,
        line=dict(color=RIVER_COLOR, width=RIVER_WIDTH),
        hovertemplate="<b>River:</b> %{text}<extra></extra>",
        showlegend=False,
    )]


# ---------- public: map figure ----------
def build_map_figure(collection: dict | None, scale: ColorScale | None, prop: str, *,
                     highlighted: str | None = None, show_rivers: bool = False,
                     rivers: dict | None = None, height: int = 720) -> go.Figure:
    features = [ft for ft in features_of(collection) if basin_name(ft) is not None]
    if not features:
        return empty_fig(message="No data available")

    styles = [feature_style(ft, scale, prop, highlighted=highlighted, show_rivers=show_rivers)
              for ft in features]
    names = [basin_name(ft) for ft in features]
    shown = [fmt_number(feature_value(ft, prop)) for ft in features]
    # polygons stop taking hover while the rivers overlay is on
    if show_rivers:
        hover = dict(hoverinfo="skip")
    else:
        hover = dict(hovertemplate=f"<b>Basin:</b> %{{customdata[0]}}<br><b>{prop}:</b> %{{customdata[1]}}<extra></extra>")

    fig = go.Figure(go.Choropleth(
        geojson=collection,
        featureidkey=f"properties.{BASIN_KEY}",
        locations=names,
        z=list(range(len(features))),
        zmin=0, zmax=max(len(features) - 1, 1),
        colorscale=_exact_colorscale([s["fillColor"] for s in styles]),
        showscale=False,
        marker=dict(
            opacity=[s["fillOpacity"] for s in styles],
            line=dict(width=[s["weight"] for s in styles], color=[s["color"] for s in styles]),
        ),
        customdata=[[n, v] for n, v in zip(names, shown)],
        **hover,
    ))
    if show_rivers:
        for tr in river_traces(rivers):
            fig.add_trace(tr)
    apply_tight_geos(fig, collection, height=height)
    return fig
