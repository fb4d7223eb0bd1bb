# components/colors.py
"""
Single source of truth for color systems used across the dashboard.
"""

# --- Diverging scale (population / average scarcity) ---
DIVERGING_LOW  = "#2c7bb6"  # blue for low values
DIVERGING_MID  = "#ffffbf"  # yellow at the cutoff
DIVERGING_HIGH = "#d7191c"  # red for high values
DIVERGING_COLORS = [DIVERGING_LOW, DIVERGING_MID, DIVERGING_HIGH]

# --- Continuous scale (monthly data, fixed global range) ---
CONTINUOUS_LOW  = "#fee5d9"  # light red
CONTINUOUS_HIGH = "#a50f15"  # dark red
CONTINUOUS_COLORS = [CONTINUOUS_LOW, CONTINUOUS_HIGH]

# --- No data ---
NO_DATA_COLOR = "#d3d3d3"
NO_DATA_OPACITY = 0.5
DATA_OPACITY = 0.7

# --- Polygon borders ---
BORDER_DEFAULT = "white"
BORDER_SELECTED = "blue"
BORDER_WIDTH_DEFAULT = 2
BORDER_WIDTH_SELECTED = 5

# --- Rivers overlay ---
RIVER_COLOR = "lightblue"
RIVER_WIDTH = 4

# --- Treemap (continents) ---
CONTINENT_COLORS = {
    "Africa":       "#FF8C00",  # orange
    "Asia":         "#FF1493",  # deep pink
    "Europe":       "#32CD32",  # lime green
    "NorthAmerica": "#1E90FF",  # dodger blue
    "SouthAmerica": "#FFD700",  # gold
    "Australia":    "#FF4500",  # orange red
    "Antarctica":   "#00CED1",  # dark turquoise
}
UNKNOWN_CONTINENT_COLOR = "#808080"
TREEMAP_BACKGROUND = "#f5f5dc"  # beige

# --- Bar chart ---
BAR_FILL = "rgba(255, 99, 132, 0.6)"
BAR_LINE = "rgba(255, 99, 132, 1)"
