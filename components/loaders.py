# components/loaders.py
from __future__ import annotations
import os
import json
import logging
from collections import Counter
from functools import lru_cache
from pathlib import Path

from components.stat_utils import basin_name

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[1]
DATA = Path(os.environ.get("BASIN_DATA_DIR", ROOT / "data"))

BASINS_GEOJSON = DATA / "updated_mrb_basins.json"
RIVERS_GEOJSON = DATA / "river.json"


def empty_collection() -> dict:
    return {"type": "FeatureCollection", "features": []}


def _mtime(p: Path) -> float:
    try:
        return os.path.getmtime(p)
    except FileNotFoundError:
        return 0.0


@lru_cache(maxsize=4)
def _read_collection(path: str, version: float) -> dict:
    # `version` (file mtime) only busts the cache when the file changes
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading GeoJSON data from {path}: {e}")
        return empty_collection()
    if not isinstance(data, dict) or not isinstance(data.get("features"), list):
        logger.error(f"{path} is not a GeoJSON FeatureCollection")
        return empty_collection()
    return data


def check_basins(geojson: dict) -> list[str]:
    """Data-quality problems that make basin selection ambiguous."""
    issues = []
    names = [basin_name(ft) for ft in geojson.get("features", [])]
    unnamed = sum(1 for n in names if n is None)
    if unnamed:
        issues.append(f"{unnamed} feature(s) without a basin name")
    dupes = sorted(n for n, c in Counter(n for n in names if n).items() if c > 1)
    if dupes:
        issues.append(f"Duplicate basin names: {dupes}")
    return issues


# ---- Basins ----
def load_basins(path: Path | str = BASINS_GEOJSON) -> dict:
    """Basin FeatureCollection, read once per file version. Never raises."""
    p = Path(path)
    data = _read_collection(str(p), _mtime(p))
    for issue in check_basins(data):
        logger.warning(issue)
    return data


# ---- Rivers (optional overlay) ----
def load_rivers(path: Path | str = RIVERS_GEOJSON) -> dict:
    p = Path(path)
    if not p.exists():
        return empty_collection()
    return _read_collection(str(p), _mtime(p))
