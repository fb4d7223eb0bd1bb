import pytest

from components.stat_utils import MONTHS


def make_feature(name, continent="Asia", population=None, average=None, months=None, **extra):
    props = {"RIVERBASIN": name, "CONTINENT": continent}
    if population is not None:
        props["population"] = population
    if average is not None:
        props["average"] = average
    for m, v in zip(MONTHS, months or []):
        if v is not None:
            props[m] = v
    props.update(extra)
    return {
        "type": "Feature",
        "properties": props,
        "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]]},
    }


@pytest.fixture
def basins():
    return {
        "type": "FeatureCollection",
        "features": [
            make_feature("AMUR", "Asia", 1_000_000, 5, months=list(range(1, 13))),
            make_feature("NILE", "Africa", 3_000_000, 10, months=[20] * 6 + [None] + [30] * 5),
            make_feature("DANUBE", "Europe", 2_000_000, 1, months=[0.5] * 12),
            make_feature("ORPHAN", "Atlantis", 500_000, None, months=[]),
        ],
    }
