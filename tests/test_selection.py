from components.selection import (
    DEFAULT_BASIN, InteractionEvent, SelectionState, event_from_hover, hover_basin, resolve_basin,
)


def test_set_get_clear_notifies_synchronously():
    seen = []
    state = SelectionState()
    state.subscribe(lambda v: seen.append(("first", v)))
    state.subscribe(lambda v: seen.append(("second", v)))
    state.set("NILE")
    assert state.get() == "NILE"
    state.clear()
    assert state.get() is None
    assert seen == [("first", "NILE"), ("second", "NILE"), ("first", None), ("second", None)]


def test_unsubscribe_stops_notifications():
    seen = []
    state = SelectionState()
    unsubscribe = state.subscribe(seen.append)
    state.set("A")
    unsubscribe()
    state.set("B")
    assert seen == ["A"]


def test_write_rules_and_last_writer_wins():
    state = SelectionState()
    assert state.handle(InteractionEvent("map", "enter", "NILE"))
    assert state.handle(InteractionEvent("treemap", "enter", "DANUBE"))
    assert state.get() == "DANUBE"
    # leaving a treemap leaf is not a write source
    assert not state.handle(InteractionEvent("treemap", "leave"))
    assert state.get() == "DANUBE"
    assert state.handle(InteractionEvent("map", "leave"))
    assert state.get() is None


def test_resolve_falls_back_to_default_basin(basins):
    features = basins["features"]
    assert resolve_basin(features, "NILE")["properties"]["RIVERBASIN"] == "NILE"
    assert resolve_basin(features, "RENAMED")["properties"]["RIVERBASIN"] == DEFAULT_BASIN
    assert resolve_basin(features, None) is None
    without_default = [ft for ft in features if ft["properties"]["RIVERBASIN"] != DEFAULT_BASIN]
    assert resolve_basin(without_default, "RENAMED") is None


def test_hover_payloads():
    choropleth = {"points": [{"location": "NILE", "customdata": ["NILE", "10"]}]}
    treemap_leaf = {"points": [{"id": "AMUR", "customdata": ["AMUR", "5", "1,000,000", "5.00M"]}]}
    treemap_root = {"points": [{"id": "Water Scarcity * Population", "customdata": ["", "", "", ""]}]}
    assert hover_basin(choropleth) == "NILE"
    assert hover_basin(treemap_leaf) == "AMUR"
    assert hover_basin(treemap_root) is None
    assert hover_basin({"points": [{"location": "DANUBE"}]}) == "DANUBE"
    assert hover_basin(None) is None
    assert event_from_hover("map", None) == InteractionEvent("map", "leave", None)
    assert event_from_hover("treemap", treemap_leaf) == InteractionEvent("treemap", "enter", "AMUR")
