"""
Tests for the preference store.

See world/variant_persist/scenario.py for implementation.
"""

import logging

from world.variant_persist.config import VariantPersistConfig, set_config
from world.variant_persist.config_node import ConfigNode
from world.variant_persist.scenario import VariantPreferenceStore

from tests.helpers import make_catalog, make_part, make_section


# =============================================================================
# RECORD
# =============================================================================

def test_record_adds_entry():
    store = VariantPreferenceStore()
    store.record("wingA", "red")

    assert store.get("wingA") == "red"
    assert "wingA" in store
    assert len(store) == 1


def test_record_same_pair_twice_keeps_one_entry():
    store = VariantPreferenceStore()
    store.record("wingA", "red")
    store.record("wingA", "red")

    assert store.as_dict() == {"wingA": "red"}


def test_record_overwrites_previous_variant():
    """At most one preferred variant per part."""
    store = VariantPreferenceStore()
    store.record("wingA", "red")
    store.record("wingA", "white")

    assert store.as_dict() == {"wingA": "white"}


def test_select_default_variant_uses_part_selection():
    store = VariantPreferenceStore()
    part = make_part("tankB", ["short", "long"], selected="long")

    store.select_default_variant(part)

    assert store.get("tankB") == "long"


def test_select_default_variant_without_selection_is_ignored():
    store = VariantPreferenceStore()
    part = make_part("tankB", [])

    store.select_default_variant(part)

    assert len(store) == 0


def test_remove():
    store = VariantPreferenceStore()
    store.record("wingA", "red")

    assert store.remove("wingA") is True
    assert store.remove("wingA") is False
    assert "wingA" not in store


# =============================================================================
# LOAD
# =============================================================================

def test_load_applies_existing_variant(catalog):
    """{"wingA": "red"} with red available: part set to red, mapping unchanged."""
    store = VariantPreferenceStore()
    catalog.find_part("wingA").variant = catalog.find_part("wingA").find_variant("white")

    report = store.load(make_section({"wingA": "red"}), catalog)

    assert catalog.find_part("wingA").variant.name == "red"
    assert store.as_dict() == {"wingA": "red"}
    assert report.loaded == 1
    assert report.applied == ["wingA"]
    assert report.pruned == []


def test_load_prunes_missing_variant(catalog, caplog):
    """{"wingA": "blue"} where blue no longer exists: entry dropped."""
    store = VariantPreferenceStore()

    with caplog.at_level(logging.WARNING, logger="variant_persist"):
        report = store.load(make_section({"wingA": "blue"}), catalog)

    assert "wingA" not in store
    assert report.missing_variants == ["wingA"]
    assert catalog.find_part("wingA").variant.name == "red"
    assert 'No such variant "blue" exists for part "wingA"' in caplog.text


def test_load_prunes_missing_part(catalog, caplog):
    store = VariantPreferenceStore()

    with caplog.at_level(logging.WARNING, logger="variant_persist"):
        report = store.load(make_section({"oldModPart": "green"}), catalog)

    assert "oldModPart" not in store
    assert report.missing_parts == ["oldModPart"]
    assert 'No such part "oldModPart" found' in caplog.text


def test_load_keeps_valid_entries_while_pruning_others(catalog):
    store = VariantPreferenceStore()
    section = make_section({
        "wingA": "white",
        "gone": "x",
        "tankB": "long",
        "tankB_old": "short",
    })

    report = store.load(section, catalog)

    assert store.as_dict() == {"wingA": "white", "tankB": "long"}
    assert report.loaded == 4
    assert report.applied == ["wingA", "tankB"]
    assert sorted(report.pruned) == ["gone", "tankB_old"]
    assert catalog.find_part("tankB").variant.name == "long"


def test_load_ignores_values_without_prefix(catalog):
    """The host's name/scene bookkeeping values are not preferences."""
    store = VariantPreferenceStore()

    report = store.load(make_section({"wingA": "red"}), catalog)

    assert "name" not in store
    assert "scene" not in store
    assert report.loaded == 1


def test_load_replaces_previous_contents(catalog):
    store = VariantPreferenceStore()
    store.record("tankB", "short")

    store.load(make_section({"wingA": "red"}), catalog)

    assert store.as_dict() == {"wingA": "red"}


def test_load_duplicate_part_last_wins(catalog, caplog):
    store = VariantPreferenceStore()
    node = make_section({})
    node.add_value("part:wingA", "red")
    node.add_value("part:wingA", "white")

    with caplog.at_level(logging.WARNING, logger="variant_persist"):
        store.load(node, catalog)

    assert store.as_dict() == {"wingA": "white"}
    assert catalog.find_part("wingA").variant.name == "white"
    assert "Duplicate default variant" in caplog.text


def test_load_empty_section(catalog):
    store = VariantPreferenceStore()

    report = store.load(ConfigNode("SCENARIO"), catalog)

    assert len(store) == 0
    assert report.loaded == 0


def test_load_uses_configured_prefix(catalog):
    set_config(VariantPersistConfig(part_prefix="variant."))
    store = VariantPreferenceStore()

    store.load(make_section({"tankB": "long"}, prefix="variant."), catalog)

    assert store.as_dict() == {"tankB": "long"}


def test_store_config_overrides_active_config(catalog):
    store = VariantPreferenceStore(VariantPersistConfig(part_prefix="pv/"))

    store.load(make_section({"tankB": "long", "wingA": "red"}, prefix="pv/"), catalog)

    assert store.as_dict() == {"tankB": "long", "wingA": "red"}


# =============================================================================
# SAVE
# =============================================================================

def test_save_writes_prefixed_values_in_order():
    store = VariantPreferenceStore()
    store.record("wingA", "red")
    store.record("tankB", "long")
    node = ConfigNode("SCENARIO")

    store.save(node)

    assert node.values == [("part:wingA", "red"), ("part:tankB", "long")]


def test_save_load_round_trip(catalog):
    original = VariantPreferenceStore()
    original.record("wingA", "white")
    original.record("tankB", "short")
    node = make_section({})
    original.save(node)

    restored = VariantPreferenceStore()
    restored.load(node, make_catalog({"wingA": ["red", "white"], "tankB": ["short", "long"]}))

    assert restored.as_dict() == original.as_dict()


def test_record_rejects_names_the_save_cannot_hold(caplog):
    store = VariantPreferenceStore()

    with caplog.at_level(logging.WARNING, logger="variant_persist"):
        assert store.record("wingA", "Mk{2}") is False
        assert store.record("wing=A", "red") is False

    assert len(store) == 0
    assert "Not remembering default variant" in caplog.text


def test_duplicate_lines_count_once_in_report(catalog):
    store = VariantPreferenceStore()
    node = make_section({"tankB": "short"})
    node.add_value("part:tankB", "long")

    report = store.load(node, catalog)

    assert report.loaded == 1
    assert report.loaded == len(report.applied) + len(report.pruned)
