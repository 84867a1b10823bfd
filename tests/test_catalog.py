import threading

import pytest

from gen3party import catalog as catalog_mod
from gen3party.catalog import StaticDataCatalog, build_ability_map, build_lookup
from gen3party.errors import IoFailure


def test_lookup_is_one_indexed_with_dummy_zero():
    names = build_lookup("Bulbasaur\nIvysaur\n")
    assert names == ["", "Bulbasaur", "Ivysaur"]


def test_names_resolve_by_id(mini_catalog):
    assert mini_catalog.species_name(1) == "Bulbasaur"
    assert mini_catalog.species_name(3) == "Tentacruel"
    assert mini_catalog.move_name(2) == "Water Pulse"
    assert mini_catalog.item_name(2) == "Oran Berry"


@pytest.mark.parametrize("id_", [5, 999, 0xFFFF, -1])
def test_unknown_ids_resolve_to_placeholder(mini_catalog, id_):
    assert mini_catalog.species_name(id_) == "???"
    assert mini_catalog.move_name(id_) == "???"
    assert mini_catalog.item_name(id_) == "???"


@pytest.mark.parametrize("slot,expected", [
    (0, "Clear Body"),
    (1, "Liquid Ooze"),
    (2, "Rain Dish"),
])
def test_ability_slots(mini_catalog, slot, expected):
    assert mini_catalog.ability_name("Tentacruel", slot) == expected


def test_ability_lookup_is_case_insensitive(mini_catalog):
    assert mini_catalog.ability_name("TENTACRUEL", 0) == "Clear Body"
    assert mini_catalog.ability_name("tentacruel", 1) == "Liquid Ooze"


def test_ability_unknown_species(mini_catalog):
    assert mini_catalog.ability_name("Missingno", 0) == "???"


def test_malformed_ability_rows_are_skipped():
    table = build_ability_map(
        "species,primary,secondary,hidden\n"
        "Arbok,Intimidate\n"
        "\n"
        "Ekans, Intimidate , Shed Skin ,Unnerve\n"
    )
    assert "arbok" not in table
    assert table["ekans"] == ("Intimidate", "Shed Skin", "Unnerve")


def test_bundled_catalog_loads():
    cat = StaticDataCatalog.load()
    assert cat.species_name(24) == "Arbok"
    assert cat.species_name(73) == "Tentacruel"
    assert cat.move_name(352) == "Water Pulse"
    assert cat.item_name(139) == "Oran Berry"
    assert cat.ability_name("Arbok", 0) == "Intimidate"
    assert cat.species_count == 411


@pytest.mark.parametrize("species_id,expected", [
    (251, "Celebi"),
    (252, "????????"),
    (276, "????????"),
    (277, "Treecko"),
    (300, "Shiftry"),
    (301, "Nincada"),
    (410, "Deoxys"),
    (411, "Chimecho"),
])
def test_bundled_species_use_internal_ids(species_id, expected):
    assert StaticDataCatalog.load().species_name(species_id) == expected


def test_bundled_species_all_have_abilities():
    cat = StaticDataCatalog.load()
    for species_id in range(1, cat.species_count + 1):
        name = cat.species_name(species_id)
        if name == "????????":
            continue
        assert cat.ability_name(name, 0) != "???", name


def test_missing_data_dir_is_io_failure(tmp_path):
    with pytest.raises(IoFailure) as excinfo:
        StaticDataCatalog.load(str(tmp_path / "nope"))
    assert str(excinfo.value).startswith("Failed to read reference data:")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_get_catalog_builds_once(monkeypatch):
    calls = []
    real_load = StaticDataCatalog.load

    def counting_load(*args, **kwargs):
        calls.append(1)
        return real_load(*args, **kwargs)

    catalog_mod.reset_catalog()
    monkeypatch.setattr(StaticDataCatalog, "load", staticmethod(counting_load))
    try:
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(catalog_mod.get_catalog()))
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(calls) == 1
        assert all(r is results[0] for r in results)
    finally:
        catalog_mod.reset_catalog()
