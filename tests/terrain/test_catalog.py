"""Tests for terrain id assignment and transition bookkeeping."""

from __future__ import annotations

import pytest

from autotile.terrain.catalog import TerrainCatalog, TerrainType
from autotile.tileset import ConfigError
from tests.helpers import SCENARIO_TERRAIN_DEFS, STAR_TERRAIN_DEFS


class TestTerrainIds:
    """Tests for name -> id assignment."""

    def test_ids_follow_first_appearance(self) -> None:
        """grass, water, sand get ids 0, 1, 2 in the order they first appear."""
        catalog = TerrainCatalog(SCENARIO_TERRAIN_DEFS)

        assert catalog.name_to_id == {"grass": 0, "water": 1, "sand": 2}
        assert len(catalog) == 3

    def test_repeated_names_reuse_ids(self) -> None:
        """A name seen again maps to its existing id."""
        catalog = TerrainCatalog([("a", "b"), ("b", "c"), ("c", "a")])

        assert catalog.rows == ((0, 1), (1, 2), (2, 0))

    def test_rows_expressed_as_ids(self) -> None:
        catalog = TerrainCatalog(SCENARIO_TERRAIN_DEFS)

        assert catalog.rows == ((0, 1), (0, 2))
        assert catalog.row_count == 2

    def test_lookup_by_name_and_id(self) -> None:
        catalog = TerrainCatalog(SCENARIO_TERRAIN_DEFS)

        assert catalog.terrain_id("sand") == 2
        assert catalog.terrain_name(1) == "water"
        assert catalog[0] == TerrainType(0, "grass", (1, 2))

    def test_unknown_lookups_raise_key_error(self) -> None:
        catalog = TerrainCatalog(SCENARIO_TERRAIN_DEFS)

        with pytest.raises(KeyError):
            catalog.terrain_id("lava")
        with pytest.raises(KeyError):
            catalog.terrain_name(7)


class TestTransitions:
    """Tests for transition sets and max_transitions."""

    def test_scenario_transitions(self) -> None:
        """grass borders water and sand; water and sand only border grass."""
        catalog = TerrainCatalog(SCENARIO_TERRAIN_DEFS)

        assert catalog.transitions(0) == (1, 2)
        assert catalog.transitions(1) == (0,)
        assert catalog.transitions(2) == (0,)

    def test_max_transitions_is_terrain_count_minus_one(self) -> None:
        assert TerrainCatalog(SCENARIO_TERRAIN_DEFS).max_transitions == 2
        assert TerrainCatalog(STAR_TERRAIN_DEFS).max_transitions == 3
        assert TerrainCatalog([("grass", "water")]).max_transitions == 1

    @pytest.mark.parametrize(
        "terrain_defs",
        [
            SCENARIO_TERRAIN_DEFS,
            STAR_TERRAIN_DEFS,
            [("a", "b"), ("b", "c"), ("c", "d"), ("d", "a"), ("a", "c")],
        ],
    )
    def test_transitions_are_symmetric(self, terrain_defs) -> None:
        """Every row (A, B) puts B in A's transitions and A in B's."""
        catalog = TerrainCatalog(terrain_defs)

        for name_a, name_b in terrain_defs:
            id_a = catalog.terrain_id(name_a)
            id_b = catalog.terrain_id(name_b)
            assert catalog[id_a].can_border(id_b)
            assert catalog[id_b].can_border(id_a)

    def test_transitions_are_sorted_without_duplicates(self) -> None:
        """Rows repeating a pair register the transition once."""
        catalog = TerrainCatalog([("c", "a"), ("a", "b"), ("a", "c")])

        assert catalog.transitions(1) == (0, 2)

    def test_limited_transitions(self) -> None:
        """Only terrains missing a partner count as limited."""
        catalog = TerrainCatalog(STAR_TERRAIN_DEFS)

        assert not catalog.has_limited_transitions(catalog.terrain_id("grass"))
        for name in ("water", "sand", "dirt"):
            assert catalog.has_limited_transitions(catalog.terrain_id(name))

    def test_two_terrain_tileset_has_no_limited_terrains(self) -> None:
        catalog = TerrainCatalog([("grass", "water")])

        assert not catalog.has_limited_transitions(0)
        assert not catalog.has_limited_transitions(1)


class TestMalformedDefinitions:
    """Tests for ConfigError on malformed terrain definitions."""

    def test_three_terrains_in_a_row(self) -> None:
        with pytest.raises(ConfigError, match="exactly 2 terrain types"):
            TerrainCatalog([("grass", "water"), ("grass", "sand", "dirt")])

    def test_single_terrain_in_a_row(self) -> None:
        with pytest.raises(ConfigError, match="exactly 2 terrain types"):
            TerrainCatalog([("grass",)])

    def test_string_row_is_rejected(self) -> None:
        """A two character string is not a pair of terrain names."""
        with pytest.raises(ConfigError):
            TerrainCatalog(["gw"])

    def test_non_string_terrain_name(self) -> None:
        with pytest.raises(ConfigError, match="must be strings"):
            TerrainCatalog([("grass", 3)])

    def test_no_rows(self) -> None:
        with pytest.raises(ConfigError, match="at least one row"):
            TerrainCatalog([])

    def test_too_many_terrains(self) -> None:
        """Terrain ids must stay below the MATCH_ANY sentinel."""
        terrain_defs = [(f"t{2 * i}", f"t{2 * i + 1}") for i in range(64)]

        with pytest.raises(ConfigError, match="At most 127"):
            TerrainCatalog(terrain_defs)
