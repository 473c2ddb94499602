"""Terrain types and the legal transitions between them.

A tileset is described by an ordered list of terrain rows. Each row names the
two terrains its 16 tiles blend between, e.g.::

    [["grass", "water"], ["grass", "sand"]]

Loading that table assigns every distinct terrain name a small integer id, in
order of first appearance, and records that the two terrains of each row may
border each other directly. A terrain that shares a row with every other
terrain has `max_transitions` partners; anything less means some terrain
boundaries can only be drawn through a third terrain.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from autotile import config
from autotile.tileset import ConfigError
from autotile.types import TerrainID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerrainType:
    """A terrain and the terrains it may directly border.

    Attributes:
        id: Terrain id, 0..N-1 in order of first appearance.
        name: The terrain name from the configuration.
        transitions: Ids of the terrains this one has transition tiles for,
            sorted ascending.
    """

    id: TerrainID
    name: str
    transitions: tuple[TerrainID, ...] = ()

    def can_border(self, other: TerrainID) -> bool:
        return other in self.transitions


class TerrainCatalog:
    """Terrain ids, transition sets and per-row terrain pairs of a tileset.

    Built once from the terrain definition rows and read-only afterwards, so
    one catalog can back any number of codecs and generators.
    """

    def __init__(self, terrain_defs: Iterable[Sequence[str]]) -> None:
        """Parse terrain definition rows.

        Args:
            terrain_defs: One entry per tileset row, each exactly two terrain names.

        Raises:
            ConfigError: If there are no rows, a row does not hold exactly two
                entries, or an entry is not a string.
        """
        name_to_id: dict[str, TerrainID] = {}
        transitions: dict[TerrainID, set[TerrainID]] = {}
        rows: list[tuple[TerrainID, TerrainID]] = []

        for row_index, terrain_row in enumerate(terrain_defs):
            if (
                isinstance(terrain_row, str)
                or len(terrain_row) != config.TERRAINS_PER_ROW
            ):
                raise ConfigError(
                    f"Each terrain_defs row must contain exactly "
                    f"{config.TERRAINS_PER_ROW} terrain types (row {row_index}: "
                    f"{terrain_row!r})"
                )

            row_ids: list[TerrainID] = []
            for terrain_name in terrain_row:
                if not isinstance(terrain_name, str):
                    raise ConfigError(
                        f"Terrain names must be strings (row {row_index}: "
                        f"{terrain_name!r})"
                    )
                terrain_id = name_to_id.get(terrain_name)
                if terrain_id is None:
                    terrain_id = len(name_to_id)
                    name_to_id[terrain_name] = terrain_id
                    transitions[terrain_id] = set()
                row_ids.append(terrain_id)

            first, second = row_ids
            rows.append((first, second))

            # The row's transition tiles make the pair legal neighbors both ways
            transitions[first].add(second)
            transitions[second].add(first)

        if not rows:
            raise ConfigError("terrain_defs must contain at least one row")
        # Terrain ids share the match mask slots with the MATCH_ANY sentinel
        if len(name_to_id) > config.MATCH_ANY:
            raise ConfigError(
                f"At most {config.MATCH_ANY} terrain types are supported, "
                f"got {len(name_to_id)}"
            )

        self._name_to_id = name_to_id
        self._rows = tuple(rows)
        self._terrain_types = {
            terrain_id: TerrainType(
                terrain_id, name, tuple(sorted(transitions[terrain_id]))
            )
            for name, terrain_id in name_to_id.items()
        }
        self.max_transitions = len(self._terrain_types) - 1

        logger.debug(
            "Loaded %d terrain types from %d rows: %s",
            len(self._terrain_types),
            len(self._rows),
            ", ".join(name_to_id),
        )

    @property
    def rows(self) -> tuple[tuple[TerrainID, TerrainID], ...]:
        """Terrain id pair of every tileset row, in tileset order."""
        return self._rows

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def name_to_id(self) -> dict[str, TerrainID]:
        return dict(self._name_to_id)

    @property
    def terrain_types(self) -> dict[TerrainID, TerrainType]:
        return dict(self._terrain_types)

    def __len__(self) -> int:
        return len(self._terrain_types)

    def __getitem__(self, terrain_id: TerrainID) -> TerrainType:
        return self._terrain_types[terrain_id]

    def terrain_id(self, name: str) -> TerrainID:
        """Id of the named terrain. Raises KeyError for unknown names."""
        return self._name_to_id[name]

    def terrain_name(self, terrain_id: TerrainID) -> str:
        """Name of the terrain with this id. Raises KeyError for unknown ids."""
        return self._terrain_types[terrain_id].name

    def transitions(self, terrain_id: TerrainID) -> tuple[TerrainID, ...]:
        return self._terrain_types[terrain_id].transitions

    def has_limited_transitions(self, terrain_id: TerrainID) -> bool:
        """True if the terrain lacks transition tiles to some other terrain."""
        return len(self.transitions(terrain_id)) < self.max_transitions
