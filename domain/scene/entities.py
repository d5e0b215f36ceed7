"""Scene Bounded Context - Entities.

The Scene is the only mutable object of the domain. It is filled by the
loader during the build phase and only read afterwards.
"""

from __future__ import annotations

import bisect
from operator import attrgetter
from typing import TypeVar

from domain.scene.errors import DuplicateIdentifierError
from domain.scene.value_objects import Antenna, Structure, StructureKind

_Record = TypeVar("_Record", Structure, Antenna)

_by_id = attrgetter("id")


def _insert_sorted(records: list[_Record], record: _Record, kind: str) -> None:
    """Insert record keeping records sorted by id; reject an existing id.

    The collection is left untouched when the id is already present.
    """
    position = bisect.bisect_left(records, record.id, key=_by_id)
    if position < len(records) and records[position].id == record.id:
        raise DuplicateIdentifierError(kind, record.id)
    records.insert(position, record)


def _find(records: list[_Record], identifier: str) -> _Record | None:
    position = bisect.bisect_left(records, identifier, key=_by_id)
    if position < len(records) and records[position].id == identifier:
        return records[position]
    return None


class Scene:
    """Structures and antennas of one scene, each sorted by identifier.

    Buildings and houses share one identifier namespace; antennas have
    their own. The two namespaces are independent: an antenna may reuse
    the identifier of a structure.
    """

    def __init__(self) -> None:
        self._structures: list[Structure] = []
        self._antennas: list[Antenna] = []

    def __repr__(self) -> str:
        return (
            f"Scene(structures={self.num_structures}, antennas={self.num_antennas})"
        )

    # -----------------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------------
    @property
    def structures(self) -> tuple[Structure, ...]:
        return tuple(self._structures)

    @property
    def antennas(self) -> tuple[Antenna, ...]:
        return tuple(self._antennas)

    @property
    def num_structures(self) -> int:
        return len(self._structures)

    @property
    def num_buildings(self) -> int:
        return sum(1 for s in self._structures if s.kind is StructureKind.BUILDING)

    @property
    def num_houses(self) -> int:
        return sum(1 for s in self._structures if s.kind is StructureKind.HOUSE)

    @property
    def num_antennas(self) -> int:
        return len(self._antennas)

    def is_empty(self) -> bool:
        return not self._structures and not self._antennas

    def get_structure(self, identifier: str) -> Structure | None:
        return _find(self._structures, identifier)

    def get_antenna(self, identifier: str) -> Antenna | None:
        return _find(self._antennas, identifier)

    # -----------------------------------------------------------------------
    # Modifiers
    # -----------------------------------------------------------------------
    def add_structure(self, structure: Structure) -> None:
        """Insert a building or house in identifier order.

        Raises:
            DuplicateIdentifierError: If a structure with the same id exists
        """
        _insert_sorted(self._structures, structure, structure.kind.value)

    def add_antenna(self, antenna: Antenna) -> None:
        """Insert an antenna in identifier order.

        Raises:
            DuplicateIdentifierError: If an antenna with the same id exists
        """
        _insert_sorted(self._antennas, antenna, "antenna")
