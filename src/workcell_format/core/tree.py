"""Identifier space and parent-indexed entries shared by all entity kinds.

Every entity of a workcell lives in a dict keyed by its own id and stores the
id of its parent next to its payload. Frames, geometry, inertias and joints
are kept in separate dicts but draw their ids from one counter, so an id
never names two entities.
"""

from collections import defaultdict
from typing import Dict, Generic, Iterable, List, Mapping, TypeVar

from flax import struct

# Reserved for the workcell root.
ROOT_ID = 0
# Parent of an entity that has none, larger than any 32 bit id.
NO_PARENT = 2**32 - 1

T = TypeVar("T")


@struct.dataclass
class Parented(Generic[T]):
    """An entity payload together with the id of its parent."""
    parent: int = struct.field(pytree_node=False)
    bundle: T


class IdAllocator:
    """Strictly increasing id counter, starting above the root id."""

    def __init__(self, start: int = ROOT_ID + 1):
        if start <= ROOT_ID:
            raise ValueError(f"Ids must start above the root id {ROOT_ID}, got {start}")
        self._next = start

    @classmethod
    def for_workcell(cls, workcell) -> "IdAllocator":
        """Allocator that continues after the largest id used by a workcell."""
        used = [workcell.id] + ids_of(workcell.entity_maps())
        return cls(max(used) + 1)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        if self._next >= NO_PARENT:
            raise OverflowError("Workcell id space exhausted")
        value = self._next
        self._next += 1
        return value


def children_index(entries: Mapping[int, Parented]) -> Dict[int, List[int]]:
    """Map every parent id to the ids of its children, sorted by id.

    Built once per traversal so that looking up the children of an entity
    does not rescan the whole map.
    """
    index: Dict[int, List[int]] = defaultdict(list)
    for entity_id in sorted(entries):
        index[entries[entity_id].parent].append(entity_id)
    return dict(index)


def group_by_parent(entries: Mapping[int, Parented[T]]) -> Dict[int, List[T]]:
    """Group entry payloads by parent id, each group ordered by entry id."""
    grouped: Dict[int, List[T]] = defaultdict(list)
    for entity_id in sorted(entries):
        entry = entries[entity_id]
        grouped[entry.parent].append(entry.bundle)
    return dict(grouped)


def ids_of(entries: Iterable[Mapping[int, Parented]]) -> List[int]:
    """All ids used across several entity maps."""
    return [entity_id for mapping in entries for entity_id in mapping]
