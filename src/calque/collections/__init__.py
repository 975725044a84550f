"""Read-only collections and collectors."""

from .collectors import (
    Collector,
    collect,
    to_list,
    to_set,
    to_unmodifiable_list,
    to_unmodifiable_map,
    to_unmodifiable_set,
)
from .unmodifiable import (
    UnmodifiableList,
    UnmodifiableMap,
    UnmodifiableSet,
    list_copy_of,
    list_of,
    map_copy_of,
    map_of,
    set_copy_of,
    set_of,
)

__all__ = [
    "Collector",
    "UnmodifiableList",
    "UnmodifiableMap",
    "UnmodifiableSet",
    "collect",
    "list_copy_of",
    "list_of",
    "map_copy_of",
    "map_of",
    "set_copy_of",
    "set_of",
    "to_list",
    "to_set",
    "to_unmodifiable_list",
    "to_unmodifiable_map",
    "to_unmodifiable_set",
]
