"""Static consistency checks over the matcher catalogue.

These work purely on registry metadata (name, family, deprecation flag) and
never evaluate a matcher:

- find_name_clashes: non-deprecated matchers whose name also exists in
  hamcrest's public namespace, where a star import would shadow one of them
- find_undeprecated_relatives: matchers related to a deprecated matcher but
  not deprecated themselves

What counts as "related" is a policy. The default groups entries by family,
i.e. the name without its element-kind suffix, so deprecating
``starts_with`` requires deprecating ``starts_with_int`` as well.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import hamcrest

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable

    from seqmatch._registry import CatalogueEntry, Registry

type RelatedPolicy = Callable[[CatalogueEntry], Hashable]


def hamcrest_names() -> frozenset[str]:
    """Public names exported by the ``hamcrest`` package."""
    return frozenset(name for name in dir(hamcrest) if not name.startswith("_"))


def by_family(entry: CatalogueEntry) -> Hashable:
    return entry.family


def by_strategy(entry: CatalogueEntry) -> Hashable:
    return entry.strategy


def find_name_clashes(
    registry: Registry, reserved: Iterable[str] | None = None
) -> list[str]:
    """Names of non-deprecated matchers that collide with ``reserved``.

    ``reserved`` defaults to hamcrest's public names.
    """
    taken = hamcrest_names() if reserved is None else frozenset(reserved)
    return [
        entry.name
        for entry in registry.entries()
        if not entry.deprecated and entry.name in taken
    ]


def find_undeprecated_relatives(
    registry: Registry, related: RelatedPolicy = by_family
) -> list[str]:
    """Names of non-deprecated matchers sharing a group with a deprecated one."""
    entries = registry.entries()
    deprecated_groups = {related(entry) for entry in entries if entry.deprecated}
    return [
        entry.name
        for entry in entries
        if not entry.deprecated and related(entry) in deprecated_groups
    ]
