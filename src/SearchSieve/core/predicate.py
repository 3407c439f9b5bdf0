"""Predicate catalog and predicate-suffix resolution.

A search key ends with the name of the predicate to apply, e.g. the key
``name_not_eq`` ends with ``not_eq``. Predicates are a closed enumeration;
group membership and aliases are static tables keyed by that enumeration.

Resolution always picks the longest name that is a suffix of the key, so that
``not_eq`` is never shadowed by ``eq``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Iterable, Mapping, Sequence

from SearchSieve.core.errors import PredicateNotFoundError
from SearchSieve.utils.log import log


class Predicate(str, Enum):
    EQ = "eq"
    NOT_EQ = "not_eq"
    CONT = "cont"
    NOT_CONT = "not_cont"
    LT = "lt"
    LTEQ = "lteq"
    GT = "gt"
    GTEQ = "gteq"
    IN = "in"
    NOT_IN = "not_in"
    MATCHES = "matches"
    DOES_NOT_MATCH = "does_not_match"
    START = "start"
    NOT_START = "not_start"
    END = "end"
    NOT_END = "not_end"
    TRUE = "true"
    NOT_TRUE = "not_true"
    FALSE = "false"
    NOT_FALSE = "not_false"
    PRESENT = "present"
    BLANK = "blank"
    NULL = "null"
    NOT_NULL = "not_null"

    EQ_ANY = "eq_any"
    NOT_EQ_ALL = "not_eq_all"
    CONT_ALL = "cont_all"
    CONT_ANY = "cont_any"
    NOT_CONT_ALL = "not_cont_all"
    NOT_CONT_ANY = "not_cont_any"
    MATCHES_ALL = "matches_all"
    MATCHES_ANY = "matches_any"
    DOES_NOT_MATCH_ALL = "does_not_match_all"
    DOES_NOT_MATCH_ANY = "does_not_match_any"
    START_ANY = "start_any"
    NOT_START_ALL = "not_start_all"
    END_ANY = "end_any"
    NOT_END_ALL = "not_end_all"


class PredicateGroup(str, Enum):
    BASIC = "basic"
    COMPOSITE = "composite"


_BASIC: Final[frozenset[Predicate]] = frozenset(
    {
        Predicate.EQ,
        Predicate.NOT_EQ,
        Predicate.CONT,
        Predicate.NOT_CONT,
        Predicate.LT,
        Predicate.LTEQ,
        Predicate.GT,
        Predicate.GTEQ,
        Predicate.IN,
        Predicate.NOT_IN,
        Predicate.MATCHES,
        Predicate.DOES_NOT_MATCH,
        Predicate.START,
        Predicate.NOT_START,
        Predicate.END,
        Predicate.NOT_END,
        Predicate.TRUE,
        Predicate.NOT_TRUE,
        Predicate.FALSE,
        Predicate.NOT_FALSE,
        Predicate.PRESENT,
        Predicate.BLANK,
        Predicate.NULL,
        Predicate.NOT_NULL,
    }
)

_COMPOSITE: Final[frozenset[Predicate]] = frozenset(set(Predicate) - _BASIC)

_ALIASES: Final[dict[str, Predicate]] = {
    "equals": Predicate.EQ,
    "not_equals": Predicate.NOT_EQ,
    "contains": Predicate.CONT,
    "not_contains": Predicate.NOT_CONT,
    "gte": Predicate.GTEQ,
    "lte": Predicate.LTEQ,
    "starts_with": Predicate.START,
    "ends_with": Predicate.END,
    "empty": Predicate.BLANK,
}

# Key segment delimiters; no predicate or alias name may contain them.
_DELIMITERS: Final[tuple[str, ...]] = ("_and_", "_or_")


@dataclass(frozen=True, slots=True)
class PredicateCatalog:
    """Static tables of predicate groups and aliases.

    Attributes:
        basic: Predicates applied to a single attribute/value pair.
        composite: Predicates combining basic ones (``*_any`` / ``*_all``).
        aliases: Alternate names mapped to canonical predicates.

    Raises:
        ValueError: If groups overlap, an alias targets an unknown predicate
            or shadows a canonical name, or a name contains a key delimiter.
    """

    basic: frozenset[Predicate]
    composite: frozenset[Predicate]
    aliases: Mapping[str, Predicate]

    def __post_init__(self) -> None:
        object.__setattr__(self, "basic", frozenset(self.basic))
        object.__setattr__(self, "composite", frozenset(self.composite))
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))

        overlap = self.basic & self.composite
        if overlap:
            raise ValueError(f"basic and composite predicates overlap: {sorted(p.value for p in overlap)}")

        known = self.basic | self.composite
        canonical_names = {p.value for p in known}
        for alias, target in self.aliases.items():
            if target not in known:
                raise ValueError(f"alias {alias!r} targets unknown predicate: {target.value}")
            if alias in canonical_names:
                raise ValueError(f"alias {alias!r} shadows a canonical predicate")

        for name in canonical_names | set(self.aliases):
            if any(delimiter in name for delimiter in _DELIMITERS):
                raise ValueError(f"predicate name must not contain _and_/_or_: {name}")

    def basic_predicates(self) -> frozenset[Predicate]:
        return self.basic

    def composite_predicates(self) -> frozenset[Predicate]:
        return self.composite

    def all_predicates(self) -> frozenset[Predicate]:
        return self.basic | self.composite

    def alias_map(self) -> Mapping[str, Predicate]:
        return self.aliases

    def group(self, group: PredicateGroup) -> frozenset[Predicate]:
        """Return the members of a predicate group."""
        if group is PredicateGroup.BASIC:
            return self.basic
        return self.composite

    def resolve_name(self, name: str) -> Predicate | None:
        """Translate a canonical or alias name into a catalog predicate.

        Args:
            name: Predicate name or alias.

        Returns:
            The canonical predicate, or None if the catalog does not know it.
        """
        predicate = self.aliases.get(name)
        if predicate is not None:
            return predicate
        try:
            predicate = Predicate(name)
        except ValueError:
            return None
        return predicate if predicate in self.all_predicates() else None

    def expand(self, names: Iterable[str]) -> tuple[Predicate, ...]:
        """Expand group references and aliases into canonical predicates.

        Expansion is idempotent and drops duplicates, keeping first-seen
        order. Names unknown to the catalog are dropped.

        Args:
            names: Group names, predicate names, or aliases.

        Returns:
            Unique canonical predicates.
        """
        seen: set[Predicate] = set()
        expanded: list[Predicate] = []
        for name in names:
            if name in (PredicateGroup.BASIC.value, PredicateGroup.COMPOSITE.value):
                members: Iterable[Predicate] = sorted(self.group(PredicateGroup(name)), key=lambda p: p.value)
            else:
                predicate = self.resolve_name(name)
                if predicate is None:
                    log.debug("Ignoring unknown predicate name: %s", name)
                    continue
                members = (predicate,)
            for predicate in members:
                if predicate in seen:
                    continue
                seen.add(predicate)
                expanded.append(predicate)
        return tuple(expanded)


DEFAULT_CATALOG: Final[PredicateCatalog] = PredicateCatalog(
    basic=_BASIC,
    composite=_COMPOSITE,
    aliases=_ALIASES,
)


def select_candidates(
    catalog: PredicateCatalog,
    only: Sequence[str] | None = None,
    except_: Sequence[str] | None = None,
) -> frozenset[Predicate]:
    """Return the predicates a key may resolve to under a filter config.

    Group shortcuts are checked in a fixed order: ``only == [basic]``,
    ``only == [composite]``, ``except_ == [basic]``, ``except_ == [composite]``.
    An ``except_`` group therefore applies even when ``only`` is an explicit
    list. Past the shortcuts, ``only`` wins: when it is not None, ``except_``
    is ignored entirely.

    Args:
        catalog: Predicate catalog.
        only: Allowed group/predicate/alias names, or None.
        except_: Excluded group/predicate/alias names, or None.

    Returns:
        Candidate canonical predicates.
    """
    only_names = tuple(only) if only is not None else None
    except_names = tuple(except_) if except_ is not None else None

    if only_names == (PredicateGroup.BASIC.value,):
        return catalog.basic_predicates()
    if only_names == (PredicateGroup.COMPOSITE.value,):
        return catalog.composite_predicates()
    if except_names == (PredicateGroup.BASIC.value,):
        return catalog.composite_predicates()
    if except_names == (PredicateGroup.COMPOSITE.value,):
        return catalog.basic_predicates()

    if only_names is not None:
        return catalog.all_predicates() & frozenset(catalog.expand(only_names))
    if except_names is not None:
        return catalog.all_predicates() - frozenset(catalog.expand(except_names))
    return catalog.all_predicates()


def search_list(candidates: Iterable[Predicate], catalog: PredicateCatalog) -> list[tuple[str, Predicate]]:
    """Build the ordered suffix search list for a candidate set.

    The list holds every candidate name plus every alias whose target is a
    candidate, sorted longest first (ties by name).

    Args:
        candidates: Active canonical predicates.
        catalog: Predicate catalog providing aliases.

    Returns:
        ``(name, canonical predicate)`` pairs in scan order.
    """
    active = frozenset(candidates)
    entries = [(predicate.value, predicate) for predicate in active]
    entries.extend((alias, target) for alias, target in catalog.alias_map().items() if target in active)
    return sorted(entries, key=lambda entry: (-len(entry[0]), entry[0]))


def find_predicate(key: str, candidates: Iterable[Predicate], catalog: PredicateCatalog) -> Predicate:
    """Resolve the predicate a search key ends with.

    Args:
        key: Full search key, e.g. ``name_or_email_cont``.
        candidates: Active canonical predicates.
        catalog: Predicate catalog providing aliases.

    Returns:
        The canonical predicate of the longest matching suffix.

    Raises:
        PredicateNotFoundError: If no candidate name or alias ends the key.
    """
    for name, predicate in search_list(candidates, catalog):
        if key.endswith(name):
            if name != predicate.value:
                log.debug("Resolved predicate alias %s -> %s", name, predicate.value)
            return predicate
    raise PredicateNotFoundError(key)
