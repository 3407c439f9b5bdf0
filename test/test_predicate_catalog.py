"""Tests for the predicate catalog, candidate selection and suffix matching."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchSieve.core.errors import PredicateNotFoundError
from SearchSieve.core.predicate import (
    DEFAULT_CATALOG,
    Predicate,
    PredicateCatalog,
    PredicateGroup,
    find_predicate,
    search_list,
    select_candidates,
)


class TestDefaultCatalog(unittest.TestCase):
    def test_groups_partition_the_enum(self) -> None:
        basic = DEFAULT_CATALOG.basic_predicates()
        composite = DEFAULT_CATALOG.composite_predicates()
        self.assertFalse(basic & composite)
        self.assertEqual(basic | composite, frozenset(Predicate))
        self.assertIn(Predicate.EQ, basic)
        self.assertIn(Predicate.CONT_ANY, composite)

    def test_aliases_point_to_catalog_members(self) -> None:
        for alias, target in DEFAULT_CATALOG.alias_map().items():
            with self.subTest(alias=alias):
                self.assertIn(target, DEFAULT_CATALOG.all_predicates())

    def test_resolve_name(self) -> None:
        self.assertIs(DEFAULT_CATALOG.resolve_name("gte"), Predicate.GTEQ)
        self.assertIs(DEFAULT_CATALOG.resolve_name("not_eq"), Predicate.NOT_EQ)
        self.assertIsNone(DEFAULT_CATALOG.resolve_name("bogus"))

    def test_group_lookup(self) -> None:
        self.assertEqual(DEFAULT_CATALOG.group(PredicateGroup.BASIC), DEFAULT_CATALOG.basic_predicates())
        self.assertEqual(DEFAULT_CATALOG.group(PredicateGroup.COMPOSITE), DEFAULT_CATALOG.composite_predicates())

    def test_alias_map_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            DEFAULT_CATALOG.alias_map()["eqq"] = Predicate.EQ  # type: ignore[index]


class TestCatalogValidation(unittest.TestCase):
    def test_overlapping_groups(self) -> None:
        with self.assertRaisesRegex(ValueError, "overlap"):
            PredicateCatalog(basic={Predicate.EQ}, composite={Predicate.EQ}, aliases={})

    def test_alias_to_unknown_predicate(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown predicate"):
            PredicateCatalog(basic={Predicate.EQ}, composite=set(), aliases={"is": Predicate.NOT_EQ})

    def test_alias_shadowing_canonical_name(self) -> None:
        with self.assertRaisesRegex(ValueError, "shadows"):
            PredicateCatalog(
                basic={Predicate.EQ, Predicate.NOT_EQ},
                composite=set(),
                aliases={"not_eq": Predicate.EQ},
            )

    def test_alias_with_delimiter(self) -> None:
        with self.assertRaisesRegex(ValueError, "_and_/_or_"):
            PredicateCatalog(basic={Predicate.EQ}, composite=set(), aliases={"this_or_that": Predicate.EQ})


class TestExpand(unittest.TestCase):
    def test_groups_aliases_and_duplicates(self) -> None:
        expanded = DEFAULT_CATALOG.expand(["eq", "equals", "gte", "composite", "eq_any"])
        self.assertEqual(expanded[:2], (Predicate.EQ, Predicate.GTEQ))
        self.assertEqual(len(expanded), len(set(expanded)))
        self.assertEqual(set(expanded[2:]), set(DEFAULT_CATALOG.composite_predicates()))

    def test_idempotent(self) -> None:
        once = DEFAULT_CATALOG.expand(["basic", "cont_any"])
        twice = DEFAULT_CATALOG.expand([p.value for p in once])
        self.assertEqual(once, twice)

    def test_unknown_names_dropped(self) -> None:
        self.assertEqual(DEFAULT_CATALOG.expand(["bogus", "lt"]), (Predicate.LT,))


class TestSelectCandidates(unittest.TestCase):
    def test_no_filter_is_full_catalog(self) -> None:
        self.assertEqual(select_candidates(DEFAULT_CATALOG), DEFAULT_CATALOG.all_predicates())

    def test_only_groups(self) -> None:
        self.assertEqual(select_candidates(DEFAULT_CATALOG, only=["basic"]), DEFAULT_CATALOG.basic_predicates())
        self.assertEqual(
            select_candidates(DEFAULT_CATALOG, only=["composite"]),
            DEFAULT_CATALOG.composite_predicates(),
        )

    def test_except_group_is_complement(self) -> None:
        self.assertEqual(
            select_candidates(DEFAULT_CATALOG, except_=["basic"]),
            select_candidates(DEFAULT_CATALOG, only=["composite"]),
        )
        self.assertEqual(
            select_candidates(DEFAULT_CATALOG, except_=["composite"]),
            select_candidates(DEFAULT_CATALOG, only=["basic"]),
        )

    def test_only_list_with_group_and_names(self) -> None:
        candidates = select_candidates(DEFAULT_CATALOG, only=["composite", "eq"])
        self.assertEqual(candidates, DEFAULT_CATALOG.composite_predicates() | {Predicate.EQ})

    def test_only_alias_allows_canonical(self) -> None:
        self.assertEqual(select_candidates(DEFAULT_CATALOG, only=["gte"]), frozenset({Predicate.GTEQ}))

    def test_except_list(self) -> None:
        candidates = select_candidates(DEFAULT_CATALOG, except_=["eq", "basic"])
        self.assertEqual(candidates, DEFAULT_CATALOG.composite_predicates())

    def test_only_group_shortcut_beats_except_group(self) -> None:
        self.assertEqual(
            select_candidates(DEFAULT_CATALOG, only=["basic"], except_=["basic"]),
            DEFAULT_CATALOG.basic_predicates(),
        )
        self.assertEqual(
            select_candidates(DEFAULT_CATALOG, only=["composite"], except_=["composite"]),
            DEFAULT_CATALOG.composite_predicates(),
        )

    def test_except_basic_group_beats_only_list(self) -> None:
        self.assertEqual(
            select_candidates(DEFAULT_CATALOG, only=["eq"], except_=["basic"]),
            DEFAULT_CATALOG.composite_predicates(),
        )

    def test_except_composite_group_beats_only_list(self) -> None:
        self.assertEqual(
            select_candidates(DEFAULT_CATALOG, only=["eq_any", "cont"], except_=["composite"]),
            DEFAULT_CATALOG.basic_predicates(),
        )

    def test_only_list_beats_except_list(self) -> None:
        self.assertEqual(
            select_candidates(DEFAULT_CATALOG, only=["eq"], except_=["eq", "cont"]),
            frozenset({Predicate.EQ}),
        )
        self.assertEqual(
            select_candidates(DEFAULT_CATALOG, only=["eq"], except_=["basic", "eq_any"]),
            frozenset({Predicate.EQ}),
        )

    def test_empty_only_list_allows_nothing(self) -> None:
        self.assertEqual(select_candidates(DEFAULT_CATALOG, only=[]), frozenset())


class TestFindPredicate(unittest.TestCase):
    def test_search_list_is_longest_first(self) -> None:
        entries = search_list(DEFAULT_CATALOG.all_predicates(), DEFAULT_CATALOG)
        lengths = [len(name) for name, _ in entries]
        self.assertEqual(lengths, sorted(lengths, reverse=True))
        self.assertEqual(entries[0], ("does_not_match_all", Predicate.DOES_NOT_MATCH_ALL))
        self.assertEqual(entries[1], ("does_not_match_any", Predicate.DOES_NOT_MATCH_ANY))

    def test_search_list_drops_aliases_of_inactive_predicates(self) -> None:
        names = {name for name, _ in search_list({Predicate.EQ}, DEFAULT_CATALOG)}
        self.assertEqual(names, {"eq", "equals"})

    def test_longest_suffix(self) -> None:
        candidates = {Predicate.EQ, Predicate.NOT_EQ}
        self.assertIs(find_predicate("name_not_eq", candidates, DEFAULT_CATALOG), Predicate.NOT_EQ)
        self.assertIs(find_predicate("name_eq", candidates, DEFAULT_CATALOG), Predicate.EQ)

    def test_shorter_suffix_when_longer_is_inactive(self) -> None:
        self.assertIs(find_predicate("name_not_eq", {Predicate.EQ}, DEFAULT_CATALOG), Predicate.EQ)

    def test_composite_beats_basic(self) -> None:
        found = find_predicate("tags_not_cont_any", DEFAULT_CATALOG.all_predicates(), DEFAULT_CATALOG)
        self.assertIs(found, Predicate.NOT_CONT_ANY)

    def test_alias_translated(self) -> None:
        self.assertIs(find_predicate("age_lte", {Predicate.LTEQ}, DEFAULT_CATALOG), Predicate.LTEQ)

    def test_alias_inactive_when_target_filtered_out(self) -> None:
        with self.assertRaises(PredicateNotFoundError):
            find_predicate("age_lte", {Predicate.GTEQ}, DEFAULT_CATALOG)

    def test_basic_only_never_matches_composite(self) -> None:
        basic = DEFAULT_CATALOG.basic_predicates()
        for predicate in DEFAULT_CATALOG.composite_predicates():
            with self.subTest(predicate=predicate.value):
                key = f"name_{predicate.value}"
                try:
                    found = find_predicate(key, basic, DEFAULT_CATALOG)
                except PredicateNotFoundError:
                    continue
                self.assertIn(found, basic)

    def test_composite_only_never_matches_basic(self) -> None:
        composite = DEFAULT_CATALOG.composite_predicates()
        for predicate in DEFAULT_CATALOG.basic_predicates():
            with self.subTest(predicate=predicate.value):
                with self.assertRaises(PredicateNotFoundError):
                    find_predicate(f"name_{predicate.value}", composite, DEFAULT_CATALOG)

    def test_not_found_carries_key(self) -> None:
        with self.assertRaises(PredicateNotFoundError) as ctx:
            find_predicate("status_bogus", DEFAULT_CATALOG.all_predicates(), DEFAULT_CATALOG)
        self.assertEqual(ctx.exception.key, "status_bogus")
        self.assertIn("status_bogus", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
