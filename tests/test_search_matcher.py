from typing import Dict, List

import pytest

from ocloud.exceptions import IndexBuildError, InvalidPatternError, SearchError
from ocloud.search import (
    FieldDeclaration,
    PatternKind,
    build_index,
    classify_pattern,
    fuzzy_search,
    search_records,
)
from ocloud.search.matcher import max_edit_distance

# ---------- Helpers ----------


def named(*names: str) -> List[Dict[str, str]]:
    return [{"Name": n} for n in names]


def search(records: List[Dict[str, str]], pattern: str, fields=("Name",), boosted=("Name",)) -> List[int]:
    index = build_index(records, fields)
    return fuzzy_search(index, pattern, fields, boosted)


# ---------- Pattern classification ----------


@pytest.mark.parametrize(
    "pattern",
    [
        "ocid1.instance.oc1..abcdef123456",
        "10.0.0.15",
        "10.0.0.0/16",
        "my-app-server",
        "averyveryverylongname",
        "env:prod",
        "ops@example",
    ],
)
def test_identifier_like_patterns_are_specific(pattern: str) -> None:
    assert classify_pattern(pattern) is PatternKind.SPECIFIC


@pytest.mark.parametrize("pattern", ["web", "prod", "a.b.c", "prod web", "oracle linux 8"])
def test_short_or_multi_word_patterns_are_general(pattern: str) -> None:
    assert classify_pattern(pattern) is PatternKind.GENERAL


def test_edit_distance_grows_with_term_length() -> None:
    assert max_edit_distance("abc") == 0
    assert max_edit_distance("abcd") == 1
    assert max_edit_distance("abcdefg") == 1
    assert max_edit_distance("abcdefgh") == 2


# ---------- Ranking ----------


def test_general_pattern_matches_word_tokens_only() -> None:
    assert search(named("web-01", "web-02", "db-01"), "web") == [0, 1]


def test_full_ocid_returns_single_exact_match() -> None:
    records = [
        {"Name": "a", "OCID": "ocid1.instance.oc1..zzzz999999"},
        {"Name": "b", "OCID": "ocid1.instance.oc1..abcdef123456"},
        {"Name": "c", "OCID": "ocid1.vcn.oc1..qqqq000000"},
    ]
    hits = search(records, "ocid1.instance.oc1..abcdef123456", fields=("Name", "OCID"))
    assert hits == [1]


def test_sibling_ocids_follow_the_exact_match() -> None:
    records = [
        {"OCID": "ocid1.instance.oc1..abcdef123457"},
        {"OCID": "ocid1.instance.oc1..abcdef123456"},
    ]
    hits = search(records, "ocid1.instance.oc1..abcdef123456", fields=("OCID",), boosted=("OCID",))
    assert hits == [1, 0]


def test_exact_tag_pair_ranks_first() -> None:
    records = [{"TagsKV": "env:dev team:prod"}, {"TagsKV": "env:dev"}, {"TagsKV": "env:prod"}]
    assert classify_pattern("env:prod") is PatternKind.SPECIFIC
    hits = search(records, "env:prod", fields=("TagsKV",), boosted=("TagsKV",))
    assert hits[0] == 2
    assert 1 not in hits


def test_exact_and_substring_hits_precede_fuzzy_hits() -> None:
    records = [{"PrimaryIP": "10.0.1.16"}, {"PrimaryIP": "10.0.1.15"}]
    hits = search(records, "10.0.1.15", fields=("PrimaryIP",), boosted=())
    assert hits == [1, 0]


def test_exact_value_outranks_substring() -> None:
    records = [{"CIDR": "10.0.0.0/16"}, {"CIDR": "10.0.0.0"}]
    hits = search(records, "10.0.0.0", fields=("CIDR",), boosted=())
    assert hits[:2] == [1, 0]


def test_boosted_field_hit_outranks_non_boosted_hit() -> None:
    records = [
        {"Name": "zeta", "Description": "alpha"},
        {"Name": "alpha", "Description": "zeta"},
    ]
    hits = search(records, "alpha", fields=("Name", "Description"), boosted=("Name",))
    assert hits == [1, 0]


def test_boosted_field_wins_between_typo_only_hits() -> None:
    records = [
        {"Name": "zeta", "Description": "productoin"},
        {"Name": "productoin", "Description": "zeta"},
    ]
    hits = search(records, "production", fields=("Name", "Description"), boosted=("Name",))
    assert hits == [1, 0]


def test_typo_and_partial_words_are_tolerated() -> None:
    records = named("production", "staging")
    assert search(records, "prodction") == [0]
    assert search(records, "prod") == [0]
    assert search(records, "duct") == [0]


def test_multi_word_general_pattern_matches_any_term() -> None:
    assert search(named("web-01", "web-02", "db-01"), "web db") == [0, 1, 2]


def test_no_match_returns_empty_list() -> None:
    assert search(named("web-01", "db-01"), "zzzz") == []


def test_repeated_no_match_on_one_index_stays_empty() -> None:
    index = build_index(named("web-01", "db-01"), ["Name"])
    assert fuzzy_search(index, "zzzz", ["Name"], ["Name"]) == []
    assert fuzzy_search(index, "zzzz", ["Name"], ["Name"]) == []


def test_results_are_deterministic_and_unique() -> None:
    records = named("app-prod-1", "app-prod-2", "app-dev", "prod-db")
    first = search(records, "prod")
    second = search(records, "prod")
    assert first == second
    assert len(first) == len(set(first))


def test_unknown_fields_are_skipped() -> None:
    index = build_index(named("web-01"), ["Name"])
    assert fuzzy_search(index, "web", ["Name", "Missing"], ["Missing"]) == [0]


def test_empty_collection_has_no_hits() -> None:
    assert search([], "web") == []


# ---------- Errors ----------


@pytest.mark.parametrize("pattern", ["", "   ", "\t"])
def test_empty_pattern_is_rejected(pattern: str) -> None:
    with pytest.raises(InvalidPatternError):
        search(named("web-01"), pattern)


def test_empty_field_list_is_rejected() -> None:
    index = build_index(named("web-01"), ["Name"])
    with pytest.raises(SearchError):
        fuzzy_search(index, "web", [])


def test_search_records_maps_positions_back_to_records() -> None:
    records = named("web-01", "web-02", "db-01")
    decl = FieldDeclaration(searchable=("Name",), boosted=("Name",))
    assert search_records(records, "web", decl) == [records[0], records[1]]


def test_search_records_rejects_empty_declaration() -> None:
    with pytest.raises(IndexBuildError):
        search_records(named("web-01"), "web", FieldDeclaration(searchable=()))
