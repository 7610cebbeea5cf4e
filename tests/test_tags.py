from ocloud.search import extract_tag_values, flatten_tags, tag_fields


def test_flatten_tags_emits_key_value_pairs() -> None:
    out = flatten_tags({"Env": "Prod"}, {"Ops": {"Team": "Core", "Tier": 2}})
    assert out == "env:prod ops.team:core ops.tier:2"


def test_extract_tag_values_emits_values_only() -> None:
    out = extract_tag_values({"env": "prod"}, {"ops": {"team": "Core"}})
    assert out == "prod core"


def test_empty_and_missing_tags_are_skipped() -> None:
    assert flatten_tags(None, None) == ""
    assert extract_tag_values({}, {"ops": None}) == ""
    assert flatten_tags({"env": ""}, {"ops": {"team": None}}) == ""


def test_tag_fields_pair() -> None:
    fields = tag_fields({"env": "prod"}, None)
    assert fields == {"TagsKV": "env:prod", "TagsVal": "prod"}
