import pytest

from branch_locator.geo_aliases import CONFUSING_WORDS, GEO_ALIASES, expand_aliases
from branch_locator.text_normalizer import normalize


def test_alias_table_is_normalized():
    for key, value in GEO_ALIASES.items():
        assert normalize(key) == key
        assert normalize(value) == value


def test_alias_table_is_read_only():
    with pytest.raises(TypeError):
        GEO_ALIASES["new place"] = "ha noi"


def test_alias_table_size():
    assert 250 <= len(GEO_ALIASES) <= 350


def test_confusing_words_are_normalized():
    assert all(normalize(w) == w for w in CONFUSING_WORDS)


def test_expand_appends_value_and_keeps_original_text():
    hit = expand_aliases("123 nguyen sinh sac")
    assert hit.alias_key == "nguyen sinh sac"
    assert hit.alias_value == "lien chieu"
    assert hit.expanded_query == "123 nguyen sinh sac lien chieu"


def test_longest_key_wins_over_shorter_one():
    # "tien giang" (10 chars) is tried before "go cong" (7 chars)
    hit = expand_aliases("go cong tien giang")
    assert hit.alias_key == "tien giang"
    assert hit.alias_value == "my tho"
    assert hit.expanded_query == "go cong tien giang my tho"


def test_street_outranks_city_in_same_query():
    hit = expand_aliases("12 nguyen sinh sac da nang")
    assert hit.alias_key == "nguyen sinh sac"
    assert hit.alias_value == "lien chieu"


def test_custom_table_longest_key():
    aliases = {"go cong": "a", "tien giang": "b", "go cong dong": "c"}
    assert expand_aliases("go cong dong tien giang", aliases).alias_value == "c"
    assert expand_aliases("go cong tien giang", aliases).alias_value == "b"


def test_custom_table_equal_length_keeps_table_order():
    aliases = {"abc": "first", "xyz": "second"}
    assert expand_aliases("xyz abc", aliases).alias_value == "first"


def test_only_one_alias_applied():
    hit = expand_aliases("lien chieu da nang")
    assert hit.expanded_query == "lien chieu da nang lien chieu"


def test_miss_returns_query_unchanged():
    hit = expand_aliases("456 some unknown street")
    assert hit.expanded_query == "456 some unknown street"
    assert hit.alias_value == ""
    assert hit.alias_key == ""


def test_empty_query():
    hit = expand_aliases("")
    assert hit.expanded_query == ""
    assert hit.alias_value == ""
