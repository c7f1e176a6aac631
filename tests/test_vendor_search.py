import pytest

from vendors.models import Vendor
from vendors.search import filter_vendors, tokenize


@pytest.fixture
def vendors():
    return [
        Vendor(id=1, x=10, y=10, name="El Tonayense", menu="Tacos: Burritos", location="1800 MISSION ST"),
        Vendor(id=2, x=20, y=20, name="Philz Cart", menu="Coffee: Pastries", location="50 FREMONT ST"),
        Vendor(id=3, x=30, y=30, name="Dumpling Time", menu="Dumplings: Noodles", location="11 DIVISION ST"),
    ]


def test_tokenize_lowercases_and_splits_on_non_alphanumerics():
    assert tokenize("  TACO!!mission--st ") == ["taco", "mission", "st"]
    assert tokenize("") == []
    assert tokenize("***") == []


def test_single_token_matches_menu(vendors):
    assert [v.id for v in filter_vendors(vendors, "taco")] == [1]


def test_every_token_must_match(vendors):
    assert [v.id for v in filter_vendors(vendors, "Tacos MISSION")] == [1]
    assert filter_vendors(vendors, "tacos fremont") == []


def test_tokens_match_across_fields_and_case(vendors):
    assert [v.id for v in filter_vendors(vendors, "philz, coffee")] == [2]


def test_empty_query_matches_everything(vendors):
    assert filter_vendors(vendors, "") == vendors
    assert filter_vendors(vendors, "   ") == vendors


def test_generic_words_match_every_vendor(vendors):
    assert filter_vendors(vendors, "food trucks") == vendors
    assert filter_vendors(vendors, "carts") == vendors


def test_substring_matching(vendors):
    # "st" appears in every location
    assert len(filter_vendors(vendors, "st")) == 3
    assert [v.id for v in filter_vendors(vendors, "dump")] == [3]


def test_filter_preserves_order_and_does_not_mutate(vendors):
    before = list(vendors)
    result = filter_vendors(vendors, "st")
    assert [v.id for v in result] == [1, 2, 3]
    assert result is not vendors
    assert vendors == before
