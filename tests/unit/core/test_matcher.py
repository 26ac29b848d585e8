"""Unit tests for core/matcher.py"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.core.matcher import (
    author_matches, content_matches, created_in_range, matches, title_matches,
)
from docstore.core.models import Author, Document, SearchRequest


T = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)
EPS = timedelta(microseconds=1)


def _doc(**kwargs) -> Document:
    kwargs.setdefault("id", "d1")
    kwargs.setdefault("created", T)
    return Document(**kwargs)


# --- matches: request absent / vacuous ---

def test_none_request_matches_anything():
    """A None request matches even a document with no fields set."""
    assert matches(Document(), None)


def test_empty_request_matches_anything():
    """A request with every field absent matches."""
    assert matches(_doc(), SearchRequest())


def test_empty_lists_are_vacuous():
    """Empty lists mean no constraint, not match-nothing."""
    request = SearchRequest(title_prefixes=[], contains_contents=[], author_ids=[])
    assert matches(_doc(), request)


# --- title ---

def test_title_prefix_any_of():
    """Title matches when it starts with any prefix in the list."""
    doc = _doc(title="Report-A")
    assert title_matches(doc, ["Memo", "Report"])
    assert not title_matches(doc, ["Memo", "Draft"])


def test_title_prefix_is_case_sensitive():
    assert not title_matches(_doc(title="Report"), ["report"])


def test_title_prefix_full_title_and_empty_prefix():
    """A prefix equal to the title matches; the empty prefix matches any present title."""
    doc = _doc(title="Memo")
    assert title_matches(doc, ["Memo"])
    assert title_matches(doc, [""])


def test_missing_title_excluded_by_prefix_filter():
    """A document without a title fails any non-empty prefix filter, even ''."""
    doc = _doc(title=None)
    assert not title_matches(doc, ["R"])
    assert not title_matches(doc, [""])
    assert title_matches(doc, None)
    assert title_matches(doc, [])


# --- content ---

def test_content_contains_any_substring():
    doc = _doc(content="quarterly revenue grew")
    assert content_matches(doc, ["loss", "revenue"])
    assert not content_matches(doc, ["Revenue"])


def test_content_is_literal_not_regex():
    """Regex metacharacters are matched literally."""
    doc = _doc(content="price is $5.00 (approx)")
    assert content_matches(doc, ["$5.00 (approx)"])
    assert not content_matches(doc, ["$5.0.*"])


def test_missing_content_excluded():
    assert not content_matches(_doc(content=None), ["x"])


def test_empty_content_contains_empty_substring():
    """Empty content is present, so the empty substring matches it."""
    assert content_matches(_doc(content=""), [""])


# --- author ---

def test_author_id_any_of():
    doc = _doc(author=Author(id="a2", name="Bea"))
    assert author_matches(doc, ["a1", "a2"])
    assert not author_matches(doc, ["a1", "a3"])


def test_author_compares_id_not_name():
    doc = _doc(author=Author(id="a1", name="a2"))
    assert not author_matches(doc, ["a2"])


def test_missing_author_excluded():
    assert not author_matches(_doc(author=None), ["a1"])
    assert author_matches(_doc(author=None), [])


# --- created range ---

def test_range_bounds_are_inclusive():
    """created == from == to is inside the range."""
    assert created_in_range(_doc(created=T), T, T)


@pytest.mark.parametrize("created", [T - EPS, T + EPS])
def test_range_excludes_just_outside(created):
    assert not created_in_range(_doc(created=created), T, T)


def test_range_open_ended():
    doc = _doc(created=T)
    assert created_in_range(doc, T - EPS, None)
    assert created_in_range(doc, None, T + EPS)
    assert not created_in_range(doc, T + EPS, None)
    assert not created_in_range(doc, None, T - EPS)
    assert created_in_range(doc, None, None)


def test_range_without_created_is_out_of_contract():
    """Comparing a document lacking created against a bound is not guarded."""
    with pytest.raises(TypeError):
        created_in_range(Document(id="x"), T, None)


def test_naive_bounds_compare_as_utc():
    """Naive request bounds are taken as UTC so they compare with aware created times."""
    request = SearchRequest(created_from=T.replace(tzinfo=None), created_to=T.replace(tzinfo=None))
    assert matches(_doc(created=T), request)


# --- AND across criteria ---

def test_all_criteria_must_hold():
    doc = _doc(title="Report-A", content="body text", author=Author(id="a1", name="Ann"))
    request = SearchRequest(
        title_prefixes=["Report"],
        contains_contents=["body"],
        author_ids=["a1"],
        created_from=T,
        created_to=T,
    )
    assert matches(doc, request)
    assert not matches(doc, request.model_copy(update={"author_ids": ["a2"]}))
    assert not matches(doc, request.model_copy(update={"contains_contents": ["nope"]}))
    assert not matches(doc, request.model_copy(update={"created_from": T + EPS}))
