from __future__ import annotations

import itertools

import pytest

from multi_search.engine import PRIVACY_ENGINES, STANDARD_ENGINES, QueryPlanner, format_query


def test_privacy_set_is_term_major_engine_minor(query_builder) -> None:
    planner = QueryPlanner(query_builder(terms=["bar", "baz"]))
    assert list(planner) == [
        "https://search.brave.com/search?q=foo+bar",
        "https://html.duckduckgo.com/html?q=foo+bar",
        "https://www.mojeek.com/search?q=foo+bar",
        "https://lite.qwant.com/?q=foo+bar",
        "https://search.brave.com/search?q=foo+baz",
        "https://html.duckduckgo.com/html?q=foo+baz",
        "https://www.mojeek.com/search?q=foo+baz",
        "https://lite.qwant.com/?q=foo+baz",
    ]


def test_standard_set(query_builder) -> None:
    planner = QueryPlanner(query_builder(terms=["bar"], privacy=False))
    assert list(planner) == [
        "https://bing.com/search?q=foo+bar",
        "https://search.brave.com/search?q=foo+bar",
        "https://html.duckduckgo.com/html?q=foo+bar",
        "https://search.yahoo.com/search?p=foo+bar",
    ]


def test_no_terms_uses_base_alone(query_builder) -> None:
    planner = QueryPlanner(query_builder(base_term="foo bar baz", exact=True))
    assert list(planner) == [
        "https://search.brave.com/search?q=foo+bar+baz",
        "https://html.duckduckgo.com/html?q=foo+bar+baz",
        "https://www.mojeek.com/search?q=foo+bar+baz",
        "https://lite.qwant.com/?q=foo+bar+baz",
    ]


def test_search_exact_quotes_base_only(query_builder) -> None:
    urls = list(QueryPlanner(query_builder(base_term="foo bar", terms=["baz"], search_exact=True)))
    assert len(urls) == 4
    assert all(url.endswith('q="foo+bar"+baz') for url in urls)


def test_multi_exact_quotes_terms_only(query_builder) -> None:
    urls = list(QueryPlanner(query_builder(terms=["bar+baz"], multi_exact=True)))
    assert all(url.endswith('q=foo+"bar+baz"') for url in urls)


def test_exact_quotes_whole_query(query_builder) -> None:
    urls = list(QueryPlanner(query_builder(terms=["bar"], exact=True, privacy=False)))
    assert urls[0] == 'https://bing.com/search?q="foo+bar"'
    assert urls[-1] == 'https://search.yahoo.com/search?p="foo+bar"'


@pytest.mark.parametrize(
    ("flags", "expected"),
    [
        ({"exact": True, "search_exact": True, "multi_exact": True}, '"foo+bar"'),
        ({"search_exact": True, "multi_exact": True}, '"foo"+bar'),
        ({"multi_exact": True}, 'foo+"bar"'),
        ({}, "foo+bar"),
    ],
)
def test_quoting_precedence(flags, expected) -> None:
    options = {"exact": False, "search_exact": False, "multi_exact": False}
    options.update(flags)
    assert format_query("foo", "bar", **options) == expected


@pytest.mark.parametrize("terms", [[], ["a"], ["a", "b", "c"]])
@pytest.mark.parametrize("privacy", [True, False])
def test_url_count(query_builder, terms, privacy) -> None:
    engines = PRIVACY_ENGINES if privacy else STANDARD_ENGINES
    for exact, search_exact, multi_exact in [(True, False, False), (False, True, False), (False, False, True), (False, False, False)]:
        planner = QueryPlanner(
            query_builder(
                terms=terms,
                privacy=privacy,
                exact=exact,
                search_exact=search_exact,
                multi_exact=multi_exact,
            )
        )
        urls = list(planner)
        assert len(urls) == len(planner) == len(engines) * max(1, len(terms))


def test_planner_yields_on_demand(query_builder) -> None:
    planner = QueryPlanner(query_builder(terms=(f"t{i}" for i in range(1000))))
    first = list(itertools.islice(planner, 2))
    assert first == [
        "https://search.brave.com/search?q=foo+t0",
        "https://html.duckduckgo.com/html?q=foo+t0",
    ]
