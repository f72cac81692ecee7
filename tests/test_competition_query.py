from datetime import date

import pytest

from app.errors import ValidationError
from app.helpers.competition_query import parse_filters, parse_per_page, search_clauses
from app.helpers.date import parse_iso_date


def test_parse_filters_defaults(app):
    filters = parse_filters({})
    assert filters.country_id is None
    assert filters.q is None
    assert filters.start is None and filters.end is None
    assert filters.managed_by_me is False


def test_parse_filters_maps_iso2_to_country_id(app):
    filters = parse_filters({"country_iso2": "us"})
    assert filters.country_id == "USA"
    assert filters.country_iso2 == "US"


def test_parse_filters_dates_and_flags(app):
    filters = parse_filters({"start": "2015-02-01", "end": " 2016-02-15 ", "managed_by_me": "Yes", "q": "  open  "})
    assert filters.start == date(2015, 2, 1)
    assert filters.end == date(2016, 2, 15)
    assert filters.managed_by_me is True
    assert filters.q == "open"


def test_blank_values_are_ignored(app):
    filters = parse_filters({"country_iso2": "", "start": "  ", "q": ""})
    assert filters.country_id is None
    assert filters.start is None
    assert filters.q is None


def test_error_keeps_literal_value(app):
    with pytest.raises(ValidationError) as exc:
        parse_filters({"start": "2015"})
    assert exc.value.message == "Invalid start: '2015'"


def test_fingerprint_changes_with_filters(app):
    a = parse_filters({"q": "open"}).fingerprint()
    b = parse_filters({"q": "open", "country_iso2": "US"}).fingerprint()
    assert a != b
    assert a == parse_filters({"q": "open"}).fingerprint()


def test_per_page_default_and_cap(app):
    assert parse_per_page({}) == 25
    assert parse_per_page({"per_page": "7"}) == 7
    assert parse_per_page({"per_page": "5000"}) == 100


def test_per_page_rejects_negative(app):
    with pytest.raises(ValidationError):
        parse_per_page({"per_page": "-3"})


def test_search_clauses_by_mode():
    assert len(search_clauses("a b c", "tokens")) == 3
    assert len(search_clauses("a b c", "substring")) == 1
    with pytest.raises(ValueError):
        search_clauses("a", "fuzzy")


@pytest.mark.parametrize("value", ["2015-02-01", " 2015-02-01 "])
def test_parse_iso_date_accepts_plain_dates(value):
    assert parse_iso_date(value) == date(2015, 2, 1)


@pytest.mark.parametrize("value", ["2015", "2015-2-1", "20150201", "2015-02-30", "٢٠١٥-٠٢-٠١", "２０１５-０２-０１"])
def test_parse_iso_date_is_strict(value):
    assert parse_iso_date(value) is None
