"""
Value parsers: price, rating, vintage, dates, filter expressions.
"""
import pandas as pd
import pytest

from wine_agent.data.parsers import (
    parse_date,
    parse_filter_value,
    parse_price,
    parse_rating,
    parse_rating_literal,
    parse_vintage,
)


def _ms(text):
    return int(pd.Timestamp(text).value // 1_000_000)


@pytest.mark.parametrize("raw, expected", [
    ("$45.99", 45.99),
    ("$30", 30.0),
    ("$1,200", 1200.0),
    (" $18 ", 18.0),
    ("30 (magnum)", 30.0),
    ("", 0.0),
    ("N/A", 0.0),
    ("garbage", 0.0),
])
def test_parse_price(raw, expected):
    assert parse_price(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw, expected", [
    ("***", 3.0),
    ("*** 1/2", 3.5),
    ("**1/2 stars", 2.5),
    ("*****", 5.0),
    ("1/2", 0.5),
    ("", 0.0),
])
def test_parse_rating(raw, expected):
    assert parse_rating(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("4", 4.0),
    ("3.5", 3.5),
    ("***", 3.0),
    ("**** 1/2", 4.5),
    ("4 stars", 4.0),
    ("4.5+", 4.5),
    (" 4 ", 4.0),
    ("1/2", 0.5),
    ("", 0.0),
])
def test_parse_rating_literal(raw, expected):
    assert parse_rating_literal(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("2012", 2012),
    (" 2010 ", 2010),
    ("2014 Reserve", 2014),
    ("NV", 0),
    ("", 0),
])
def test_parse_vintage(raw, expected):
    assert parse_vintage(raw) == expected


def test_parse_date_us_and_iso_formats():
    assert parse_date("12/30/2014") == _ms("2014-12-30")
    assert parse_date("2015-06-01") == _ms("2015-06-01")
    assert parse_date("June 1, 2015") == _ms("2015-06-01")


@pytest.mark.parametrize("raw", ["", "   ", "not a date", "soon-ish", "now", "today", " Today "])
def test_parse_date_falls_back_to_epoch(raw):
    assert parse_date(raw) == 0


def test_parse_date_orders_instants():
    assert parse_date("03/01/2013") < parse_date("12/30/2014") < parse_date("2016-02-10")


@pytest.mark.parametrize("raw, operator, value", [
    (">90", ">", "90"),
    ("<=2012", "<=", "2012"),
    (">= 4", ">=", "4"),
    ("=Pinot Noir", "=", "Pinot Noir"),
    ("Pinot Noir", "=", "Pinot Noir"),
    ("=>5", "=>", "5"),
    (">", "=", ">"),
])
def test_parse_filter_value(raw, operator, value):
    expr = parse_filter_value(raw)
    assert (expr.operator, expr.value) == (operator, value)
