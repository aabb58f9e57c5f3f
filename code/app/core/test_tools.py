import json
import logging

from app.core.observability import JSONFormatter, setup_logging
from app.core.tools import field_text, format_amount, format_currency, parse_amount, share_caption

NBSP = "\u00a0"


def test_format_amount_groups_thousands():
    assert format_amount(0) == "0"
    assert format_amount(950) == "950"
    assert format_amount(1800000) == f"1{NBSP}800{NBSP}000"
    assert format_amount(-2500) == f"-2{NBSP}500"


def test_format_amount_decimals():
    assert format_amount(1234.5) == f"1{NBSP}234,5"
    assert format_amount(0.1234) == "0,123"


def test_format_currency():
    assert format_currency(400, per_day=True) == "400 Kč/den"
    assert format_currency(200000, currency="CZK") == f"200{NBSP}000 CZK"


def test_parse_amount():
    assert parse_amount(" 12 ") == 12
    assert parse_amount("1e3") == 1000
    assert parse_amount("") == 0


def test_share_caption():
    assert share_caption(29) == "29% čisté mzdy"
    assert share_caption(None) == "– čisté mzdy"


def test_json_formatter_includes_extras():
    record = logging.LogRecord("app.core.pipeline", logging.INFO, __file__, 1, "hello %s", ("x",), None)
    record.person = "Osoba 1"
    out = json.loads(JSONFormatter().format(record))
    assert out["message"] == "hello x"
    assert out["person"] == "Osoba 1"
    assert out["level"] == "INFO"


def test_field_text_reads_back_unchanged():
    for value in (8580, 10074, 14883, 1234.5, 0):
        assert parse_amount(field_text(value)) == value
    assert field_text(8580) == "8580"


def test_setup_logging_json():
    setup_logging("debug", "json")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, JSONFormatter) for h in root.handlers)
    setup_logging("INFO", "text")
