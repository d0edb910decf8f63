"""Tests for language selection and timestamp formatting."""
from datetime import datetime
from locale_state import ENGLISH, ARABIC, toggle_locale, format_timestamp


def test_locale_values():
    assert ENGLISH.direction == "ltr"
    assert ENGLISH.locale_code == "en"
    assert ENGLISH.toggle_label == "عربي"
    assert ARABIC.direction == "rtl"
    assert ARABIC.locale_code == "ar"
    assert ARABIC.toggle_label == "English"


def test_toggle_switches_direction_and_locale_together():
    assert toggle_locale(ENGLISH) == ARABIC
    assert toggle_locale(ARABIC) == ENGLISH


def test_toggle_twice_returns_to_start():
    for locale in (ENGLISH, ARABIC):
        assert toggle_locale(toggle_locale(locale)) == locale


def test_format_timestamp_english():
    moment = datetime(2026, 10, 18, 15, 4, 5)

    assert format_timestamp(moment, "en") == "October 18th 2026, 3:04:05 pm"


def test_format_timestamp_english_morning():
    moment = datetime(2026, 10, 18, 9, 30, 0)

    assert format_timestamp(moment, "en") == "October 18th 2026, 9:30:00 am"


def test_format_timestamp_english_ordinals():
    assert format_timestamp(datetime(2026, 3, 1, 9, 0, 0), "en").startswith("March 1st 2026")
    assert format_timestamp(datetime(2026, 3, 2, 9, 0, 0), "en").startswith("March 2nd 2026")
    assert format_timestamp(datetime(2026, 3, 3, 9, 0, 0), "en").startswith("March 3rd 2026")
    assert format_timestamp(datetime(2026, 3, 11, 9, 0, 0), "en").startswith("March 11th 2026")
    assert format_timestamp(datetime(2026, 3, 22, 9, 0, 0), "en").startswith("March 22nd 2026")


def test_format_timestamp_arabic():
    moment = datetime(2026, 10, 18, 15, 4, 5)

    text = format_timestamp(moment, "ar")

    assert "أكتوبر" in text
    assert "October" not in text
