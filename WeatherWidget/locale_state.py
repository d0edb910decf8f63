"""Language and text direction selection, plus locale-aware timestamp formatting."""
from dataclasses import dataclass
from datetime import datetime

from babel.dates import format_datetime


@dataclass(frozen=True)
class LocaleState:
    """
    Active language. toggle_label names the language a toggle switches *to*.

    Only ENGLISH and ARABIC exist; direction and locale_code never change
    independently.
    """
    direction: str  # "ltr" or "rtl"
    toggle_label: str
    locale_code: str


ENGLISH = LocaleState(direction="ltr", toggle_label="عربي", locale_code="en")
ARABIC = LocaleState(direction="rtl", toggle_label="English", locale_code="ar")


def toggle_locale(locale: LocaleState) -> LocaleState:
    """Switch to the other language."""
    return ARABIC if locale == ENGLISH else ENGLISH


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_timestamp(moment: datetime, locale_code: str) -> str:
    """
    Format moment as e.g. "October 18th 2026, 3:04:05 pm".

    English gets an ordinal day and a lowercase day period; Arabic uses CLDR
    month and day period names.
    """
    if locale_code == "en":
        day = f"'{moment.day}{_ordinal_suffix(moment.day)}'"
        text = format_datetime(moment, f"MMMM {day} y, h:mm:ss", locale=locale_code)
        period = format_datetime(moment, "a", locale=locale_code).lower()
        return f"{text} {period}"
    return format_datetime(moment, "MMMM d y, h:mm:ss a", locale=locale_code)
