"""
Тесты для Calendar module: форматы, разбор, валидация, форматирование, разница дат

Проверяет:
1. Закрытый неизменяемый набор форматов
2. parse_date: порядок приоритетов, ошибка от первого формата
3. validate_date_format: синтаксис + календарная валидность (високосные годы)
4. format_date: все четыре формата, независимость от locale, None для неизвестного
5. date_difference: знак, усечение к нулю, годы без учёта високосных
6. Round trip через YYYY-MM-DD
"""

from datetime import date, datetime, timedelta

import pytest

from utilkit.core.dates import (
    DATE_PATTERNS,
    PARSE_PRIORITY,
    DateFormat,
    date_difference,
    format_date,
    make_date,
    parse_date,
    resolve_format,
    supported_formats,
    validate_date_format,
)
from utilkit.core.domain import DateDifference
from utilkit.exceptions import DateParseError, InvalidDateError, UtilkitError


# =============================================================================
# FORMATS
# =============================================================================


class TestDateFormats:
    """Тесты таблицы форматов"""

    def test_closed_set(self) -> None:
        assert supported_formats() == (
            "DD/MM/YYYY",
            "YYYY-MM-DD",
            "MM/DD/YYYY",
            "Month DD, YYYY",
        )

    def test_parse_only_excludes_output_format(self) -> None:
        assert "Month DD, YYYY" not in supported_formats(parse_only=True)
        assert len(supported_formats(parse_only=True)) == 3

    def test_table_is_immutable(self) -> None:
        """Регистрация новых форматов во время выполнения невозможна"""
        with pytest.raises(TypeError):
            DATE_PATTERNS["DD.MM.YYYY"] = DATE_PATTERNS[DateFormat.ISO]

    def test_parse_priority(self) -> None:
        assert PARSE_PRIORITY == (DateFormat.ISO, DateFormat.DMY_SLASH, DateFormat.MDY_SLASH)

    def test_resolve_format(self) -> None:
        assert resolve_format("YYYY-MM-DD") is DateFormat.ISO
        assert resolve_format(DateFormat.MDY_SLASH) is DateFormat.MDY_SLASH
        assert resolve_format("DD.MM.YYYY") is None
        assert resolve_format("") is None


# =============================================================================
# MAKE_DATE
# =============================================================================


class TestMakeDate:
    """Тесты для make_date"""

    def test_valid(self) -> None:
        assert make_date(2024, 2, 29) == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "year,month,day",
        [(2023, 2, 29), (1900, 2, 29), (2024, 4, 31), (2024, 13, 1), (2024, 0, 10)],
    )
    def test_invalid_raises(self, year: int, month: int, day: int) -> None:
        with pytest.raises(InvalidDateError) as exc_info:
            make_date(year, month, day)
        assert isinstance(exc_info.value, ValueError)
        assert (exc_info.value.year, exc_info.value.month, exc_info.value.day) == (year, month, day)

    def test_century_leap_rule(self) -> None:
        """Делится на 400 — високосный, на 100 (но не на 400) — нет"""
        assert make_date(2000, 2, 29) == date(2000, 2, 29)
        with pytest.raises(InvalidDateError):
            make_date(2100, 2, 29)


# =============================================================================
# PARSE_DATE
# =============================================================================


class TestParseDate:
    """Тесты для parse_date"""

    def test_iso(self) -> None:
        assert parse_date("2024-12-25") == date(2024, 12, 25)

    def test_day_month_year(self) -> None:
        assert parse_date("25/12/2024") == date(2024, 12, 25)

    def test_month_day_year_fallback(self) -> None:
        """DD/MM/YYYY не подходит (месяц 25), используется MM/DD/YYYY"""
        assert parse_date("12/25/2024") == date(2024, 12, 25)

    def test_ambiguous_resolved_as_day_month(self) -> None:
        """Неоднозначная строка читается по первому подходящему формату"""
        assert parse_date("03/04/2024") == date(2024, 4, 3)

    def test_leap_day(self) -> None:
        assert parse_date("2024-02-29") == date(2024, 2, 29)
        assert parse_date("29/02/2024") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "text",
        ["invalid", "", "2024/12/25", "2023-02-29", "32/01/2024", " 2024-12-25", "2024-12-25 "],
    )
    def test_unparseable_raises(self, text: str) -> None:
        with pytest.raises(DateParseError):
            parse_date(text)

    def test_error_refers_to_first_format(self) -> None:
        with pytest.raises(DateParseError) as exc_info:
            parse_date("not a date")
        error = exc_info.value
        assert error.format_name == "YYYY-MM-DD"
        assert error.text == "not a date"
        assert isinstance(error.__cause__, ValueError)
        assert isinstance(error, ValueError)
        assert isinstance(error, UtilkitError)

    def test_non_str_raises(self) -> None:
        with pytest.raises(TypeError):
            parse_date(20241225)


# =============================================================================
# VALIDATE_DATE_FORMAT
# =============================================================================


class TestValidateDateFormat:
    """Тесты для validate_date_format"""

    def test_valid_formats(self) -> None:
        assert validate_date_format("25/12/2024", "DD/MM/YYYY")
        assert validate_date_format("2024-12-25", "YYYY-MM-DD")
        assert validate_date_format("12/25/2024", "MM/DD/YYYY")

    def test_wrong_layout(self) -> None:
        assert not validate_date_format("2024/12/25", "DD/MM/YYYY")
        assert not validate_date_format("25/12/2024", "MM/DD/YYYY")
        assert not validate_date_format("invalid", "YYYY-MM-DD")

    def test_leap_day(self) -> None:
        assert validate_date_format("2024-02-29", "YYYY-MM-DD")
        assert not validate_date_format("2023-02-29", "YYYY-MM-DD")
        assert not validate_date_format("29/02/1900", "DD/MM/YYYY")

    def test_calendar_invalid(self) -> None:
        assert not validate_date_format("31/04/2024", "DD/MM/YYYY")
        assert not validate_date_format("2024-13-01", "YYYY-MM-DD")

    def test_unknown_format_is_false(self) -> None:
        assert not validate_date_format("2024-12-25", "unknown")
        assert not validate_date_format("2024-12-25", "")

    def test_output_only_format_is_false(self) -> None:
        assert not validate_date_format("December 25, 2024", "Month DD, YYYY")


# =============================================================================
# FORMAT_DATE
# =============================================================================


class TestFormatDate:
    """Тесты для format_date"""

    @pytest.fixture
    def christmas(self) -> date:
        return date(2024, 12, 25)

    def test_all_formats(self, christmas: date) -> None:
        assert format_date(christmas, "DD/MM/YYYY") == "25/12/2024"
        assert format_date(christmas, "YYYY-MM-DD") == "2024-12-25"
        assert format_date(christmas, "MM/DD/YYYY") == "12/25/2024"
        assert format_date(christmas, "Month DD, YYYY") == "December 25, 2024"

    def test_zero_padding(self) -> None:
        d = date(2024, 3, 5)
        assert format_date(d, "DD/MM/YYYY") == "05/03/2024"
        assert format_date(d, "Month DD, YYYY") == "March 05, 2024"

    def test_small_years_padded(self) -> None:
        assert format_date(date(5, 1, 2), "YYYY-MM-DD") == "0005-01-02"

    def test_enum_accepted(self, christmas: date) -> None:
        assert format_date(christmas, DateFormat.ISO) == "2024-12-25"

    def test_unknown_format_returns_none(self, christmas: date) -> None:
        assert format_date(christmas, "DD.MM.YYYY") is None
        assert format_date(christmas, "") is None

    def test_datetime_uses_date_part(self) -> None:
        assert format_date(datetime(2024, 1, 2, 23, 59), "YYYY-MM-DD") == "2024-01-02"

    @pytest.mark.parametrize(
        "d",
        [date(2024, 2, 29), date(1, 1, 1), date(9999, 12, 31), date(1999, 12, 31)],
    )
    def test_round_trip_iso(self, d: date) -> None:
        assert parse_date(format_date(d, "YYYY-MM-DD")) == d

    def test_round_trip_every_day_of_leap_year(self) -> None:
        start = date(2024, 1, 1)
        for offset in range(366):
            d = start + timedelta(days=offset)
            assert parse_date(format_date(d, "YYYY-MM-DD")) == d


# =============================================================================
# DATE_DIFFERENCE
# =============================================================================


class TestDateDifference:
    """Тесты для date_difference"""

    def test_one_week(self) -> None:
        diff = date_difference(date(2024, 1, 1), date(2024, 1, 8))
        assert (diff.days, diff.weeks, diff.years) == (7, 1, 0)

    def test_reflexive(self) -> None:
        for d in (date(2024, 2, 29), date(1, 1, 1), date(2023, 6, 15)):
            assert date_difference(d, d) == DateDifference(days=0, weeks=0, years=0)

    def test_leap_year_span(self) -> None:
        """2024-01-01 → 2024-12-31: 365 дней, високосный 29 февраля внутри"""
        diff = date_difference(date(2024, 1, 1), date(2024, 12, 31))
        assert diff == DateDifference(days=365, weeks=52, years=1)

    def test_non_leap_year_span(self) -> None:
        diff = date_difference(date(2023, 1, 1), date(2024, 1, 1))
        assert (diff.days, diff.years) == (365, 1)

    def test_full_leap_year_not_adjusted(self) -> None:
        """366 дней всё ещё один год: деление на 365 без коррекции"""
        diff = date_difference(date(2024, 1, 1), date(2025, 1, 1))
        assert (diff.days, diff.years) == (366, 1)

    def test_just_under_a_year(self) -> None:
        diff = date_difference(date(2023, 1, 1), date(2023, 12, 31))
        assert (diff.days, diff.years) == (364, 0)

    def test_negative_shares_sign(self) -> None:
        diff = date_difference(date(2024, 12, 31), date(2024, 1, 1))
        assert diff == DateDifference(days=-365, weeks=-52, years=-1)

    def test_negative_truncates_toward_zero(self) -> None:
        diff = date_difference(date(2024, 1, 9), date(2024, 1, 1))
        assert (diff.days, diff.weeks, diff.years) == (-8, -1, 0)

    def test_antisymmetric(self) -> None:
        a, b = date(2020, 3, 1), date(2031, 7, 19)
        forward = date_difference(a, b)
        backward = date_difference(b, a)
        assert backward.days == -forward.days
        assert backward.weeks == -forward.weeks
        assert backward.years == -forward.years

    def test_accepts_datetime(self) -> None:
        diff = date_difference(datetime(2024, 1, 1, 23, 0), date(2024, 1, 2))
        assert diff.days == 1

    def test_non_date_raises(self) -> None:
        with pytest.raises(TypeError):
            date_difference("2024-01-01", date(2024, 1, 2))
