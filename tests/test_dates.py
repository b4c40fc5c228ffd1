"""Tests for thaiclaim.dates pure functions."""

from datetime import date

from thaiclaim.dates import (
    THAI_MONTHS,
    classify_date,
    compose_date,
    current_buddhist_year,
    date_interval,
    decompose_date,
    find_month_index,
    format_thai_date,
    last_day_of_month,
    month_sequence,
    parse_iso_date,
    update_date_part,
)
from thaiclaim.domain.models import BuddhistYear, DateParts, DateStatus, Interval, MonthYearPair

TODAY = date(2024, 5, 1)


class TestParseIsoDate:
    """Tests for parse_iso_date and classify_date."""

    def test_parses_valid_date(self) -> None:
        """Should parse a YYYY-MM-DD string."""
        assert parse_iso_date("2024-02-29") == date(2024, 2, 29)

    def test_strips_whitespace(self) -> None:
        """Should ignore surrounding whitespace."""
        assert parse_iso_date("  2024-06-15 ") == date(2024, 6, 15)

    def test_rejects_impossible_date(self) -> None:
        """Should return None for 30 February."""
        assert parse_iso_date("2024-02-30") is None

    def test_rejects_garbage(self) -> None:
        """Should return None for non-dates."""
        assert parse_iso_date("not-a-date") is None
        assert parse_iso_date("") is None

    def test_classify_distinguishes_blank_from_invalid(self) -> None:
        """Should tell an unset field apart from an unparseable one."""
        assert classify_date("") is DateStatus.UNSET
        assert classify_date("   ") is DateStatus.UNSET
        assert classify_date("2023-02-29") is DateStatus.INVALID
        assert classify_date("2024-02-29") is DateStatus.VALID


class TestDecomposeDate:
    """Tests for decompose_date."""

    def test_valid_date(self) -> None:
        """Should split into day, zero-based month and Buddhist year."""
        assert decompose_date("2024-06-15", TODAY) == DateParts(15, 5, BuddhistYear(2567))

    def test_invalid_date_falls_back_to_first_of_january(self) -> None:
        """Should fill defaults from the injected date."""
        assert decompose_date("garbage", TODAY) == DateParts(1, 0, BuddhistYear(2567))

    def test_empty_date_falls_back(self) -> None:
        """Should treat blank input like invalid input."""
        assert decompose_date("", date(2030, 12, 31)) == DateParts(1, 0, BuddhistYear(2573))

    def test_current_buddhist_year(self) -> None:
        """Should add 543 to the Gregorian year."""
        assert current_buddhist_year(TODAY) == 2567


class TestComposeDate:
    """Tests for compose_date."""

    def test_valid_parts(self) -> None:
        """Should build a zero-padded ISO date."""
        assert compose_date(DateParts(5, 0, BuddhistYear(2567))) == "2024-01-05"

    def test_leap_day(self) -> None:
        """Should accept 29 February in a leap year."""
        assert compose_date(DateParts(29, 1, BuddhistYear(2567))) == "2024-02-29"

    def test_day_overflow_rejected(self) -> None:
        """Should reject 31 February."""
        assert compose_date(DateParts(31, 1, BuddhistYear(2567))) == ""

    def test_leap_day_in_common_year_rejected(self) -> None:
        """Should reject 29 February 2566 (2023)."""
        assert compose_date(DateParts(29, 1, BuddhistYear(2566))) == ""

    def test_thirty_first_of_thirty_day_month_rejected(self) -> None:
        """Should reject 31 April."""
        assert compose_date(DateParts(31, 3, BuddhistYear(2567))) == ""

    def test_month_index_out_of_range_rejected(self) -> None:
        """Should reject month indexes outside 0-11."""
        assert compose_date(DateParts(1, 12, BuddhistYear(2567))) == ""
        assert compose_date(DateParts(1, -1, BuddhistYear(2567))) == ""

    def test_day_zero_rejected(self) -> None:
        """Should reject day 0."""
        assert compose_date(DateParts(0, 0, BuddhistYear(2567))) == ""

    def test_year_beyond_calendar_rejected(self) -> None:
        """Should return empty string for years too large to build a date."""
        assert compose_date(DateParts(1, 0, BuddhistYear(10**20))) == ""
        assert compose_date(DateParts(1, 0, BuddhistYear(20000))) == ""

    def test_round_trip(self) -> None:
        """Should reproduce the parts after compose then decompose."""
        for parts in [
            DateParts(1, 0, BuddhistYear(2567)),
            DateParts(29, 1, BuddhistYear(2567)),
            DateParts(28, 1, BuddhistYear(2566)),
            DateParts(30, 8, BuddhistYear(2500)),
            DateParts(31, 11, BuddhistYear(2600)),
        ]:
            assert decompose_date(compose_date(parts), TODAY) == parts


class TestLastDayOfMonth:
    """Tests for last_day_of_month."""

    def test_february_leap_year(self) -> None:
        """Should return 29 for February 2567 (2024)."""
        assert last_day_of_month(2567, 1) == 29

    def test_february_common_year(self) -> None:
        """Should return 28 for February 2566 (2023)."""
        assert last_day_of_month(2566, 1) == 28

    def test_century_rules(self) -> None:
        """Should follow the Gregorian 100/400 year rules."""
        assert last_day_of_month(2543, 1) == 29  # 2000
        assert last_day_of_month(2443, 1) == 28  # 1900

    def test_all_months_of_year(self) -> None:
        """Should return the right length for every month."""
        expected = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        assert [last_day_of_month(2567, index) for index in range(12)] == expected

    def test_month_index_rolls_into_next_year(self) -> None:
        """Should treat index 13 as February of the following year."""
        assert last_day_of_month(2566, 13) == 29

    def test_negative_month_index_rolls_into_previous_year(self) -> None:
        """Should treat index -1 as December of the previous year."""
        assert last_day_of_month(2567, -1) == 31


class TestUpdateDatePart:
    """Tests for update_date_part."""

    def test_clamps_day_when_month_changes(self) -> None:
        """Should move 31 January to the last day of February."""
        assert update_date_part("2024-01-31", month_index=1) == "2024-02-29"

    def test_clamps_day_when_year_changes(self) -> None:
        """Should move 29 February to 28 February in a common year."""
        assert update_date_part("2024-02-29", buddhist_year=2568) == "2025-02-28"

    def test_changes_year(self) -> None:
        """Should convert the Buddhist year back to Gregorian."""
        assert update_date_part("2024-03-10", buddhist_year=2566) == "2023-03-10"

    def test_blank_field_uses_defaults(self) -> None:
        """Should start from 1 มกราคม of the current year when unset."""
        assert update_date_part("", day=15, today=TODAY) == "2024-01-15"

    def test_invalid_change_keeps_original(self) -> None:
        """Should leave the value unchanged when no real date results."""
        assert update_date_part("2024-03-10", day=0) == "2024-03-10"
        assert update_date_part("2024-03-10", month_index=12) == "2024-03-10"

    def test_year_beyond_calendar_keeps_original(self) -> None:
        """Should leave the value unchanged when the new year is far out of range."""
        assert update_date_part("2024-01-01", buddhist_year=10**20) == "2024-01-01"


class TestFormatThaiDate:
    """Tests for format_thai_date."""

    def test_valid_date(self) -> None:
        """Should use Thai digits, month name and Buddhist year."""
        assert format_thai_date("2024-06-15") == "๑๕ มิถุนายน ..๒๕๖๗.."

    def test_single_digit_day(self) -> None:
        """Should not zero-pad the day."""
        assert format_thai_date("2023-01-05") == "๕ มกราคม ..๒๕๖๖.."

    def test_empty(self) -> None:
        """Should return empty string for empty input."""
        assert format_thai_date("") == ""

    def test_unparseable_passes_through(self) -> None:
        """Should return the input with digits transliterated."""
        assert format_thai_date("not-a-date") == "not-a-date"
        assert format_thai_date("2024-13-01") == "๒๐๒๔-๑๓-๐๑"


class TestDateInterval:
    """Tests for date_interval."""

    def test_day_borrow(self) -> None:
        """Should not count the month in which the end day is before the start day."""
        assert date_interval("2020-01-31", "2020-03-01") == Interval(0, 1)

    def test_whole_years_and_months(self) -> None:
        """Should count complete years and months."""
        assert date_interval("2015-04-01", "2024-06-15") == Interval(9, 2)

    def test_month_borrow_across_year(self) -> None:
        """Should borrow a year when the end month is earlier."""
        assert date_interval("2019-10-15", "2024-03-20") == Interval(4, 5)

    def test_day_and_month_borrow(self) -> None:
        """Should apply the day borrow before the month borrow."""
        assert date_interval("2019-03-20", "2024-03-10") == Interval(4, 11)

    def test_same_date(self) -> None:
        """Should return zero for identical dates."""
        assert date_interval("2024-01-01", "2024-01-01") == Interval(0, 0)

    def test_end_before_start(self) -> None:
        """Should return zero rather than negative values."""
        assert date_interval("2023-06-15", "2020-01-01") == Interval(0, 0)
        assert date_interval("2024-05-02", "2024-05-01") == Interval(0, 0)

    def test_missing_or_invalid(self) -> None:
        """Should return zero when either date is missing or invalid."""
        assert date_interval("", "2024-01-01") == Interval(0, 0)
        assert date_interval("2024-01-01", "") == Interval(0, 0)
        assert date_interval("2024-01-01", "soon") == Interval(0, 0)


class TestMonthSequence:
    """Tests for month_sequence."""

    def test_wraps_year_from_december(self) -> None:
        """Should increment the year after ธันวาคม."""
        sequence = month_sequence("ธันวาคม", 2567)

        assert len(sequence) == 12
        assert sequence[0] == MonthYearPair("ธันวาคม", BuddhistYear(2567))
        assert sequence[1] == MonthYearPair("มกราคม", BuddhistYear(2568))
        assert sequence[-1] == MonthYearPair("พฤศจิกายน", BuddhistYear(2568))

    def test_january_stays_in_one_year(self) -> None:
        """Should cover a single calendar year when starting in มกราคม."""
        sequence = month_sequence("มกราคม", 2567)

        assert [pair.month for pair in sequence] == list(THAI_MONTHS)
        assert {pair.year for pair in sequence} == {2567}

    def test_fiscal_year_start(self) -> None:
        """Should run ตุลาคม to กันยายน across two years."""
        sequence = month_sequence("ตุลาคม", 2567)

        assert [pair.year for pair in sequence] == [2567] * 3 + [2568] * 9
        assert sequence[-1].month == "กันยายน"

    def test_unknown_month_starts_in_january(self) -> None:
        """Should fall back to มกราคม for unknown names."""
        assert month_sequence("October", 2567) == month_sequence("มกราคม", 2567)

    def test_find_month_index(self) -> None:
        """Should find the index or fall back to 0."""
        assert find_month_index("ธันวาคม") == 11
        assert find_month_index("") == 0
