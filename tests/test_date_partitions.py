import calendar
from datetime import date, timedelta

import pytest

from app.domain.date_partitions import day_range, iter_partition_filters, month_range, plan
from app.domain.partition_filter import PartitionFilter
from app.errors import DomainValidationError, InvalidRangeError


def _covered_days(filters) -> list[date]:
    days = []
    for f in filters:
        days.extend(f.dates())
    return days


def _days_in_range(start: date, end: date) -> list[date]:
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def _boundary_dates() -> list[date]:
    dates = [date(2018, 12, 31), date(2022, 1, 1)]
    for year in (2019, 2020, 2021):
        for month in (1, 2, 6, 11, 12):
            last = calendar.monthrange(year, month)[1]
            for day in (1, 2, 15, last - 1, last):
                dates.append(date(year, month, day))
    return sorted(set(dates))


# ============================================================================
# RANGE BUILDERS
# ============================================================================


def test_month_range_is_zero_padded_and_inclusive():
    assert month_range(9, 12) == ("09", "10", "11", "12")


def test_day_range_is_zero_padded_and_inclusive():
    assert day_range(1, 3) == ("01", "02", "03")


def test_empty_ranges():
    assert month_range(1, 0) == ()
    assert day_range(5, 4) == ()


# ============================================================================
# SINGLE / ADJACENT MONTH
# ============================================================================


def test_single_month_aligned():
    assert plan(date(2020, 4, 1), date(2020, 4, 30)) == {PartitionFilter("2020", ("04",))}


def test_single_month_unaligned():
    assert plan(date(2020, 4, 9), date(2020, 4, 19)) == {
        PartitionFilter("2020", ("04",), day_range(9, 19))
    }


def test_single_day():
    assert plan(date(2020, 2, 29), date(2020, 2, 29)) == {
        PartitionFilter("2020", ("02",), ("29",))
    }


def test_adjacent_months_start_aligned_keeps_end_month_as_days():
    # The end month is listed day by day even though February is complete.
    assert plan(date(2020, 1, 1), date(2020, 2, 29)) == {
        PartitionFilter("2020", ("01",)),
        PartitionFilter("2020", ("02",), day_range(1, 29)),
    }


def test_adjacent_months_unaligned():
    assert plan(date(2020, 1, 20), date(2020, 2, 3)) == {
        PartitionFilter("2020", ("01",), day_range(20, 31)),
        PartitionFilter("2020", ("02",), day_range(1, 3)),
    }


def test_adjacent_months_across_year_boundary():
    assert plan(date(2019, 12, 20), date(2020, 1, 5)) == {
        PartitionFilter("2019", ("12",), day_range(20, 31)),
        PartitionFilter("2020", ("01",), day_range(1, 5)),
    }


# ============================================================================
# MULTI MONTH
# ============================================================================


def test_cross_month_same_year():
    assert plan(date(2020, 2, 19), date(2020, 4, 19)) == {
        PartitionFilter("2020", ("02",), day_range(19, 29)),
        PartitionFilter("2020", ("03",)),
        PartitionFilter("2020", ("04",), day_range(1, 19)),
    }


def test_multi_month_aligned_edges_use_whole_months():
    assert plan(date(2021, 3, 1), date(2021, 6, 30)) == {
        PartitionFilter("2021", ("04", "05")),
        PartitionFilter("2021", ("03",)),
        PartitionFilter("2021", ("06",)),
    }


def test_multi_month_across_year_boundary():
    assert plan(date(2019, 11, 15), date(2020, 2, 10)) == {
        PartitionFilter("2019", ("12",)),
        PartitionFilter("2020", ("01",)),
        PartitionFilter("2019", ("11",), day_range(15, 30)),
        PartitionFilter("2020", ("02",), day_range(1, 10)),
    }


def test_multi_month_starting_in_december():
    assert plan(date(2019, 12, 5), date(2020, 3, 31)) == {
        PartitionFilter("2020", ("01", "02")),
        PartitionFilter("2019", ("12",), day_range(5, 31)),
        PartitionFilter("2020", ("03",)),
    }


def test_multi_month_ending_in_january_does_not_select_whole_year():
    assert plan(date(2019, 3, 15), date(2020, 1, 10)) == {
        PartitionFilter("2019", month_range(4, 12)),
        PartitionFilter("2019", ("03",), day_range(15, 31)),
        PartitionFilter("2020", ("01",), day_range(1, 10)),
    }


# ============================================================================
# MULTI YEAR
# ============================================================================


def test_cross_year():
    assert plan(date(2018, 2, 17), date(2020, 4, 19)) == {
        PartitionFilter("2019"),
        PartitionFilter("2018", ("02",), day_range(17, 28)),
        PartitionFilter("2018", month_range(3, 12)),
        PartitionFilter("2020", ("04",), day_range(1, 19)),
        PartitionFilter("2020", month_range(1, 3)),
    }


def test_whole_year_aligned():
    assert plan(date(2020, 1, 1), date(2020, 12, 31)) == {PartitionFilter("2020")}


def test_multi_year_aligned_edges():
    assert plan(date(2017, 1, 1), date(2020, 12, 31)) == {
        PartitionFilter("2017"),
        PartitionFilter("2018"),
        PartitionFilter("2019"),
        PartitionFilter("2020"),
    }


def test_multi_year_month_aligned_edges():
    assert plan(date(2017, 5, 1), date(2019, 8, 31)) == {
        PartitionFilter("2018"),
        PartitionFilter("2017", month_range(5, 12)),
        PartitionFilter("2019", month_range(1, 8)),
    }


def test_start_on_first_of_year_counts_as_whole_year():
    assert plan(date(2019, 1, 1), date(2020, 6, 30)) == {
        PartitionFilter("2019"),
        PartitionFilter("2020", month_range(1, 6)),
    }


def test_multi_year_edges_in_december_and_january():
    assert plan(date(2017, 12, 10), date(2019, 1, 20)) == {
        PartitionFilter("2018"),
        PartitionFilter("2017", ("12",), day_range(10, 31)),
        PartitionFilter("2019", ("01",), day_range(1, 20)),
    }


def test_multi_year_emits_middle_years_first():
    emitted = list(iter_partition_filters(date(2018, 2, 17), date(2020, 4, 19)))
    assert emitted[0] == PartitionFilter("2019")
    assert emitted[1].year == "2018"
    assert emitted[-1].year == "2020"


# ============================================================================
# PROPERTIES
# ============================================================================


def test_exact_coverage_without_overlap():
    dates = _boundary_dates()
    for i, start in enumerate(dates):
        for end in dates[i:]:
            filters = plan(start, end)
            covered = _covered_days(filters)
            expected = _days_in_range(start, end)
            assert len(covered) == len(expected), (start, end)
            assert set(covered) == set(expected), (start, end)


def test_every_filter_has_a_legal_shape():
    dates = _boundary_dates()
    for i, start in enumerate(dates):
        for end in dates[i:]:
            for f in plan(start, end):
                shapes = [f.has_only_year(), f.has_only_year_month(), f.has_year_month_day()]
                assert shapes.count(True) == 1, (start, end, f)
                assert all(len(m) == 2 for m in f.months)
                assert all(len(d) == 2 for d in f.days)
                assert list(f.months) == sorted(f.months)
                assert list(f.days) == sorted(f.days)


def test_plan_is_idempotent():
    start, end = date(2018, 2, 17), date(2020, 4, 19)
    assert plan(start, end) == plan(start, end)


# ============================================================================
# INVALID INPUT
# ============================================================================


def test_start_after_end_rejected():
    with pytest.raises(InvalidRangeError):
        plan(date(2020, 4, 20), date(2020, 4, 19))


def test_missing_bound_rejected():
    with pytest.raises(InvalidRangeError):
        plan(None, date(2020, 4, 19))
    with pytest.raises(InvalidRangeError):
        plan(date(2020, 4, 19), None)


def test_invalid_range_is_a_validation_error():
    assert issubclass(InvalidRangeError, DomainValidationError)
