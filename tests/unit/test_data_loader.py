from __future__ import annotations

import pytest

from lottogen.data import CsvDrawHistoryAccessor, DrawRecord
from lottogen.engine.frequency import most_frequent_ball
from lottogen.errors import DataUnavailableError, DataValidationError

UK_HEADER = "DrawDate,Ball 1,Ball 2,Ball 3,Ball 4,Ball 5,Ball 6,Bonus Ball,Ball Set,Machine,Raffles,DrawNumber\n"


def test_load_uk_export_into_draw_records(tmp_path):
    csv_path = tmp_path / "lotto-draw-history.csv"
    csv_path.write_text(
        UK_HEADER
        + "14-Oct-2026,3,17,22,31,45,52,9,7,Guinevere,\"WWPQ1234\",3012\n"
        + "10-Oct-2026,1,5,14,28,40,59,33,5,Lancelot,\"WWPQ5678\",3011\n",
        encoding="utf-8",
    )

    draws = CsvDrawHistoryAccessor(csv_path).read_draw_history()

    assert draws == [
        DrawRecord(3, 17, 22, 31, 45, 52, 9, "Guinevere", "7", draw_number=3012, draw_date="14-Oct-2026"),
        DrawRecord(1, 5, 14, 28, 40, 59, 33, "Lancelot", "5", draw_number=3011, draw_date="10-Oct-2026"),
    ]


def test_load_snake_case_columns_without_metadata(tmp_path):
    csv_path = tmp_path / "history.csv"
    csv_path.write_text(
        "ball1,ball2,ball3,ball4,ball5,ball6,bonus_ball,machine,ball_set\n"
        "1,2,3,4,5,6,7,Arthur,1\n",
        encoding="utf-8",
    )

    draws = CsvDrawHistoryAccessor(csv_path).read_draw_history()

    assert draws == [DrawRecord(1, 2, 3, 4, 5, 6, 7, "Arthur", "1")]


def test_recent_draws_use_draw_number(tmp_path):
    csv_path = tmp_path / "history.csv"
    csv_path.write_text(
        UK_HEADER
        + "17-Oct-2026,1,2,3,4,5,6,7,1,Arthur,,3\n"
        + "10-Oct-2026,8,9,10,11,12,13,14,2,Merlin,,1\n"
        + "14-Oct-2026,15,16,17,18,19,20,21,3,Arthur,,2\n",
        encoding="utf-8",
    )

    draws = CsvDrawHistoryAccessor(csv_path, recent_n=2).read_draw_history()

    assert [draw.draw_number for draw in draws] == [3, 2]


def test_recent_draws_keep_file_order_for_tie_breaks(tmp_path):
    csv_path = tmp_path / "history.csv"
    csv_path.write_text(
        UK_HEADER
        + "17-Oct-2026,1,2,3,4,5,6,7,1,Arthur,,3\n"
        + "14-Oct-2026,8,9,10,11,12,13,14,2,Merlin,,2\n",
        encoding="utf-8",
    )

    full = CsvDrawHistoryAccessor(csv_path).read_draw_history()
    recent = CsvDrawHistoryAccessor(csv_path, recent_n=2).read_draw_history()

    assert recent == full
    assert most_frequent_ball(recent) == most_frequent_ball(full) == 1


def test_blank_draw_number_raises(tmp_path):
    csv_path = tmp_path / "history.csv"
    csv_path.write_text(
        UK_HEADER + "17-Oct-2026,1,2,3,4,5,6,7,1,Arthur,,\n",
        encoding="utf-8",
    )

    with pytest.raises(DataValidationError, match="draw_number' must not contain empty values"):
        CsvDrawHistoryAccessor(csv_path, recent_n=1).read_draw_history()


def test_non_numeric_draw_number_raises(tmp_path):
    csv_path = tmp_path / "history.csv"
    csv_path.write_text(
        UK_HEADER + "17-Oct-2026,1,2,3,4,5,6,7,1,Arthur,,latest\n",
        encoding="utf-8",
    )

    with pytest.raises(DataValidationError, match="draw_number' must be numeric"):
        CsvDrawHistoryAccessor(csv_path).read_draw_history()


def test_validate_returns_parsed_copy(tmp_path):
    csv_path = tmp_path / "history.csv"
    csv_path.write_text(
        UK_HEADER + "17-Oct-2026,1,2,3,4,5,6,7,1,Arthur,,3012\n",
        encoding="utf-8",
    )
    accessor = CsvDrawHistoryAccessor(csv_path)
    dataframe = accessor.load_csv()

    parsed = accessor.validate(dataframe)

    assert parsed.loc[0, "ball1"] == 1
    assert parsed.loc[0, "draw_number"] == 3012
    assert dataframe.loc[0, "ball1"] == "1"


def test_empty_file_yields_empty_history(tmp_path):
    csv_path = tmp_path / "empty.csv"
    csv_path.write_text("", encoding="utf-8")

    assert CsvDrawHistoryAccessor(csv_path).read_draw_history() == []


def test_missing_file_raises_data_unavailable(tmp_path):
    with pytest.raises(DataUnavailableError, match="not found"):
        CsvDrawHistoryAccessor(tmp_path / "missing.csv").read_draw_history()


def test_missing_required_column_raises(tmp_path):
    csv_path = tmp_path / "missing.csv"
    csv_path.write_text(
        "ball1,ball2,ball3,ball4,ball5,ball6,bonus_ball,machine\n" "1,2,3,4,5,6,7,Arthur\n",
        encoding="utf-8",
    )

    with pytest.raises(DataValidationError, match="Missing required columns"):
        CsvDrawHistoryAccessor(csv_path).read_draw_history()


def test_non_numeric_ball_raises(tmp_path):
    csv_path = tmp_path / "text.csv"
    csv_path.write_text(
        "ball1,ball2,ball3,ball4,ball5,ball6,bonus_ball,machine,ball_set\n" "1,2,x,4,5,6,7,Arthur,1\n",
        encoding="utf-8",
    )

    with pytest.raises(DataValidationError, match="must be numeric"):
        CsvDrawHistoryAccessor(csv_path).read_draw_history()


def test_ball_out_of_range_raises(tmp_path):
    csv_path = tmp_path / "range.csv"
    csv_path.write_text(
        "ball1,ball2,ball3,ball4,ball5,ball6,bonus_ball,machine,ball_set\n" "1,2,3,4,5,50,7,Arthur,1\n",
        encoding="utf-8",
    )

    with pytest.raises(DataValidationError, match="outside 1~49"):
        CsvDrawHistoryAccessor(csv_path, number_max=49).read_draw_history()


def test_duplicate_main_balls_raise(tmp_path):
    csv_path = tmp_path / "duplicate.csv"
    csv_path.write_text(
        "ball1,ball2,ball3,ball4,ball5,ball6,bonus_ball,machine,ball_set\n" "1,1,2,3,4,5,7,Arthur,1\n",
        encoding="utf-8",
    )

    with pytest.raises(DataValidationError, match="Duplicate main balls"):
        CsvDrawHistoryAccessor(csv_path).read_draw_history()


def test_validation_error_is_data_unavailable():
    assert issubclass(DataValidationError, DataUnavailableError)


def test_invalid_accessor_arguments_raise(tmp_path):
    with pytest.raises(ValueError, match="recent_n"):
        CsvDrawHistoryAccessor(tmp_path / "history.csv", recent_n=0)
    with pytest.raises(ValueError, match="number_min"):
        CsvDrawHistoryAccessor(tmp_path / "history.csv", number_min=10, number_max=5)
