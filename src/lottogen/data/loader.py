"""CSV loader and validator for lotto draw history."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from lottogen.errors import DataUnavailableError, DataValidationError

from .records import BALL_FIELDS, MAIN_BALL_FIELDS, DrawRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [*BALL_FIELDS, "machine", "ball_set"]
COLUMN_ALIASES = {
    "ball_1": "ball1",
    "ball_2": "ball2",
    "ball_3": "ball3",
    "ball_4": "ball4",
    "ball_5": "ball5",
    "ball_6": "ball6",
    "bonusball": "bonus_ball",
    "bonus": "bonus_ball",
    "ballset": "ball_set",
    "set": "ball_set",
    "drawnumber": "draw_number",
    "drawdate": "draw_date",
}


class CsvDrawHistoryAccessor:
    """Load and validate a lotto draw history CSV export."""

    def __init__(
        self,
        path: str | Path,
        *,
        encoding: str = "utf-8",
        number_min: int = 1,
        number_max: int = 59,
        recent_n: int | None = None,
    ) -> None:
        if number_min > number_max:
            raise ValueError("number_min cannot be greater than number_max.")
        if recent_n is not None and recent_n <= 0:
            raise ValueError("recent_n must be greater than 0.")
        self.path = Path(path)
        self.encoding = encoding
        self.number_min = number_min
        self.number_max = number_max
        self.recent_n = recent_n

    def read_draw_history(self) -> list[DrawRecord]:
        """Load, validate and convert the CSV into draw records in file order."""
        dataframe = self.validate(self.load_csv())
        if self.recent_n is not None:
            dataframe = self.get_recent_draws(dataframe, self.recent_n)
        draws = self.to_records(dataframe)
        logger.info("Loaded %d draws from %s", len(draws), self.path)
        return draws

    def load_csv(self) -> pd.DataFrame:
        """Load CSV and normalize column names."""
        if not self.path.exists():
            raise DataUnavailableError(f"Draw history file not found: {self.path}")

        try:
            dataframe = pd.read_csv(self.path, encoding=self.encoding, dtype=str, skipinitialspace=True)
        except pd.errors.EmptyDataError:
            dataframe = pd.DataFrame(columns=REQUIRED_COLUMNS)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
            raise DataUnavailableError(f"Cannot read draw history {self.path}: {exc}") from exc
        return self._normalize_columns(dataframe)

    def validate(self, dataframe: pd.DataFrame) -> pd.DataFrame:
        """Validate schema, ball range, and per-draw uniqueness of main balls.

        Returns a copy with ball columns (and draw numbers, when present) as ints.
        """
        missing = [col for col in REQUIRED_COLUMNS if col not in dataframe.columns]
        if missing:
            raise DataValidationError(f"Missing required columns: {missing}")

        numeric_columns = [*BALL_FIELDS, "draw_number"] if "draw_number" in dataframe.columns else list(BALL_FIELDS)
        parsed = dataframe.copy()
        for column in numeric_columns:
            parsed[column] = self._to_int_column(dataframe, column)

        for column in BALL_FIELDS:
            out_of_range = (parsed[column] < self.number_min) | (parsed[column] > self.number_max)
            if out_of_range.any():
                invalid_rows = self._row_labels(parsed, out_of_range)
                raise DataValidationError(
                    f"Column '{column}' has values outside {self.number_min}~{self.number_max} "
                    f"at draws: {invalid_rows}"
                )

        duplicate_rows = parsed[list(MAIN_BALL_FIELDS)].nunique(axis=1) != len(MAIN_BALL_FIELDS)
        if duplicate_rows.any():
            invalid_rows = self._row_labels(parsed, duplicate_rows)
            raise DataValidationError(f"Duplicate main balls detected in draws: {invalid_rows}")
        return parsed

    @staticmethod
    def get_recent_draws(dataframe: pd.DataFrame, recent_n: int) -> pd.DataFrame:
        """Return the N highest-numbered draws (or the last N rows) in file order."""
        if recent_n <= 0:
            raise ValueError("recent_n must be greater than 0.")

        if "draw_number" in dataframe.columns:
            return dataframe.nlargest(recent_n, "draw_number").sort_index()
        return dataframe.tail(recent_n)

    @staticmethod
    def to_records(dataframe: pd.DataFrame) -> list[DrawRecord]:
        """Convert a validated dataframe into draw records."""
        has_number = "draw_number" in dataframe.columns
        has_date = "draw_date" in dataframe.columns

        draws: list[DrawRecord] = []
        for row in dataframe.to_dict(orient="records"):
            draws.append(
                DrawRecord(
                    *(int(row[field]) for field in BALL_FIELDS),
                    machine=str(row["machine"]).strip(),
                    ball_set=str(row["ball_set"]).strip(),
                    draw_number=int(row["draw_number"]) if has_number else None,
                    draw_date=str(row["draw_date"]).strip() if has_date and pd.notna(row["draw_date"]) else None,
                )
            )
        return draws

    @staticmethod
    def _to_int_column(dataframe: pd.DataFrame, column: str) -> pd.Series:
        try:
            values = pd.to_numeric(dataframe[column], errors="raise")
        except (TypeError, ValueError) as exc:
            raise DataValidationError(f"Column '{column}' must be numeric.") from exc
        if values.isna().any():
            raise DataValidationError(f"Column '{column}' must not contain empty values.")
        return values.astype(int)

    @staticmethod
    def _row_labels(dataframe: pd.DataFrame, mask: pd.Series) -> list:
        if "draw_number" in dataframe.columns:
            return dataframe.loc[mask, "draw_number"].tolist()
        return dataframe.index[mask].tolist()

    @staticmethod
    def _normalize_columns(dataframe: pd.DataFrame) -> pd.DataFrame:
        normalized = {}
        for column in dataframe.columns:
            new_name = str(column).strip().lower().replace("-", "_")
            new_name = "_".join(new_name.split())
            new_name = COLUMN_ALIASES.get(new_name, new_name)
            normalized[column] = new_name
        return dataframe.rename(columns=normalized)
