import csv
import logging
from io import StringIO
from typing import Any

import pandas as pd

from services.ingestion.base_adapter import BaseRowAdapter
from services.ingestion.errors import DelimitedParseError

logger = logging.getLogger(__name__)

SNIFF_DELIMITERS = ",;\t|"
SNIFF_SAMPLE_LINES = 20
DEFAULT_DELIMITER = ","


def detect_delimiter(content: str) -> str:
    lines = [line for line in content.splitlines() if line.strip()]
    sample = "\n".join(lines[:SNIFF_SAMPLE_LINES])
    if not sample:
        return DEFAULT_DELIMITER
    try:
        return csv.Sniffer().sniff(sample, delimiters=SNIFF_DELIMITERS).delimiter
    except csv.Error:
        return DEFAULT_DELIMITER


def count_long_rows(content: str, delimiter: str, width: int) -> int:
    """Data rows carrying more fields than the header."""
    reader = csv.reader(StringIO(content), delimiter=delimiter)
    next(reader, None)
    return sum(1 for fields in reader if len(fields) > width)


class DelimitedRowAdapter(BaseRowAdapter):
    """
    Header row becomes the column keys, blank lines are skipped and every
    cell stays a string: numeric detection happens later, per column.
    Rows longer than the header keep their first fields and lose the rest.
    """

    delimiter: str | None = None

    def _warn(self, message: str) -> None:
        self.warnings.append(message)
        logger.warning("%s: %s", self.filename or "<delimited>", message)

    def parse(self, content: str) -> list[dict[str, Any]]:
        delimiter = self.delimiter or detect_delimiter(content)
        try:
            # index_col=False: a trailing delimiter must not turn the
            # first column into the index
            df = pd.read_csv(
                StringIO(content),
                sep=delimiter,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
                engine="python",
            )
        except pd.errors.EmptyDataError:
            self._warn("No columns to parse")
            return []
        except (pd.errors.ParserError, csv.Error) as exc:
            raise DelimitedParseError(f"Failed to parse file: {exc}") from exc

        # short rows come back as NaN; expose them as absent values
        df = df.astype(object).where(pd.notnull(df), None)
        rows = df.to_dict(orient="records")

        short_rows = sum(1 for row in rows if any(v is None for v in row.values()))
        if short_rows:
            self._warn(f"{short_rows} rows had too few fields")

        long_rows = count_long_rows(content, delimiter, len(df.columns))
        if long_rows:
            self._warn(f"{long_rows} rows had too many fields; extra fields were dropped")

        logger.debug("Delimited: sep=%r rows=%s columns=%s", delimiter, len(rows), len(df.columns))
        return rows


class TsvRowAdapter(DelimitedRowAdapter):
    delimiter = "\t"
