"""
CSV row source for volume profile files.

Reads a profile file, checks its canonical header and yields numbered raw
rows for the profile builder. A missing file is reported as
``SourceNotFoundError`` so the loader can tell it apart from a file that
exists but is malformed.
"""

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import structlog

from volprofile.errors import FormatError, SourceNotFoundError

logger = structlog.get_logger(__name__)

DEFAULT_HEADER = "start,end,percentage,type"


@dataclass(frozen=True)
class RawRow:
    """One unparsed data row with its 1-based line number in the source."""
    line_number: int
    fields: tuple[str, ...]


class CsvRowSource:
    """Reads raw bucket rows from a profile CSV file."""

    def __init__(self, path: Union[str, Path], header: str = DEFAULT_HEADER):
        self.path = Path(path)
        self.header = header

    def exists(self) -> bool:
        return self.path.is_file()

    def read_rows(self) -> list[RawRow]:
        """
        Read all data rows from the file.

        Returns:
            Raw rows in file order, blank lines skipped

        Raises:
            SourceNotFoundError: If the file does not exist
            FormatError: If the header is missing or wrong, the CSV is malformed
                or the file is not text
        """
        if not self.exists():
            raise SourceNotFoundError(f"File not found: {self.path}", path=str(self.path))

        rows: list[RawRow] = []
        try:
            with open(self.path, newline="", encoding="utf-8-sig") as f:
                reader = csv.reader(f)
                header_row = next(reader, None)
                self._check_header(header_row)

                for fields in reader:
                    if not fields or all(not field.strip() for field in fields):
                        continue
                    rows.append(RawRow(line_number=reader.line_num, fields=tuple(fields)))
        except csv.Error as e:
            raise FormatError(
                f"Malformed CSV at line {reader.line_num}: {e}",
                line_number=reader.line_num,
                source=str(self.path),
            ) from e
        except UnicodeDecodeError as e:
            raise FormatError(
                f"Profile file is not valid UTF-8 text: {self.path}",
                source=str(self.path),
            ) from e

        logger.debug("Profile rows read", path=str(self.path), row_count=len(rows))
        return rows

    def _check_header(self, header_row: Union[list[str], None]) -> None:
        found = None if header_row is None else ",".join(header_row)
        if found != self.header:
            raise FormatError(
                f"Invalid or missing header: {found}. Expected '{self.header}'",
                line_number=1,
                field="header",
                value=found,
                source=str(self.path),
            )
