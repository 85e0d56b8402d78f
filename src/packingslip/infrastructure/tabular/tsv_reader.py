"""Tab-delimited reader with a header row.

One or more consecutive tabs count as a single delimiter. Rows are zipped
positionally with the header; a column the row does not reach is present
with the value ``None``. Column counts are not validated.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from packingslip.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

ONE_OR_MORE_TABS = re.compile(r"\t+")


class TsvReader:
    """Eagerly reads a file into a list of ``{column: value}`` records.

    The file is opened, fully consumed and closed in the constructor, so
    iterating the reader is restartable and never touches the disk.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)
        self.columns: list[str] = []
        self.data: list[dict[str, str | None]] = []
        self._read()

    def __iter__(self) -> Iterator[dict[str, str | None]]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    # --- Parsing --------------------------------------------------------------

    def _read(self) -> None:
        with self._file_path.open("r", encoding="utf-8") as fp:
            try:
                header = fp.readline()
                self.columns = split_fields(header)
                if not self.columns:
                    raise ValidationError(f"Missing header row in {self._file_path}")

                for line in fp:
                    fields = split_fields(line)
                    if not fields:
                        continue
                    self.data.append(self._to_record(fields))
            except UnicodeDecodeError as exc:
                raise ValidationError(f"{self._file_path} is not valid UTF-8: {exc}") from exc

        logger.debug(
            "Read %d records (%d columns) from %s",
            len(self.data),
            len(self.columns),
            self._file_path,
        )

    def _to_record(self, fields: list[str]) -> dict[str, str | None]:
        return {
            column: fields[index] if index < len(fields) else None
            for index, column in enumerate(self.columns)
        }


def split_fields(line: str) -> list[str]:
    """Split one line on runs of tabs, dropping the line terminator.

    Trailing empty fields are dropped; a blank line yields no fields.
    """
    stripped = line.rstrip("\r\n")
    if not stripped.strip():
        return []
    fields = ONE_OR_MORE_TABS.split(stripped)
    while fields and fields[-1] == "":
        fields.pop()
    return fields
