import csv
import io
import itertools
import os
import sys
from typing import IO, Callable, Iterator, List, Optional, Tuple

from csvpsql.utils.exceptions import (
    ConfigurationError,
    EmptyInputError,
    SourceUnavailableError,
)


def normalize_delimiter(delimiter: str) -> str:
    """
    Accept a single character, or the escaped tab "\\t".
    """
    if delimiter == "\\t":
        return "\t"
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ConfigurationError(
            f"Delimiter must be a single character, got {delimiter!r}"
        )
    return delimiter


class RowSource:
    """
    One-shot row stream produced by CSVAdapter.

    `header` is set only in header mode. `rows` is a lazy, single-pass
    iterator of data rows; the header record is never part of it.
    """

    def __init__(
        self,
        header: Optional[List[str]],
        column_count: int,
        rows: Iterator[List[str]],
        release: Callable[[], None],
    ):
        self.header = header
        self.column_count = column_count
        self.rows = rows
        self._release = release
        self.closed = False

    def close(self) -> None:
        if not self.closed:
            self._release()
            self.closed = True

    def __enter__(self) -> "RowSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# ------------------------------------------------------------------
# CSV Adapter
# ------------------------------------------------------------------
class CSVAdapter:
    """
    Delimited-text ingestion adapter.
    Responsibilities:
    - Open a file, an in-memory string or standard input
    - Tokenize records with the configured delimiter
    - Split off the header row when header mode is on
    - Skip blank lines
    DOES NOT:
    - Classify values
    - Check row widths (the accumulator owns that)
    """

    def __init__(
        self,
        file_path: Optional[str] = None,
        content: Optional[str] = None,
        delimiter: str = ",",
        has_header: bool = True,
    ):
        self.file_path = file_path
        self.content = content
        self.delimiter = normalize_delimiter(delimiter)
        self.has_header = has_header

    # --------------------------------------------------
    # Entry point
    # --------------------------------------------------
    def open(self) -> RowSource:
        stream, release = self._open_stream()
        reader = csv.reader(stream, delimiter=self.delimiter)

        try:
            first = self._next_record(reader)
        except Exception:
            release()
            raise

        if first is None:
            release()
            raise EmptyInputError("csv file has no records.")

        records = self._iter_records(reader)
        if self.has_header:
            return RowSource(first, len(first), records, release)

        # Header-less: the first record only fixes the width and is still data
        rows = itertools.chain([first], records)
        return RowSource(None, len(first), rows, release)

    # --------------------------------------------------
    # Internal helpers
    # --------------------------------------------------
    def _open_stream(self) -> Tuple[IO[str], Callable[[], None]]:
        """
        Return the text stream and how to release it when reading is done.
        """
        if self.content is not None:
            stream = io.StringIO(self.content, newline="")
            return stream, stream.close

        if self.file_path is None:
            return self._open_stdin()

        if not os.path.isfile(self.file_path):
            raise SourceUnavailableError(f"File not found: {self.file_path}")
        try:
            stream = open(self.file_path, newline="", encoding="utf-8-sig", errors="replace")
        except OSError as e:
            raise SourceUnavailableError(f"Cannot open {self.file_path}: {e}") from e
        return stream, stream.close

    def _open_stdin(self) -> Tuple[IO[str], Callable[[], None]]:
        # csv needs newline="" to keep line breaks inside quoted fields
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            return sys.stdin, lambda: None
        stream = io.TextIOWrapper(buffer, newline="", encoding="utf-8-sig", errors="replace")
        # detach leaves the process stdin open
        return stream, stream.detach

    def _next_record(self, reader) -> Optional[List[str]]:
        try:
            for record in reader:
                if record:
                    return record
        except csv.Error as e:
            raise SourceUnavailableError(
                f"Malformed CSV at line {reader.line_num}: {e}"
            ) from e
        return None

    def _iter_records(self, reader) -> Iterator[List[str]]:
        while True:
            record = self._next_record(reader)
            if record is None:
                return
            yield record
