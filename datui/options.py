"""Options that control how a data file is opened."""

from __future__ import annotations

from dataclasses import dataclass, replace


def _check_count(name: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


@dataclass(frozen=True)
class OpenOptions:
    """Reader settings; ``None`` means the reader's default."""

    delimiter: str | None = None
    has_header: bool | None = None
    skip_lines: int | None = None
    skip_rows: int | None = None

    def __post_init__(self) -> None:
        _check_count("skip_lines", self.skip_lines)
        _check_count("skip_rows", self.skip_rows)
        if self.delimiter is not None and (not isinstance(self.delimiter, str) or len(self.delimiter) != 1):
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")
        if self.has_header is not None and not isinstance(self.has_header, bool):
            raise ValueError(f"has_header must be a boolean, got {self.has_header!r}")

    def with_skip_lines(self, skip_lines: int) -> OpenOptions:
        return replace(self, skip_lines=skip_lines)

    def with_skip_rows(self, skip_rows: int) -> OpenOptions:
        return replace(self, skip_rows=skip_rows)

    def with_delimiter(self, delimiter: str | int) -> OpenOptions:
        """Set the delimiter, given as a character or as a byte value."""
        if isinstance(delimiter, int) and not isinstance(delimiter, bool):
            if not 0 <= delimiter <= 255:
                raise ValueError(f"delimiter byte must be in 0..255, got {delimiter}")
            delimiter = chr(delimiter)
        return replace(self, delimiter=delimiter)

    def with_has_header(self, has_header: bool) -> OpenOptions:
        return replace(self, has_header=has_header)