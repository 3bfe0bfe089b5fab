"""Export error taxonomy.

Every failure raised by the package derives from :class:`ExportError`. All of
them are terminal for the current export attempt: nothing is retried and no
partial artifact is produced. Hosts catch ``ExportError`` and show
``user_message`` to the user.
"""

from typing import Optional


class ExportError(Exception):
    """Base class for all bead pattern export failures."""

    default_message: str = "The pattern could not be exported."

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        super().__init__(detail or self.default_message)

    @property
    def user_message(self) -> str:
        return str(self)


class InputInvalid(ExportError):
    """Missing or malformed grid, dimensions or color tally."""

    default_message = "Cannot export: the pattern data is missing or invalid."


class CsvDecodeError(InputInvalid):
    """Base class for CSV decode failures."""

    default_message = "The CSV file could not be parsed."


class EmptyInput(CsvDecodeError):
    default_message = "The CSV file is empty."


class RowLengthMismatch(CsvDecodeError):
    """A row has a different field count than the first row.

    Attributes:
        row: 0-based index of the offending row.
        expected: Field count of the first row.
        actual: Field count of the offending row.
    """

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row + 1} has {actual} columns, expected {expected}."
        )


class InvalidColorToken(CsvDecodeError):
    """A field is neither ``TRANSPARENT``, empty, nor ``#RRGGBB``.

    Attributes:
        row: 0-based row index.
        col: 0-based column index.
        value: The offending (trimmed) field.
    """

    def __init__(self, row: int, col: int, value: str) -> None:
        self.row = row
        self.col = col
        self.value = value
        super().__init__(
            f"Invalid color value at row {row + 1}, column {col + 1}: {value!r}."
        )


class CsvReadError(ExportError):
    default_message = "The CSV file could not be read."


class SurfaceCreationFailure(ExportError):
    default_message = (
        "Cannot create the drawing surface. Try reducing the pattern size."
    )


class SerializationFailure(ExportError):
    default_message = (
        "Cannot generate the pattern image. Try reducing the pattern size."
    )


class DeliveryBlocked(ExportError):
    """The preview context could not be opened (e.g. popup blocked)."""

    default_message = "The preview could not be opened."


class DeliveryFailure(ExportError):
    """The artifact could not be written to its destination."""

    default_message = "The file could not be saved."
