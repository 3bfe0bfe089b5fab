# tests/unit/test_csv_codec.py

import asyncio
import random
from pathlib import Path
from typing import List, Optional

import pytest

from bead_pattern.csv_codec import decode, decode_bytes, encode, import_csv
from bead_pattern.errors import (
    CsvDecodeError,
    CsvReadError,
    EmptyInput,
    InputInvalid,
    InvalidColorToken,
    RowLengthMismatch,
)
from bead_pattern.grid import Cell
from tests.test_utils import BLUE, RED, make_grid


def test_encode_rows_and_transparent_tokens() -> None:
    grid = make_grid([[RED, None], [None, "#00ff00"]])
    assert encode(grid) == "#FF0000,TRANSPARENT\nTRANSPARENT,#00FF00"


def test_encode_has_no_header_or_trailing_newline() -> None:
    text = encode(make_grid([[RED]]))
    assert text == "#FF0000"
    assert not text.endswith("\n")


def test_decode_valid_text() -> None:
    decoded = decode("#FF0000,TRANSPARENT\n,#0000ff")
    assert (decoded.width, decoded.height) == (2, 2)
    grid = decoded.grid
    assert grid.cell(0, 0) == Cell(key=RED, color=RED)
    assert grid.cell(1, 0) == Cell.external()
    assert grid.cell(0, 1) == Cell.external()
    assert grid.cell(1, 1) == Cell(key=BLUE, color=BLUE)


def test_decode_tolerates_crlf_whitespace_and_outer_blank_lines() -> None:
    decoded = decode("\n #FF0000 , TRANSPARENT \r\n#0000FF,\r\n\n")
    assert (decoded.width, decoded.height) == (2, 2)
    assert decoded.grid.cell(0, 0).color == RED
    assert decoded.grid.cell(1, 1).is_external


@pytest.mark.parametrize("text", ["", "   ", "\n\n", " \r\n "])
def test_decode_empty_input(text: str) -> None:
    with pytest.raises(EmptyInput):
        decode(text)


def test_decode_row_length_mismatch_reports_row() -> None:
    text = "#FF0000,#FF0000\n#FF0000,#FF0000\n#FF0000"
    with pytest.raises(RowLengthMismatch) as exc_info:
        decode(text)
    err = exc_info.value
    assert (err.row, err.expected, err.actual) == (2, 2, 1)
    assert "Row 3" in err.user_message


def test_decode_longer_row_is_also_rejected() -> None:
    with pytest.raises(RowLengthMismatch) as exc_info:
        decode("#FF0000\n#FF0000,#FF0000")
    assert exc_info.value.row == 1


@pytest.mark.parametrize(
    "token",
    ["red", "#12345", "#1234567", "FF0000", "#GG0000", "transparent", "#FFF"],
)
def test_decode_rejects_invalid_tokens(token: str) -> None:
    text = f"#FF0000,#FF0000\n#FF0000,{token}"
    with pytest.raises(InvalidColorToken) as exc_info:
        decode(text)
    err = exc_info.value
    assert (err.row, err.col, err.value) == (1, 1, token)


def test_decode_errors_share_base_classes() -> None:
    with pytest.raises(CsvDecodeError):
        decode("nope")
    with pytest.raises(InputInvalid):
        decode("")


def test_decode_uppercases_keys() -> None:
    cell = decode("#abcdef").grid.cell(0, 0)
    assert cell.key == "#ABCDEF"
    assert cell.color == "#ABCDEF"


def _random_tokens(rng: random.Random, width: int, height: int) -> List[List[Optional[str]]]:
    rows: List[List[Optional[str]]] = []
    for _ in range(height):
        row: List[Optional[str]] = []
        for _ in range(width):
            if rng.random() < 0.25:
                row.append(None)
            else:
                value = "".join(rng.choice("0123456789abcdefABCDEF") for _ in range(6))
                row.append(f"#{value}")
        rows.append(row)
    return rows


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_round_trip_reconstructs_grid(seed: int) -> None:
    rng = random.Random(seed)
    grid = make_grid(_random_tokens(rng, rng.randint(1, 12), rng.randint(1, 12)))
    decoded = decode(encode(grid))
    assert decoded.grid == grid
    assert (decoded.width, decoded.height) == grid.dimensions


def test_import_csv_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "pattern.csv"
    path.write_text("#FF0000,TRANSPARENT\n#0000FF,#0000FF", encoding="utf-8")
    decoded = asyncio.run(import_csv(path))
    assert (decoded.width, decoded.height) == (2, 2)
    assert decoded.grid.cell(1, 1).color == BLUE


def test_import_csv_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CsvReadError):
        asyncio.run(import_csv(tmp_path / "missing.csv"))


def test_import_csv_propagates_decode_errors(tmp_path: Path) -> None:
    path = tmp_path / "bad.csv"
    path.write_text("#FF0000,#FF0000\n#FF0000", encoding="utf-8")
    with pytest.raises(RowLengthMismatch):
        asyncio.run(import_csv(path))


def test_import_csv_accepts_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "excel.csv"
    path.write_bytes("#FF0000,TRANSPARENT".encode("utf-8-sig"))
    decoded = asyncio.run(import_csv(path))
    assert decoded.grid.cell(0, 0).color == RED
    assert decoded.grid.cell(1, 0).is_external


def test_decode_bytes_matches_text_decode() -> None:
    data = "\ufeff#FF0000\n#0000FF".encode("utf-8")
    assert decode_bytes(data).grid == decode("#FF0000\n#0000FF").grid


def test_decode_bytes_rejects_non_utf8() -> None:
    with pytest.raises(CsvReadError):
        decode_bytes(b"\xff\xfe#\x00F\x00", source="upload.csv")
