"""Unit tests for CSV serialization."""

from __future__ import annotations

import csv
import io

import pytest

from table_csv.exceptions import EncodeError
from table_csv.services.csv_encoder import LF, encode_csv


def test_rows_become_crlf_terminated_lines() -> None:
    assert encode_csv([["a", "b"], ["c", "d"]]) == "a,b\r\nc,d\r\n"


def test_lf_terminator() -> None:
    assert encode_csv([["a", "b"], ["c", "d"]], line_terminator=LF) == "a,b\nc,d\n"


def test_empty_grid_encodes_to_empty_text() -> None:
    assert encode_csv([]) == ""


def test_special_characters_are_quoted() -> None:
    text = encode_csv([["Acme, Inc.", 'say "hi"', "two\nlines", "plain"]])

    assert text == '"Acme, Inc.","say ""hi""","two\nlines",plain\r\n'


def test_round_trip_through_csv_reader() -> None:
    grid = [
        ["Company", "Notes"],
        ["Acme, Inc.", 'The "best"'],
        ["Multi\r\nline", "trailing,comma,"],
        ["", " padded "],
    ]

    parsed = list(csv.reader(io.StringIO(encode_csv(grid), newline="")))

    assert parsed == grid


def test_writer_failure_is_reported_as_encode_error() -> None:
    with pytest.raises(EncodeError):
        encode_csv([["ok"], 42])  # type: ignore[list-item]


def test_lf_output_still_quotes_carriage_returns() -> None:
    grid = [["x\ry", "z"], ["line\nbreak", "w"]]

    text = encode_csv(grid, line_terminator=LF)

    assert text == '"x\ry",z\n"line\nbreak",w\n'
    assert list(csv.reader(io.StringIO(text, newline=""))) == grid
