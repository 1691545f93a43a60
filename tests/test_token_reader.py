"""Tests for splitting token sources."""

import io

import pytest

from core import ParseError, ReadError, read_tokens


class FailingStream:
    def read(self, size=-1):
        raise OSError("device gone")


def test_split_string():
    assert list(read_tokens("1 + 2")) == ["1", "+", "2"]


def test_empty_source_yields_nothing():
    assert list(read_tokens("")) == []


def test_trailing_delimiter_is_dropped():
    assert list(read_tokens("1 ")) == ["1"]


def test_interior_empty_pieces_are_kept():
    assert list(read_tokens("1  2")) == ["1", "", "2"]


def test_text_stream_in_small_chunks():
    stream = io.StringIO("12 * 34 - 5")
    assert list(read_tokens(stream, chunk_size=1)) == ["12", "*", "34", "-", "5"]


def test_binary_stream():
    assert list(read_tokens(io.BytesIO(b"3 * 4"))) == ["3", "*", "4"]


def test_multibyte_char_split_across_chunks():
    stream = io.BytesIO("é 1".encode("utf-8"))
    assert list(read_tokens(stream, chunk_size=1)) == ["é", "1"]


def test_invalid_utf8_is_parse_error():
    with pytest.raises(ParseError):
        list(read_tokens(io.BytesIO(b"1 + \xff")))


def test_failing_stream_is_read_error():
    with pytest.raises(ReadError):
        list(read_tokens(FailingStream()))


def test_closed_stream_is_read_error():
    stream = io.StringIO("1 + 1")
    stream.close()
    with pytest.raises(ReadError):
        list(read_tokens(stream))


def test_iterable_of_tokens_passes_through():
    assert list(read_tokens(["1", b"+", "2"])) == ["1", "+", "2"]


def test_failing_iterable_is_read_error():
    def tokens():
        yield "1"
        raise OSError("broken pipe")

    with pytest.raises(ReadError):
        list(read_tokens(tokens()))
