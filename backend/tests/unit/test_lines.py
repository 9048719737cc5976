"""Unit tests for incremental NDJSON line splitting."""

import pytest

from reelforge.consumer.lines import NdjsonLineBuffer

LINE = '{"type":"status","detail":"themed around “AI studio launch”","progress":0.24}'


@pytest.mark.parametrize("split", [1, 7, len(LINE) // 2, len(LINE.encode("utf-8")) - 1])
def test_line_split_across_two_chunks_is_emitted_once(split: int) -> None:
    data = (LINE + "\n").encode("utf-8")
    buffer = NdjsonLineBuffer()

    first = buffer.feed(data[:split])
    second = buffer.feed(data[split:])

    assert first == []
    assert second == [LINE]
    assert buffer.pending == ""


def test_every_byte_boundary_reconstructs_the_line() -> None:
    data = (LINE + "\n").encode("utf-8")
    for split in range(1, len(data)):
        buffer = NdjsonLineBuffer()
        lines = buffer.feed(data[:split]) + buffer.feed(data[split:])
        assert lines == [LINE]


def test_multibyte_character_split_mid_sequence() -> None:
    data = "“x”\n".encode("utf-8")
    buffer = NdjsonLineBuffer()

    assert buffer.feed(data[:1]) == []
    assert buffer.feed(data[1:2]) == []
    assert buffer.feed(data[2:]) == ["“x”"]


def test_multiple_lines_in_one_chunk() -> None:
    buffer = NdjsonLineBuffer()

    lines = buffer.feed(b'{"a":1}\n{"b":2}\n{"c":3}\n{"d"')

    assert lines == ['{"a":1}', '{"b":2}', '{"c":3}']
    assert buffer.pending == '{"d"'
    assert buffer.feed(b":4}\n") == ['{"d":4}']


def test_blank_lines_are_skipped() -> None:
    buffer = NdjsonLineBuffer()
    assert buffer.feed("\n\n  \n{}\n\n") == ["{}"]


def test_one_byte_at_a_time() -> None:
    data = b'{"a":1}\n{"b":2}\n'
    buffer = NdjsonLineBuffer()

    lines: list[str] = []
    for i in range(len(data)):
        lines.extend(buffer.feed(data[i:i + 1]))

    assert lines == ['{"a":1}', '{"b":2}']


def test_close_returns_unterminated_tail() -> None:
    buffer = NdjsonLineBuffer()
    buffer.feed(b'{"a":1}\n{"partial"')

    assert buffer.close() == '{"partial"'
    assert buffer.pending == ""


def test_close_on_clean_boundary() -> None:
    buffer = NdjsonLineBuffer()
    buffer.feed(b'{"a":1}\n')
    assert buffer.close() == ""
