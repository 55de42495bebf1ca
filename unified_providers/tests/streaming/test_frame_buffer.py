"""Unit tests for FrameBuffer line framing.

Covers:
- A record split across chunks is reconstructed.
- Several records in one chunk come back in order.
- Multi-byte UTF-8 characters cut by a chunk boundary decode intact.
- Trailing bytes without a newline are never emitted.
"""
from __future__ import annotations

from unified_providers.base.streaming import FrameBuffer


def test_split_line_reconstruction():
    buf = FrameBuffer()
    assert buf.feed(b"data: abc\ndata: d") == ["data: abc"]
    assert buf.feed(b"ef\n") == ["data: def"]


def test_many_records_in_one_chunk_keep_order():
    buf = FrameBuffer()
    assert buf.feed(b"event: ping\ndata: 1\n\ndata: 2\n") == ["event: ping", "data: 1", "", "data: 2"]


def test_line_spanning_three_chunks():
    buf = FrameBuffer()
    assert buf.feed(b"da") == []
    assert buf.feed(b"ta: x") == []
    assert buf.feed(b"yz\r\n") == ["data: xyz"]


def test_multibyte_character_split_across_chunks():
    encoded = "data: héllo ✓\n".encode("utf-8")
    cut = encoded.index("✓".encode("utf-8")) + 1
    buf = FrameBuffer()
    assert buf.feed(encoded[:cut]) == []
    assert buf.feed(encoded[cut:]) == ["data: héllo ✓"]


def test_trailing_partial_is_discarded_not_emitted():
    buf = FrameBuffer()
    assert buf.feed(b"data: done\ndata: partial") == ["data: done"]
    assert buf.pending_bytes == len(b"data: partial")
    assert buf.discard() == len(b"data: partial")
    assert buf.pending_bytes == 0
    assert buf.feed(b"") == []


def test_empty_chunk_is_a_no_op():
    buf = FrameBuffer()
    assert buf.feed(b"") == []
    assert buf.discard() == 0
