"""
Uniswap tick bitmap math.

Notes on bitmap indexing (v3/v4 TickBitmap):
- ticks are first compressed by the pool's spacing: ``c = tick // spacing``
  (floor division, so negative ticks round toward negative infinity)
- word index is ``c >> 8``, bit index is ``c & 0xff``
- each word packs 256 bits for compressed ticks ``[word*256 .. word*256+255]``

Public API
----------
compress(tick, spacing) / position(compressed)
build_bitmap(ticks, spacing)
    Build ``{word_pos: word}`` from initialized ticks.
next_initialized_tick_within_one_word(read_word, tick, spacing, lte)
    Search one bitmap word for the next initialized tick; returns the word
    edge with ``initialized=False`` when nothing is set.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable

from ticklens.config.ticks import WORD_SIZE

__all__ = [
    "compress",
    "position",
    "build_bitmap",
    "next_initialized_tick_within_one_word",
]

FULL_MASK_256 = (1 << 256) - 1


def compress(tick: int, spacing: int) -> int:
    return tick // spacing


def position(compressed: int) -> tuple[int, int]:
    """Return ``(word_pos, bit_pos)`` for a compressed tick."""
    return compressed >> 8, compressed & (WORD_SIZE - 1)


def build_bitmap(ticks: Iterable[int], spacing: int) -> dict[int, int]:
    words: dict[int, int] = {}
    for tick in ticks:
        if tick % spacing != 0:
            raise ValueError(f"Tick {tick} is not a multiple of spacing {spacing}")
        word_pos, bit_pos = position(compress(tick, spacing))
        words[word_pos] = words.get(word_pos, 0) | (1 << bit_pos)
    return words


def _msb(word: int) -> int:
    return word.bit_length() - 1


def _lsb(word: int) -> int:
    return (word & -word).bit_length() - 1


def next_initialized_tick_within_one_word(
    read_word: Callable[[int], int],
    tick: int,
    spacing: int,
    lte: bool,
) -> tuple[bool, int]:
    """
    Next initialized tick contained in the same word as ``tick``.

    With ``lte`` the search covers ``tick`` and everything below it in the
    word; otherwise it covers everything strictly above ``tick``.
    """
    compressed = compress(tick, spacing)

    if lte:
        word_pos, bit_pos = position(compressed)
        mask = (1 << (bit_pos + 1)) - 1
        masked = int(read_word(word_pos)) & mask
        if masked:
            return True, (compressed - (bit_pos - _msb(masked))) * spacing
        return False, (compressed - bit_pos) * spacing

    word_pos, bit_pos = position(compressed + 1)
    mask = FULL_MASK_256 ^ ((1 << bit_pos) - 1)
    masked = int(read_word(word_pos)) & mask
    if masked:
        return True, (compressed + 1 + (_lsb(masked) - bit_pos)) * spacing
    return False, (compressed + 1 + (WORD_SIZE - 1 - bit_pos)) * spacing
