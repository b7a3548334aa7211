"""BLAKE3 content hashing used to fingerprint documentation and code."""

from __future__ import annotations

import struct
from typing import NamedTuple

_MASK = 0xFFFFFFFF
_BLOCK_LEN = 64
_CHUNK_LEN = 1024

_CHUNK_START = 1 << 0
_CHUNK_END = 1 << 1
_PARENT = 1 << 2
_ROOT = 1 << 3

_IV = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_MSG_PERMUTATION = (2, 6, 3, 10, 7, 0, 4, 13, 1, 11, 12, 5, 9, 14, 15, 8)

_MIX_POSITIONS = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def _rotr(value: int, bits: int) -> int:
    return ((value >> bits) | (value << (32 - bits))) & _MASK


def _mix(state: list[int], a: int, b: int, c: int, d: int, mx: int, my: int) -> None:
    state[a] = (state[a] + state[b] + mx) & _MASK
    state[d] = _rotr(state[d] ^ state[a], 16)
    state[c] = (state[c] + state[d]) & _MASK
    state[b] = _rotr(state[b] ^ state[c], 12)
    state[a] = (state[a] + state[b] + my) & _MASK
    state[d] = _rotr(state[d] ^ state[a], 8)
    state[c] = (state[c] + state[d]) & _MASK
    state[b] = _rotr(state[b] ^ state[c], 7)


def _round(state: list[int], message: tuple[int, ...]) -> None:
    for step, (a, b, c, d) in enumerate(_MIX_POSITIONS):
        _mix(state, a, b, c, d, message[2 * step], message[2 * step + 1])


def _compress(
    chaining_value: tuple[int, ...],
    block_words: tuple[int, ...],
    counter: int,
    block_len: int,
    flags: int,
) -> list[int]:
    state = [
        *chaining_value,
        *_IV[:4],
        counter & _MASK,
        (counter >> 32) & _MASK,
        block_len,
        flags,
    ]
    message = block_words
    for round_number in range(7):
        _round(state, message)
        if round_number < 6:
            message = tuple(message[source] for source in _MSG_PERMUTATION)
    low = [x ^ y for x, y in zip(state[:8], state[8:])]
    high = [x ^ y for x, y in zip(state[8:], chaining_value)]
    return low + high


def _words(block: bytes) -> tuple[int, ...]:
    return struct.unpack("<16I", block.ljust(_BLOCK_LEN, b"\0"))


class _Output(NamedTuple):
    input_cv: tuple[int, ...]
    block_words: tuple[int, ...]
    counter: int
    block_len: int
    flags: int

    def chaining_value(self) -> tuple[int, ...]:
        words = _compress(
            self.input_cv, self.block_words, self.counter, self.block_len, self.flags
        )
        return tuple(words[:8])

    def root_hex(self) -> str:
        words = _compress(
            self.input_cv, self.block_words, 0, self.block_len, self.flags | _ROOT
        )
        return struct.pack("<8I", *words[:8]).hex()


def _chunk_output(chunk: bytes, counter: int) -> _Output:
    blocks = [chunk[i : i + _BLOCK_LEN] for i in range(0, len(chunk), _BLOCK_LEN)] or [b""]
    chaining_value = _IV
    flags = _CHUNK_START
    for block in blocks[:-1]:
        chaining_value = tuple(
            _compress(chaining_value, _words(block), counter, _BLOCK_LEN, flags)[:8]
        )
        flags = 0
    last = blocks[-1]
    return _Output(chaining_value, _words(last), counter, len(last), flags | _CHUNK_END)


def _parent_output(left: tuple[int, ...], right: tuple[int, ...]) -> _Output:
    return _Output(_IV, left + right, 0, _BLOCK_LEN, _PARENT)


def blake3_hex(data: bytes) -> str:
    """Return the 256-bit BLAKE3 digest of ``data`` as 64 lowercase hex digits."""
    chunks = [data[i : i + _CHUNK_LEN] for i in range(0, len(data), _CHUNK_LEN)] or [b""]
    stack: list[tuple[int, ...]] = []
    for counter, chunk in enumerate(chunks[:-1]):
        chaining_value = _chunk_output(chunk, counter).chaining_value()
        total_chunks = counter + 1
        while total_chunks & 1 == 0:
            chaining_value = _parent_output(stack.pop(), chaining_value).chaining_value()
            total_chunks >>= 1
        stack.append(chaining_value)

    output = _chunk_output(chunks[-1], len(chunks) - 1)
    while stack:
        output = _parent_output(stack.pop(), output.chaining_value())
    return output.root_hex()


def hash_content(content: str) -> str:
    """Hash text content (encoded as UTF-8) and return the hex digest."""
    return blake3_hex(content.encode("utf-8"))


def verify_hash(content: str, expected_hash: str) -> bool:
    """Tell whether ``content`` hashes to ``expected_hash``."""
    return hash_content(content) == expected_hash