"""
Reversible mapping between raw bytes and printable unicode characters.

Merge rules in GPT-2 style artifacts are text, so every byte of the input is
first remapped to a printable codepoint. Printable ASCII and most of Latin-1
map to themselves; control and whitespace bytes are shifted to codepoints
starting at 256.
"""

import functools
import logging
from collections.abc import Mapping
from types import MappingProxyType

log = logging.getLogger(__name__)


@functools.cache
def bytes_to_unicode() -> dict[int, str]:
    """
    Build the byte -> printable character table.

    Bytes in ``[33, 126] ∪ [161, 172] ∪ [174, 255]`` keep their own codepoint.
    The remaining 68 byte values are assigned ``256, 257, ...`` in ascending
    byte order.
    """
    bs = (
        list(range(ord("!"), ord("~") + 1))
        + list(range(ord("¡"), ord("¬") + 1))
        + list(range(ord("®"), ord("ÿ") + 1))
    )
    cs = bs[:]
    printable = set(bs)

    n = 0
    for b in range(256):
        if b not in printable:
            bs.append(b)
            cs.append(256 + n)
            n += 1

    return dict(zip(bs, map(chr, cs)))


class ByteCodec:
    """Bijection between the 256 byte values and their printable characters."""

    def __init__(self) -> None:
        encoder = bytes_to_unicode()
        self._encoder: Mapping[int, str] = MappingProxyType(encoder)
        self._decoder: Mapping[str, int] = MappingProxyType(
            {ch: b for b, ch in encoder.items()}
        )

    @property
    def encoder(self) -> Mapping[int, str]:
        """Read-only byte -> character table."""
        return self._encoder

    @property
    def decoder(self) -> Mapping[str, int]:
        """Read-only character -> byte table."""
        return self._decoder

    def byte_to_char(self, b: int) -> str:
        return self._encoder[b]

    def char_to_byte(self, ch: str) -> int:
        """
        Return the byte a remapped character stands for.

        :raises KeyError: If ``ch`` is not one of the 256 remapped characters.
        """
        return self._decoder[ch]

    def encode_bytes(self, data: bytes) -> str:
        """Remap every byte of ``data`` to its printable character."""
        return "".join(self._encoder[b] for b in data)

    def decode_chars(self, text: str) -> bytes:
        """
        Map remapped characters back to raw bytes.

        Characters outside the table have no byte value and are dropped.
        """
        out = bytearray()
        dropped = 0
        for ch in text:
            b = self._decoder.get(ch)
            if b is None:
                dropped += 1
                continue
            out.append(b)

        if dropped:
            log.debug(f"dropped {dropped} characters with no byte mapping")
        return bytes(out)


BYTE_CODEC = ByteCodec()


__all__ = ["bytes_to_unicode", "ByteCodec", "BYTE_CODEC"]
