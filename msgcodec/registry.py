"""Codec registry: maps the wire-visible codec code to a compression capability.

The registry is filled once at process start (see ``msgcodec.bootstrap``),
then frozen. After freezing it is read-only, so lookups need no lock.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator

from msgcodec.errors import RegistrationError

logger = logging.getLogger(__name__)

# Codec codes shared with every other client of the wire protocol.
CODEC_NONE = 0
CODEC_GZIP = 1
CODEC_SNAPPY = 2
CODEC_LZ4 = 3
CODEC_ZSTD = 4

INT8_MIN = -128
INT8_MAX = 127


def check_code(code: int) -> int:
    """Return *code* if it fits a signed 8-bit integer, else raise."""
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"Codec code must be an int, got {type(code).__name__}")
    if not INT8_MIN <= code <= INT8_MAX:
        raise ValueError(f"Codec code {code} out of int8 range [{INT8_MIN}, {INT8_MAX}]")
    return code


@dataclass(frozen=True)
class Codec:
    code: int
    name: str
    compress: Callable[[bytes], bytes]
    decompress: Callable[[bytes], bytes]

    def __repr__(self) -> str:
        return f"Codec(code={self.code}, name={self.name!r})"


class CodecRegistry:
    """Mapping of codec code to :class:`Codec`.

    At most one entry per code and per name. Code 0 means "no compression"
    and can never be registered.
    """

    def __init__(self):
        self._by_code: dict[int, Codec] = {}
        self._by_name: dict[str, Codec] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        code: int,
        name: str,
        compress: Callable[[bytes], bytes],
        decompress: Callable[[bytes], bytes],
    ) -> Codec:
        """Add a codec. Any conflict raises RegistrationError."""
        check_code(code)
        if self._frozen:
            raise RegistrationError(f"registry is frozen, cannot register codec {code} ({name})")
        if code == CODEC_NONE:
            raise RegistrationError(f"codec code {CODEC_NONE} is reserved for no compression")
        if code in self._by_code:
            existing = self._by_code[code]
            raise RegistrationError(
                f"codec {code} already registered as {existing.name!r}, refusing {name!r}"
            )
        if name in self._by_name:
            raise RegistrationError(
                f"codec name {name!r} already registered with code {self._by_name[name].code}"
            )
        if not callable(compress) or not callable(decompress):
            raise TypeError(f"codec {name!r}: compress and decompress must be callable")

        codec = Codec(code=code, name=name, compress=compress, decompress=decompress)
        self._by_code[code] = codec
        self._by_name[name] = codec
        logger.debug("Registered codec %s (code %d)", name, code)
        return codec

    def register_codec(self, impl) -> Codec:
        """Register an object exposing ``code``, ``name``, ``compress`` and ``decompress``."""
        return self.register(impl.code, impl.name, impl.compress, impl.decompress)

    def freeze(self):
        """End the initialization phase. Further registrations fail."""
        if not self._frozen:
            self._frozen = True
            logger.debug("Codec registry frozen with %d codec(s)", len(self._by_code))

    def lookup(self, code: int) -> Codec | None:
        """Return the codec for *code*, or None when nothing is registered under it."""
        return self._by_code.get(code)

    def by_name(self, name: str) -> Codec | None:
        return self._by_name.get(name)

    def codes(self) -> list[int]:
        return sorted(self._by_code)

    def __contains__(self, code) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._by_code)

    def __iter__(self) -> Iterator[Codec]:
        return iter([self._by_code[c] for c in sorted(self._by_code)])
