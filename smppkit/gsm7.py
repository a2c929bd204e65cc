"""GSM 03.38 7-bit default alphabet, packed and unpacked."""

from __future__ import annotations

from dataclasses import dataclass

ESCAPE = 0x1B

# Default alphabet in code order; position 0x1B is the escape to the
# extension table and has no character of its own.
_ALPHABET = (
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞ\x1bÆæßÉ"
    " !\"#¤%&'()*+,-./0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§"
    "¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

_REVERSE_LOOKUP: dict[int, str] = {
    code: char for code, char in enumerate(_ALPHABET) if code != ESCAPE
}
_FORWARD_LOOKUP: dict[str, int] = {char: code for code, char in _REVERSE_LOOKUP.items()}

_FORWARD_ESCAPE: dict[str, int] = {
    "\f": 0x0A,
    "^": 0x14,
    "{": 0x28,
    "}": 0x29,
    "\\": 0x2F,
    "[": 0x3C,
    "~": 0x3D,
    "]": 0x3E,
    "|": 0x40,
    "€": 0x65,
}
_REVERSE_ESCAPE: dict[int, str] = {code: char for char, code in _FORWARD_ESCAPE.items()}


class InvalidCharacterError(ValueError):
    """A character has no representation in the GSM 7-bit alphabet."""

    def __init__(self, char: str = "") -> None:
        self.char = char
        message = "invalid gsm7 character"
        if char:
            message = f"{message}: {char!r}"
        super().__init__(message)


class InvalidByteError(ValueError):
    """A byte lies outside the GSM 7-bit alphabet."""

    def __init__(self, value: int | None = None) -> None:
        self.value = value
        message = "invalid gsm7 byte"
        if value is not None:
            message = f"{message}: {value:#04x}"
        super().__init__(message)


def validate_gsm7_string(text: str) -> list[str]:
    """Return the characters of ``text`` that GSM 7-bit cannot represent."""
    return [
        char
        for char in text
        if char not in _FORWARD_LOOKUP and char not in _FORWARD_ESCAPE
    ]


def validate_gsm7_buffer(buffer: bytes) -> bytes:
    """Return the bytes of ``buffer`` that fall outside the GSM 7-bit range."""
    invalid = bytearray()
    values = iter(buffer)
    for value in values:
        if value == ESCAPE:
            extension = next(values, None)
            if extension is None:
                invalid.append(value)
                break
            if extension not in _REVERSE_ESCAPE:
                invalid.extend((value, extension))
        elif value not in _REVERSE_LOOKUP:
            invalid.append(value)
    return bytes(invalid)


def _to_septets(text: str) -> list[int]:
    septets: list[int] = []
    for char in text:
        if char in _FORWARD_LOOKUP:
            septets.append(_FORWARD_LOOKUP[char])
        elif char in _FORWARD_ESCAPE:
            septets.extend((ESCAPE, _FORWARD_ESCAPE[char]))
        else:
            raise InvalidCharacterError(char)
    return septets


def _from_septets(septets: list[int]) -> str:
    chars: list[str] = []
    values = iter(septets)
    for value in values:
        if value == ESCAPE:
            extension = next(values, None)
            if extension is None or extension not in _REVERSE_ESCAPE:
                raise InvalidByteError(value if extension is None else extension)
            chars.append(_REVERSE_ESCAPE[extension])
        elif value in _REVERSE_LOOKUP:
            chars.append(_REVERSE_LOOKUP[value])
        else:
            raise InvalidByteError(value)
    return "".join(chars)


def _pack(septets: list[int]) -> bytes:
    bits = 0
    for position, septet in enumerate(septets):
        bits |= (septet & 0x7F) << (7 * position)
    length = (len(septets) * 7 + 7) // 8
    return bits.to_bytes(length, "little")


def _unpack(data: bytes) -> list[int]:
    septets: list[int] = []
    for start in range(0, len(data), 7):
        chunk = data[start:start + 7]
        bits = int.from_bytes(chunk, "little")
        septets.extend((bits >> (7 * n)) & 0x7F for n in range(len(chunk)))
        # A full group of seven octets carries an eighth septet only when
        # its last octet is non-zero.
        if len(chunk) == 7 and chunk[6] > 0:
            septets.append(chunk[6] >> 1)
    return septets


@dataclass(frozen=True)
class GSM7:
    """GSM 7-bit text encoding.

    With ``packed`` set, septets are packed into octets; most SMPP
    providers expect the unpacked form.
    """

    packed: bool = False

    def encode(self, text: str) -> bytes:
        """Encode ``text``; raise InvalidCharacterError on unmappable input."""
        septets = _to_septets(text)
        if self.packed:
            return _pack(septets)
        return bytes(septets)

    def decode(self, data: bytes) -> str:
        """Decode ``data``; raise InvalidByteError on bytes outside the alphabet."""
        septets = _unpack(bytes(data)) if self.packed else list(data)
        return _from_septets(septets)

    def __str__(self) -> str:
        return "GSM 7-bit (Packed)" if self.packed else "GSM 7-bit (Unpacked)"