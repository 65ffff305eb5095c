import logging
import string
from dataclasses import dataclass
from enum import Enum

from .config import AUTO_BASE, BUFFER_SIZE, MAX_BASE, MAX_VALUE, MIN_BASE
from .errors import (
    InvalidNumeral,
    NumeralOverflow,
    PartialNumeral,
    UnsupportedBase,
    UsageError,
)


logger = logging.getLogger(__name__)

DIGITS = string.digits + string.ascii_lowercase
WHITESPACE = string.whitespace


class Status(Enum):
    SUCCESS = "success"
    INVALID = "invalid"
    PARTIAL = "partial"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class ConversionResult:
    status: Status
    value: int | None
    text: str
    consumed: int = 0

    @property
    def rest(self) -> str:
        return self.text[self.consumed:]

    @property
    def ok(self) -> bool:
        return self.status is Status.SUCCESS


def validate_base(candidate: int) -> int:
    if candidate < MIN_BASE or candidate > MAX_BASE:
        raise UnsupportedBase(candidate)
    return candidate


def _digit_value(ch: str) -> int:
    index = DIGITS.find(ch.lower()) if ch.isascii() else -1
    return index if index >= 0 else MAX_BASE


def _skip_prefix(text: str, pos: int, base: int) -> tuple[int, int]:
    if base in (AUTO_BASE, 16):
        prefix = text[pos:pos + 2].lower()
        if prefix == "0x" and pos + 2 < len(text) and _digit_value(text[pos + 2]) < 16:
            return 16, pos + 2
    if base == AUTO_BASE:
        return (8 if text.startswith("0", pos) else 10), pos
    return base, pos


def parse(text: str | None, base: int = AUTO_BASE) -> ConversionResult:
    """Read an unsigned 64-bit numeral from ``text``.

    ``base`` is either AUTO_BASE (``0x`` means 16, a leading ``0`` means 8,
    anything else 10) or a base in [2, 36]. Leading whitespace and a single
    ``+`` are accepted. Digits are read up to the first character that is
    not a digit of the base; the result says whether the whole string was
    read, part of it, none of it, or whether the value does not fit.

    Raises UsageError for a missing or empty string and UnsupportedBase for
    a base that is neither AUTO_BASE nor in range.
    """
    if not text:
        raise UsageError("No number given.")
    if base != AUTO_BASE:
        validate_base(base)

    pos = len(text) - len(text.lstrip(WHITESPACE))
    if text.startswith("+", pos):
        pos += 1
    base, start = _skip_prefix(text, pos, base)
    logger.debug("parsing %r in base %d", text, base)

    end = start
    value = 0
    overflow = False
    while end < len(text):
        digit = _digit_value(text[end])
        if digit >= base:
            break
        # past 64 bits only the end position matters
        if not overflow:
            value = value * base + digit
            overflow = value > MAX_VALUE
        end += 1

    if end == start:
        return ConversionResult(Status.INVALID, None, text)
    if overflow:
        logger.debug("%r overflows 64 bits", text)
        return ConversionResult(Status.OVERFLOW, None, text, end)
    if end < len(text):
        logger.debug("%r has trailing text %r", text, text[end:])
        return ConversionResult(Status.PARTIAL, value, text, end)
    return ConversionResult(Status.SUCCESS, value, text, end)


def ensure_number(text: str | None, base: int = AUTO_BASE) -> int:
    result = parse(text, base)

    if result.status is Status.PARTIAL:
        raise PartialNumeral(text, base, result.value, result.rest)
    if result.status is Status.INVALID:
        raise InvalidNumeral(text, base)
    if result.status is Status.OVERFLOW:
        raise NumeralOverflow(text)
    return result.value


def parse_base(value: str) -> int:
    return validate_base(ensure_number(value, 10))


def format_binary(value: int, capacity: int = BUFFER_SIZE) -> str | None:
    """Binary digits of ``value``, or None when ``capacity`` slots can't hold
    them plus a terminator. Digits are filled from the end of the buffer.
    """
    if value < 0 or value > MAX_VALUE:
        raise ValueError(f"{value} is not an unsigned 64-bit value.")
    if capacity < 2:
        return None

    buf = [""] * capacity
    pos = capacity - 1
    while True:
        pos -= 1
        buf[pos] = "1" if value & 1 else "0"
        value >>= 1
        if not value:
            break
        if pos == 0:
            return None
    return "".join(buf[pos:capacity - 1])
