from .config import AUTO_BASE, BUFFER_SIZE, MAX_BASE, MAX_VALUE, MIN_BASE, NumInfo
from .convert import (
    ConversionResult,
    Status,
    ensure_number,
    format_binary,
    parse,
    parse_base,
    validate_base,
)
from .errors import (
    InvalidNumeral,
    NumeralOverflow,
    PartialNumeral,
    RepnumError,
    UnsupportedBase,
    UsageError,
)

__version__ = "1.0"
