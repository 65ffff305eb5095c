from dataclasses import dataclass


PROG_NAME = "repnum"
PROG_VERSION = 1.0

BUFFER_SIZE = 1024

AUTO_BASE = 0
MIN_BASE = 2
MAX_BASE = 36

MAX_VALUE = 2**64 - 1


@dataclass(frozen=True)
class NumInfo:
    num: int
    base: int = AUTO_BASE
    text: str = ""
