class RepnumError(ValueError):
    pass


class UsageError(RepnumError):
    pass


class InvalidNumeral(RepnumError):
    def __init__(self, text: str, base: int = 0):
        self.text = text
        self.base = base
        message = f"{text} is not a valid number."
        if base:
            message += f" Base {base} is required."
        super().__init__(message)


class PartialNumeral(InvalidNumeral):
    """A numeral prefix was read but text remains; the partial value is kept."""

    def __init__(self, text: str, base: int, value: int, rest: str):
        super().__init__(text, base)
        self.value = value
        self.rest = rest


class NumeralOverflow(RepnumError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"{text} is a too large number.")


class UnsupportedBase(RepnumError):
    def __init__(self, base: int):
        self.base = base
        super().__init__(f"Unsupported base: {base}")
