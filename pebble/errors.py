class PebbleError(Exception):
    """ Base class for all Pebble errors"""
    pass

class PebbleUnboundSymbol(PebbleError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""
    pass

class PebbleNotCallable(PebbleError):
    """ Raised when the head of a call form does not evaluate to a callable"""

class PebbleArityError(PebbleError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class PebbleTypeError(PebbleError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class PebbleArithmeticOverflow(PebbleTypeError):
    """ Raised when an integer result does not fit in 64 bits"""

class PebbleDivideByZero(PebbleError):
    """ Raised when dividing by zero"""

class PebbleBindingArityError(PebbleError):
    """ Raised when a let* binding list does not hold symbol/value pairs"""

class PebbleMalformedParams(PebbleError):
    """ Raised when a fn* parameter list is malformed"""

class PebbleSyntaxError(PebbleError):
    """ Raised when there is a syntax error"""


class PebbleParseError(PebbleSyntaxError):
    """Raised by the reader, carrying the location and the expected token kinds."""

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        found: str | None = None,
        expected: frozenset[str] = frozenset(),
    ):
        self.message = message
        self.line = line
        self.column = column
        self.found = found
        self.expected = expected
        super().__init__(self.format())

    @property
    def at_end_of_input(self) -> bool:
        return self.found is None

    def format(self) -> str:
        found = "end of input" if self.found is None else repr(self.found)
        lines = [f"Error at {self.line}:{self.column}: {self.message}"]
        if self.expected:
            lines.append(f"Expected one of: {', '.join(sorted(self.expected))}")
        lines.append(f"Found: {found}")
        if self.at_end_of_input:
            lines.append("unbalanced or unexpected end of input")
        return "\n".join(lines)
