from __future__ import annotations

from typing import TYPE_CHECKING

from pebble import SExpression
from pebble.types.seq import List
from pebble.types.symbol import Symbol

if TYPE_CHECKING:
    from pebble.reader.parser import TokenStream


class ReaderMacros:
    """
    Registry of prefix reader macros.
    Maps a prefix token (like ' or ~@) to the symbol it wraps the next form in,
    so 'x reads as (quote x).
    """

    def __init__(self):
        self.macros: dict[str, Symbol] = {}

    def define(self, prefix: str, name: str) -> None:
        """Register a reader macro for a given prefix."""
        self.macros[prefix] = Symbol(name)

    def dispatch(self, prefix: str, stream: TokenStream) -> SExpression:
        """Read the form(s) following `prefix` and wrap them."""
        name = self.macros[prefix]
        # ^meta target reads two forms and swaps them: (with-meta target meta)
        if prefix == "^":
            meta = stream.read_required_form()
            target = stream.read_required_form()
            return List([name, target, meta])
        return List([name, stream.read_required_form()])


# -------------------------
# Single global instance
# -------------------------
reader_macros: ReaderMacros = ReaderMacros()

QUOTE_FORMS: dict[str, str] = {
    "'": "quote",
    "`": "quasiquote",
    "~": "unquote",
    "~@": "splice-unquote",
    "@": "deref",
    "^": "with-meta",
}

for _prefix, _name in QUOTE_FORMS.items():
    reader_macros.define(_prefix, _name)
