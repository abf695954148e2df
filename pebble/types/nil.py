from __future__ import annotations


class NilType:
    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class EndOfInputType:
    """Sentinel produced by the reader once the token stream is exhausted."""

    def __repr__(self): return "EndOfInput"

    def __eq__(self, other):
        return isinstance(other, EndOfInputType)

    def __hash__(self):
        return hash(EndOfInputType)


Nil = NilType()
EndOfInput = EndOfInputType()
