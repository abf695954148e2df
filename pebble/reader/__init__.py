from pebble.reader.parser import lex, TokenStream, read_str

__all__ = ["lex", "TokenStream", "read_str"]
