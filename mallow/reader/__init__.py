from mallow.reader.parser import lex, tokenize, read_atom, read_str, TokenStream, Comment

__all__ = ["lex", "tokenize", "read_atom", "read_str", "TokenStream", "Comment"]
