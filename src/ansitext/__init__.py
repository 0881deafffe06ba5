from .converter import convert, ansi_to_document
from .document import Document, Line, Run
from .errors import AnsiConversionError, DecodeError, ParseError
from .sgr import StylePatch, resolve_sgr

__all__ = [
    "convert",
    "ansi_to_document",
    "Document",
    "Line",
    "Run",
    "AnsiConversionError",
    "DecodeError",
    "ParseError",
    "StylePatch",
    "resolve_sgr",
]
__version__ = "0.1.0"
