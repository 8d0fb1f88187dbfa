"""Codec module for substitution tables and message encoding."""

from codec.constants import (
    ALPHABET,
    MIN_SUBSTITUTE,
    MAX_SUBSTITUTE,
    DELIMITER,
    MAX_DRAW_ATTEMPTS,
)
from codec.table import SubstitutionTable, generate_substitution_table
from codec.encoding import encode_message, decode_message
from codec.tokens import (
    TokenKind,
    Token,
    tokenize,
    detokenize,
    encode_tagged,
    decode_tagged,
)

__all__ = [
    'ALPHABET',
    'MIN_SUBSTITUTE',
    'MAX_SUBSTITUTE',
    'DELIMITER',
    'MAX_DRAW_ATTEMPTS',
    'SubstitutionTable',
    'generate_substitution_table',
    'encode_message',
    'decode_message',
    'TokenKind',
    'Token',
    'tokenize',
    'detokenize',
    'encode_tagged',
    'decode_tagged',
]
