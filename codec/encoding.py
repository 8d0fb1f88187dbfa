"""Delimited message encoding and decoding functions.

Encoded messages are tokens joined by DELIMITER. A token is either the
decimal form of a substituted letter or a literal character copied from
the input. The delimiter is not escaped, so inputs containing DELIMITER
or digits do not always survive a round trip; use codec.tokens for an
unambiguous format.
"""

from typing import List, Optional
import re

from codec.constants import DELIMITER, MAX_SUBSTITUTE
from codec.table import SubstitutionTable
from utils.logging import get_logger
from utils.exceptions import MalformedTokenError

logger = get_logger(__name__)

# Lenient integer token: optional surrounding whitespace and sign
_INTEGER_TOKEN = re.compile(r'\s*([+-]?)0*([0-9]+)\s*')

# Longer significant digit strings cannot be a table number
_MAX_DIGITS = len(str(MAX_SUBSTITUTE))


def is_numeric_token(token: str) -> bool:
    return _INTEGER_TOKEN.fullmatch(token) is not None


def parse_number(token: str) -> Optional[int]:
    """
    Return the integer value of a token.
    
    Returns None if the token is not numeric, or has more significant
    digits than any table number.
    """
    match = _INTEGER_TOKEN.fullmatch(token)
    if match is None:
        return None
    sign, digits = match.groups()
    if len(digits) > _MAX_DIGITS:
        return None
    return int(sign + digits)


def encode_message(message: str, table: SubstitutionTable) -> str:
    """
    Encode a message with a substitution table.
    
    The message is uppercased; letters present in the table become their
    number, every other character is kept as-is.
    
    Args:
        message: Plaintext message
        table: Substitution table
        
    Returns:
        DELIMITER-joined encoded message ('' for an empty message)
    """
    tokens: List[str] = []
    for char in message.upper():
        number = table.number_for(char)
        tokens.append(str(number) if number is not None else char)
    return DELIMITER.join(tokens)


def decode_message(encoded: str, table: SubstitutionTable, strict: bool = False) -> str:
    """
    Decode a DELIMITER-joined message with the table used to encode it.
    
    Numeric tokens found in the inverse table become their letter. Other
    tokens are emitted unchanged. Letters come back uppercase.
    
    Args:
        encoded: Encoded message
        table: Substitution table used for encoding
        strict: Reject numeric tokens missing from the table instead of
                passing them through
        
    Returns:
        Decoded message
        
    Raises:
        MalformedTokenError: In strict mode, for an unmapped numeric token
    """
    if not encoded:
        return ''
    
    decoded: List[str] = []
    for position, token in enumerate(encoded.split(DELIMITER)):
        number = parse_number(token)
        letter = table.letter_for(number) if number is not None else None
        if letter is not None:
            decoded.append(letter)
            continue
        if is_numeric_token(token):
            if strict:
                raise MalformedTokenError(
                    f"Token {token!r} at position {position} is not in the substitution table"
                )
            logger.debug(f"Passing through unmapped numeric token {token!r}")
        decoded.append(token)
    return ''.join(decoded)
