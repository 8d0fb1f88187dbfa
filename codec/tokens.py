"""Tagged token representation of encoded messages."""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence
import re

from codec.constants import DELIMITER, NUMBER_TAG, LITERAL_TAG, MAX_SUBSTITUTE
from codec.table import SubstitutionTable
from utils.exceptions import MalformedTokenError

# Token bodies exactly as Token.serialize() writes them
_NUMBER_BODY = re.compile(r'[0-9]{1,%d}' % len(str(MAX_SUBSTITUTE)))
_LITERAL_BODY = re.compile(r'[0-9a-f]{1,6}')


class TokenKind(IntEnum):
    """Kinds of tokens in an encoded message."""
    
    NUMBER = 0      # Substituted letter
    LITERAL = 1     # Character copied from the input


@dataclass(frozen=True)
class Token:
    """Single encoded unit: a substituted number or a literal character."""
    
    kind: TokenKind
    value: object
    
    def serialize(self) -> str:
        """
        Serialize the token to its tagged text form.
        
        Numbers become N<decimal>, literals become L<hex code point>, so the
        text never contains DELIMITER or bare digits from the input.
        """
        if self.kind == TokenKind.NUMBER:
            return f"{NUMBER_TAG}{self.value}"
        return f"{LITERAL_TAG}{ord(self.value):x}"
    
    @classmethod
    def parse(cls, text: str) -> 'Token':
        """
        Parse a token from its tagged text form.
        
        Raises:
            MalformedTokenError: If the tag is unknown or the body is invalid
        """
        tag, body = text[:1], text[1:]
        if tag == NUMBER_TAG and _NUMBER_BODY.fullmatch(body):
            return cls(TokenKind.NUMBER, int(body))
        if tag == LITERAL_TAG and _LITERAL_BODY.fullmatch(body):
            try:
                return cls(TokenKind.LITERAL, chr(int(body, 16)))
            except ValueError as e:
                raise MalformedTokenError(f"Invalid literal token {text!r}: {e}") from e
        raise MalformedTokenError(f"Invalid token {text!r}")


def tokenize(message: str, table: SubstitutionTable) -> List[Token]:
    """Split an uppercased message into number and literal tokens."""
    tokens: List[Token] = []
    for char in message.upper():
        number = table.number_for(char)
        if number is not None:
            tokens.append(Token(TokenKind.NUMBER, number))
        else:
            tokens.append(Token(TokenKind.LITERAL, char))
    return tokens


def detokenize(tokens: Sequence[Token], table: SubstitutionTable) -> str:
    """
    Rebuild a message from tokens.
    
    Raises:
        MalformedTokenError: If a number token is not in the table
    """
    chars: List[str] = []
    for token in tokens:
        if token.kind == TokenKind.LITERAL:
            chars.append(token.value)
            continue
        letter = table.letter_for(token.value)
        if letter is None:
            raise MalformedTokenError(
                f"Number {token.value} is not in the substitution table"
            )
        chars.append(letter)
    return ''.join(chars)


def encode_tagged(message: str, table: SubstitutionTable) -> str:
    """Encode a message in the tagged format ('' for an empty message)."""
    return DELIMITER.join(token.serialize() for token in tokenize(message, table))


def decode_tagged(encoded: str, table: SubstitutionTable) -> str:
    """
    Decode a tagged message.
    
    Raises:
        MalformedTokenError: On an invalid token or an unmapped number
    """
    if not encoded:
        return ''
    tokens = [Token.parse(part) for part in encoded.split(DELIMITER)]
    return detokenize(tokens, table)
