"""Substitution table definition and random table generation."""

from types import MappingProxyType
from typing import Dict, Mapping, Optional
import json
import random

from codec.constants import (
    ALPHABET,
    MIN_SUBSTITUTE,
    MAX_SUBSTITUTE,
    MAX_DRAW_ATTEMPTS,
)
from utils.logging import get_logger
from utils.exceptions import InvalidTableError, TableGenerationError

logger = get_logger(__name__)

# Process-wide random source used when the caller does not supply one
_system_random = random.SystemRandom()


class SubstitutionTable:
    """
    Immutable injective mapping from uppercase letters to small integers.
    
    Tables built by generate_substitution_table() cover the whole alphabet.
    Partial tables are accepted so that callers can encode with a subset of
    letters; letters missing from the table pass through the codec unchanged.
    """
    
    __slots__ = ('_forward', '_inverse')
    
    def __init__(self, mapping: Mapping[str, int]):
        """
        Build a table from a letter -> number mapping.
        
        Args:
            mapping: Letters A-Z mapped to distinct integers in
                     [MIN_SUBSTITUTE, MAX_SUBSTITUTE]
        
        Raises:
            InvalidTableError: If a key or value is out of range, or
                               two letters share a number
        """
        forward: Dict[str, int] = {}
        inverse: Dict[int, str] = {}
        
        for letter, number in mapping.items():
            if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
                raise InvalidTableError(f"Table key must be a letter A-Z, got: {letter!r}")
            # bool is an int subclass; True would silently become 1
            if isinstance(number, bool) or not isinstance(number, int):
                raise InvalidTableError(
                    f"Table value for {letter} must be an integer, got: {number!r}"
                )
            if number < MIN_SUBSTITUTE or number > MAX_SUBSTITUTE:
                raise InvalidTableError(
                    f"Table value for {letter} must be between "
                    f"{MIN_SUBSTITUTE} and {MAX_SUBSTITUTE}, got: {number}"
                )
            if number in inverse:
                raise InvalidTableError(
                    f"Letters {inverse[number]} and {letter} share the number {number}"
                )
            forward[letter] = number
            inverse[number] = letter
        
        self._forward = MappingProxyType(forward)
        self._inverse = MappingProxyType(inverse)
    
    @property
    def forward(self) -> Mapping[str, int]:
        """Read-only letter -> number view."""
        return self._forward
    
    @property
    def inverse(self) -> Mapping[int, str]:
        """Read-only number -> letter view."""
        return self._inverse
    
    @property
    def is_complete(self) -> bool:
        """True when every letter of the alphabet has a number."""
        return len(self._forward) == len(ALPHABET)
    
    def number_for(self, letter: str) -> Optional[int]:
        return self._forward.get(letter)
    
    def letter_for(self, number: int) -> Optional[str]:
        return self._inverse.get(number)
    
    def to_dict(self) -> Dict[str, int]:
        return dict(self._forward)
    
    def to_json(self) -> str:
        """Serialize to a compact JSON object, e.g. {"A":5,"B":12}."""
        return json.dumps(self.to_dict(), separators=(',', ':'))
    
    @classmethod
    def from_json(cls, text: str) -> 'SubstitutionTable':
        """
        Parse a table from its JSON form.
        
        Raises:
            InvalidTableError: If the text is not a JSON object or the
                               mapping breaks the table invariants
        """
        try:
            data = json.loads(text)
        except ValueError as e:
            raise InvalidTableError(f"Table is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise InvalidTableError(
                f"Table JSON must be an object, got: {type(data).__name__}"
            )
        return cls(data)
    
    def __len__(self) -> int:
        return len(self._forward)
    
    def __contains__(self, letter: object) -> bool:
        return letter in self._forward
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubstitutionTable):
            return NotImplemented
        return dict(self._forward) == dict(other._forward)
    
    def __hash__(self) -> int:
        return hash(frozenset(self._forward.items()))
    
    def __repr__(self) -> str:
        return f"SubstitutionTable({dict(self._forward)!r})"


def generate_substitution_table(rng: Optional[random.Random] = None) -> SubstitutionTable:
    """
    Generate a random complete substitution table.
    
    Letters are assigned in alphabet order; each draws uniformly from
    [MIN_SUBSTITUTE, MAX_SUBSTITUTE] and redraws while the candidate is
    already taken.
    
    Args:
        rng: Random source exposing randint(); defaults to a process-wide
             SystemRandom instance
    
    Returns:
        Complete SubstitutionTable
    
    Raises:
        TableGenerationError: If a letter finds no unused number within
                              MAX_DRAW_ATTEMPTS draws
    """
    source = rng if rng is not None else _system_random
    used = set()
    mapping: Dict[str, int] = {}
    
    for letter in ALPHABET:
        for attempt in range(1, MAX_DRAW_ATTEMPTS + 1):
            candidate = source.randint(MIN_SUBSTITUTE, MAX_SUBSTITUTE)
            if candidate not in used:
                break
        else:
            raise TableGenerationError(
                f"No unused number found for {letter} after {MAX_DRAW_ATTEMPTS} draws"
            )
        if attempt > 1:
            logger.debug(f"Letter {letter} needed {attempt} draws")
        used.add(candidate)
        mapping[letter] = candidate
    
    return SubstitutionTable(mapping)
