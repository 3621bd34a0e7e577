import re
from dataclasses import dataclass
from typing import Optional

from .core import INVALID_CHARS, MAX_POKEMON_ID
from .errors import ValidationError

# Optional sign followed by ASCII digits only; int() alone would also take "1_000" or "١٢"
_INTEGER_RE = re.compile(r'[+-]?[0-9]+')

EMPTY_MESSAGE = 'Please enter a Pokemon name or ID'
OUT_OF_RANGE_MESSAGE = f'Pokemon ID must be between 0 and {MAX_POKEMON_ID}'


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: str = ''
    code: Optional[str] = None
    character: Optional[str] = None

    def __bool__(self):
        return self.ok


def validate(text: str) -> ValidationResult:
    """Check search box text before it is sent to PokeAPI.
    Rules run in order and the first failure wins:
    - blank input
    - any character from INVALID_CHARS (reported in INVALID_CHARS order)
    - integers outside 0..MAX_POKEMON_ID
    Anything non-numeric that survives the first two rules is a name lookup.
    """
    s = (text or '').strip()
    if not s:
        return ValidationResult(False, EMPTY_MESSAGE, 'empty')
    for ch in INVALID_CHARS:
        if ch in s:
            return ValidationResult(False, f'Invalid character detected: {ch}', 'invalid_character', ch)
    if _INTEGER_RE.fullmatch(s):
        if not 0 <= int(s) <= MAX_POKEMON_ID:
            return ValidationResult(False, OUT_OF_RANGE_MESSAGE, 'out_of_range')
    return ValidationResult(True)


def ensure_valid(text: str) -> str:
    """Return the trimmed text, or raise ValidationError with the first failing rule."""
    result = validate(text)
    if not result.ok:
        raise ValidationError(result.reason, result.code, result.character)
    return text.strip()
