# apps/clients/domain/phones.py
import re
from typing import Iterable, List, Optional, Tuple

PHONE_PATTERN = re.compile(r'^\+?[\d\s\-()]{10,}$')


def is_valid_phone_number(value: str) -> bool:
    return bool(PHONE_PATTERN.match(value))


def merge_phone_numbers(phone_numbers: Optional[Iterable[str]], legacy_phone: Optional[str] = None) -> List[str]:
    """
    Scala listę numerów ze starym polem `phone`.
    Stary numer idzie na początek (o ile go jeszcze nie ma), puste wpisy wypadają.
    """
    merged = []
    for number in phone_numbers or ():
        number = (number or '').strip()
        if number and number not in merged:
            merged.append(number)

    legacy_phone = (legacy_phone or '').strip()
    if legacy_phone and legacy_phone not in merged:
        merged.insert(0, legacy_phone)

    return merged


def clamp_primary_index(index, count: int) -> int:
    try:
        index = int(index)
    except (TypeError, ValueError):
        index = 0
    return min(max(0, index), max(0, count - 1))


def apply_legacy_phone(phone_numbers: List[str], legacy_phone: str) -> Tuple[List[str], int]:
    """Aktualizacja starym polem `phone`: istniejący numer staje się główny, nowy trafia na początek."""
    legacy_phone = legacy_phone.strip()
    if legacy_phone in phone_numbers:
        return list(phone_numbers), phone_numbers.index(legacy_phone)
    return [legacy_phone] + list(phone_numbers), 0
