# validation.py

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from data import (
    MOVIES,
    MIN_REALISTIC_AGE,
    MAX_REALISTIC_AGE,
    MIN_AGE_EXCLUSIVE,
    ENTRY_AGE_EXCLUSIVE,
)
from messages import get_message

_LEADING_INT = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Whitespace and line terminators as a JS String.prototype.trim sees them.
_INPUT_WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim_input(text: str) -> str:
    """Strip surrounding whitespace, including a BOM but not control characters."""
    return text.strip(_INPUT_WHITESPACE)


def parse_leading_int(text: str) -> Optional[int]:
    """
    Parse the integer at the start of ``text``, ignoring whatever follows.

    "12abc" -> 12, "1.9" -> 1, "-3" -> -3, "abc" -> None.
    No whitespace skipping: callers trim first.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(0))


class ValidationCategory(Enum):
    EMPTY = "empty"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    POLICY_REJECTED = "policy_rejected"


class AgeStatus(Enum):
    EMPTY = "empty"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_REALISTIC_RANGE = "out_of_realistic_range"
    TOO_YOUNG = "too_young"
    BORDERLINE_REJECTED = "borderline_rejected"
    ACCEPTED = "accepted"


class ChoiceStatus(Enum):
    EMPTY = "empty"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_CATALOG_RANGE = "out_of_catalog_range"
    ACCEPTED = "accepted"


_AGE_CATEGORIES = {
    AgeStatus.EMPTY: ValidationCategory.EMPTY,
    AgeStatus.NOT_A_NUMBER: ValidationCategory.NOT_A_NUMBER,
    AgeStatus.OUT_OF_REALISTIC_RANGE: ValidationCategory.OUT_OF_RANGE,
    AgeStatus.TOO_YOUNG: ValidationCategory.POLICY_REJECTED,
    AgeStatus.BORDERLINE_REJECTED: ValidationCategory.POLICY_REJECTED,
}

_AGE_MESSAGE_KEYS = {
    AgeStatus.EMPTY: "age_empty",
    AgeStatus.NOT_A_NUMBER: "age_not_a_number",
    AgeStatus.OUT_OF_REALISTIC_RANGE: "age_out_of_range",
    AgeStatus.TOO_YOUNG: "age_too_young",
    AgeStatus.BORDERLINE_REJECTED: "age_borderline",
}

_CHOICE_CATEGORIES = {
    ChoiceStatus.EMPTY: ValidationCategory.EMPTY,
    ChoiceStatus.NOT_A_NUMBER: ValidationCategory.NOT_A_NUMBER,
    ChoiceStatus.OUT_OF_CATALOG_RANGE: ValidationCategory.OUT_OF_RANGE,
}

_CHOICE_MESSAGE_KEYS = {
    ChoiceStatus.EMPTY: "choice_empty",
    ChoiceStatus.NOT_A_NUMBER: "choice_not_a_number",
    ChoiceStatus.OUT_OF_CATALOG_RANGE: "choice_out_of_range",
}


@dataclass(frozen=True)
class AgeValidationResult:
    status: AgeStatus
    age: Optional[int] = None
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.status is AgeStatus.ACCEPTED

    @property
    def category(self) -> Optional[ValidationCategory]:
        return _AGE_CATEGORIES.get(self.status)


@dataclass(frozen=True)
class ChoiceValidationResult:
    status: ChoiceStatus
    number: Optional[int] = None
    movie: Optional[str] = None
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.status is ChoiceStatus.ACCEPTED

    @property
    def category(self) -> Optional[ValidationCategory]:
        return _CHOICE_CATEGORIES.get(self.status)


def _age_result(status: AgeStatus, age: Optional[int] = None) -> AgeValidationResult:
    key = _AGE_MESSAGE_KEYS.get(status)
    message = get_message(key) if key else ""
    return AgeValidationResult(status=status, age=age, message=message)


def evaluate_age(raw_text: str) -> AgeValidationResult:
    """Turn the raw age field into an age-gate decision."""
    trimmed = trim_input(raw_text)
    if not trimmed:
        return _age_result(AgeStatus.EMPTY)

    age = parse_leading_int(trimmed)
    if age is None:
        return _age_result(AgeStatus.NOT_A_NUMBER)

    if age < MIN_REALISTIC_AGE or age > MAX_REALISTIC_AGE:
        return _age_result(AgeStatus.OUT_OF_REALISTIC_RANGE, age)
    if age <= MIN_AGE_EXCLUSIVE:
        return _age_result(AgeStatus.TOO_YOUNG, age)
    if age > ENTRY_AGE_EXCLUSIVE:
        return _age_result(AgeStatus.ACCEPTED, age)

    # 19-21
    return _age_result(AgeStatus.BORDERLINE_REJECTED, age)


def evaluate_choice(
    raw_text: str, catalog: Sequence[str] = MOVIES
) -> ChoiceValidationResult:
    """
    Turn the raw choice field into a catalog pick.

    The user types 1..len(catalog); the accepted result carries the title.
    """
    size = len(catalog)

    def rejected(status: ChoiceStatus, number: Optional[int] = None) -> ChoiceValidationResult:
        message = get_message(_CHOICE_MESSAGE_KEYS[status], size=size)
        return ChoiceValidationResult(status=status, number=number, message=message)

    trimmed = trim_input(raw_text)
    if not trimmed:
        return rejected(ChoiceStatus.EMPTY)

    number = parse_leading_int(trimmed)
    if number is None:
        return rejected(ChoiceStatus.NOT_A_NUMBER)

    if number < 1 or number > size:
        return rejected(ChoiceStatus.OUT_OF_CATALOG_RANGE, number)

    return ChoiceValidationResult(
        status=ChoiceStatus.ACCEPTED,
        number=number,
        movie=catalog[number - 1],
    )
