"""
Password policy applied to new passwords at the request boundary.

Rules are evaluated in order and every result is reported, so a caller sees
all the problems with a candidate password in a single response.
"""
from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..core.exceptions import InvalidRequestError

MIN_PASSWORD_LENGTH = 8


@dataclass(frozen=True)
class RuleResult:
    name: str
    passed: bool
    message: str


# (name, predicate, message) in evaluation order
PASSWORD_RULES: Tuple[Tuple[str, Callable[[str], bool], str], ...] = (
    (
        "min_length",
        lambda value: len(value) >= MIN_PASSWORD_LENGTH,
        f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
    ),
    (
        "has_digit",
        lambda value: any("0" <= ch <= "9" for ch in value),
        "Password must contain at least one digit (0-9)",
    ),
    (
        "has_uppercase",
        lambda value: any("A" <= ch <= "Z" for ch in value),
        "Password must contain at least one upper-case letter (A-Z)",
    ),
)


class PasswordPolicyError(InvalidRequestError):
    """A new password failed one or more policy rules."""

    def __init__(self, results: List[RuleResult]):
        self.results = results
        self.violations = [r.message for r in results if not r.passed]
        super().__init__(
            "New password does not meet the password policy",
            {
                "field": "new_password",
                "violations": self.violations,
                "rules": [{"name": r.name, "passed": r.passed} for r in results],
            },
        )


def evaluate(value: str) -> List[RuleResult]:
    """Return one result per rule, in rule order."""
    return [RuleResult(name, predicate(value), message) for name, predicate, message in PASSWORD_RULES]


def validate_new_password(value: str) -> str:
    """Return ``value`` unchanged or raise ``PasswordPolicyError`` listing every violation."""
    results = evaluate(value or "")
    if not all(r.passed for r in results):
        raise PasswordPolicyError(results)
    return value
