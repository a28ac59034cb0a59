import re

from models import Outcome

# "Risk Summary" ... "High" ... a count between 1 and 99
HIGH_RISK_PATTERN = re.compile(r"Risk Summary[\s\S]*High[^0-9]*([1-9]|[1-9][0-9])", re.IGNORECASE)


def has_high_risk(text: str) -> bool:
    return HIGH_RISK_PATTERN.search(text or "") is not None


def decide(text: str, strict: bool) -> Outcome:
    """Non-strict runs never block; strict runs block on a High-risk count."""
    if strict and has_high_risk(text):
        return Outcome.BLOCKED
    return Outcome.ALLOWED
