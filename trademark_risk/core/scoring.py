"""
Risk Classifier - Reduce a name's filings to a traffic-light score

Order-independent: only set membership over the records matters.
"""
from typing import Iterable

from .domain import DetailRecord, Score

# Nice classes that turn a live filing into a red flag
RED_CLASSES = frozenset({"009", "028", "041"})

EXPLANATIONS: dict[str, str] = {
    "Green": "No live trademark registrations were found for this name.",
    "Red": "At least one live filing lists classes 009, 028 or 041.",
    "Yellow": "Live filings exist, but none contain 009, 028 or 041.",
}


def classify(records: Iterable[DetailRecord]) -> tuple[Score, str]:
    """Return (score, explanation); records carrying an error are ignored"""
    live = [r for r in records if r.is_live]

    score: Score
    if not live:
        score = "Green"
    elif any(RED_CLASSES.intersection(r.classes) for r in live):
        score = "Red"
    else:
        score = "Yellow"
    return score, EXPLANATIONS[score]
