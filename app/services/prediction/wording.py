"""Ballot label analysis - readability, sentiment and key phrases."""

import re

from app.models.proposition import BallotAnalysis, Complexity
from helpers import formulas

POSITIVE_WORDS = (
    "protect", "improve", "benefit", "support", "help", "ensure",
    "provide", "fund", "create", "invest", "strengthen", "safe",
    "clean", "affordable", "fair", "equal", "right", "freedom",
)
NEGATIVE_WORDS = (
    "tax", "fee", "cost", "burden", "restrict", "limit", "ban",
    "eliminate", "reduce", "cut", "penalty", "fine", "mandate",
    "require", "force", "risk", "danger", "threat",
)
NEUTRAL_WORDS = (
    "amend", "change", "modify", "establish", "authorize", "allow",
    "permit", "regulate", "determine", "define",
)

KEY_PHRASE_PATTERNS = (
    re.compile(r"authoriz\w* \$?[\d,.]+ (?:billion|million)", re.IGNORECASE),
    re.compile(r"\d+(?:\.\d+)?%"),
    re.compile(r"constitutional amendment", re.IGNORECASE),
    re.compile(r"bond (?:measure|act)", re.IGNORECASE),
    re.compile(r"tax (?:increase|decrease|on)", re.IGNORECASE),
)

SIMPLE_THRESHOLD = 60
COMPLEX_THRESHOLD = 40


def analyze_sentiment(text: str) -> float:
    """Word-list sentiment in [-1, 1]; 0 when no signal words appear."""
    positive = negative = neutral = 0
    for word in text.lower().split():
        positive += any(w in word for w in POSITIVE_WORDS)
        negative += any(w in word for w in NEGATIVE_WORDS)
        neutral += any(w in word for w in NEUTRAL_WORDS)

    total = positive + negative + neutral
    return (positive - negative) / total if total else 0.0


def complexity_for(readability: float) -> Complexity:
    if readability >= SIMPLE_THRESHOLD:
        return Complexity.SIMPLE
    if readability < COMPLEX_THRESHOLD:
        return Complexity.COMPLEX
    return Complexity.MODERATE


def extract_key_phrases(text: str, limit: int = 10) -> list[str]:
    """Money amounts, percentages and typical ballot-measure phrases, de-duplicated."""
    seen: dict[str, None] = {}
    for pattern in KEY_PHRASE_PATTERNS:
        for match in pattern.findall(text):
            seen.setdefault(match.strip(), None)
    return list(seen)[:limit]


def analyze_ballot_wording(
    title: str,
    summary: str,
    full_text: str | None = None,
    proposition_id: str = "",
) -> BallotAnalysis:
    """Readability of the measure text and sentiment of its label."""
    text = full_text or summary
    readability = formulas.flesch_reading_ease(text)

    return BallotAnalysis(
        proposition_id=proposition_id,
        word_count=len(text.split()),
        readability_score=round(readability),
        sentiment_score=round(analyze_sentiment(f"{title} {summary}"), 2),
        complexity=complexity_for(readability),
        key_phrases=extract_key_phrases(text),
    )


def neutral_analysis(proposition_id: str = "") -> BallotAnalysis:
    """Placeholder analysis for framing overrides when no text was analyzed."""
    return BallotAnalysis(
        proposition_id=proposition_id,
        word_count=0,
        readability_score=50,
        sentiment_score=0.0,
        complexity=Complexity.MODERATE,
        synthetic=True,
    )
