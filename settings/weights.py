"""Default factor weights. Bump the version whenever a weight changes."""

WEIGHTS_VERSION = "2024.1"

FACTOR_WEIGHTS = {
    "campaign_finance": 0.25,
    "demographics": 0.20,
    "ballot_wording": 0.15,
    "timing": 0.10,
    "opposition": 0.10,
    "historical_similarity": 0.20,
}
