"""Default what-if scenario presets - partial parameter bundles."""

DEFAULT_PRESETS = [
    {
        "id": "high-turnout",
        "name": "High Turnout Election",
        "description": "Presidential election year with above-average turnout",
        "parameters": {
            "turnout": {"overall_multiplier": 1.3},
            "timing": {"election_type": "general", "month_offset": 0, "competing_measures": 5},
        },
    },
    {
        "id": "low-turnout",
        "name": "Low Turnout Election",
        "description": "Off-year or special election with reduced turnout",
        "parameters": {
            "turnout": {"overall_multiplier": 0.6},
            "timing": {"election_type": "special", "month_offset": 0, "competing_measures": 1},
        },
    },
    {
        "id": "well-funded-support",
        "name": "Well-Funded Support Campaign",
        "description": "Support campaign with 2x funding",
        "parameters": {
            "funding": {"support_multiplier": 2.0, "opposition_multiplier": 1.0},
        },
    },
    {
        "id": "contested",
        "name": "Highly Contested",
        "description": "Both sides heavily funded with strong opposition",
        "parameters": {
            "funding": {"support_multiplier": 2.0, "opposition_multiplier": 2.5},
            "opposition": {"organization_level": "intense", "media_spend_ratio": 1.2, "endorsements": []},
        },
    },
    {
        "id": "simplified-framing",
        "name": "Simplified Ballot Language",
        "description": "Clearer, simpler ballot wording",
        "parameters": {
            "framing": {"title_sentiment": 0.2, "summary_complexity": "simpler"},
        },
    },
]
