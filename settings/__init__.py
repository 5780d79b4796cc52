"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("CAPROP_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("CAPROP_LOG_LEVEL", "INFO")
LOG_RETENTION = os.getenv("CAPROP_LOG_RETENTION", "7 days")

# Historical propositions API
API_BASE_URL = os.getenv("CAPROP_API_BASE_URL", "https://propositions.example.org/api")
API_TIMEOUT = int(os.getenv("CAPROP_API_TIMEOUT", "60"))
MAX_CONCURRENT = 20

# Historical pool
HISTORY_LOOKBACK_YEARS = 10
HISTORY_MAX_YEARS = 4

# Similarity
SIMILAR_LIMIT = 5
SIMILAR_MIN_SCORE = 0.2

# District projection
DISTRICT_WORKERS = int(os.getenv("CAPROP_DISTRICT_WORKERS", "1"))
