"""Ballot measure API client package."""

from ballot_client.base import BaseClient, safe_request, set_api_config
from ballot_client.propositions import PropositionClient

__all__ = [
    # Base
    "BaseClient",
    "safe_request",
    "set_api_config",
    # Clients
    "PropositionClient",
]
