from herotrumps.services.sample_roster import SAMPLE_RECORDS, get_sample_roster
from herotrumps.services.session_registry import SessionNotFoundError, SessionRegistry
from herotrumps.services.superhero_client import FeedError, fetch_characters

__all__ = [
    "FeedError",
    "SAMPLE_RECORDS",
    "SessionNotFoundError",
    "SessionRegistry",
    "fetch_characters",
    "get_sample_roster",
]
