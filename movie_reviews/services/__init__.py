"""Services module."""
from .entity_store import EntityStore, PopulatedReview, parse_identifier
from .credential_store import CredentialStore
from .integrity import DeletionResult, ReferentialIntegrityManager

__all__ = [
    "EntityStore",
    "PopulatedReview",
    "parse_identifier",
    "CredentialStore",
    "DeletionResult",
    "ReferentialIntegrityManager",
]
