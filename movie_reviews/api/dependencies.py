"""Request-scoped providers for stores and auth services."""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.auth import Authenticator
from ..database import get_db
from ..services.credential_store import CredentialStore
from ..services.entity_store import EntityStore
from ..services.integrity import ReferentialIntegrityManager


def get_authenticator(request: Request) -> Authenticator:
    return request.app.state.authenticator


def get_credential_store(db: AsyncSession = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_entity_store(db: AsyncSession = Depends(get_db)) -> EntityStore:
    return EntityStore(db)


def get_integrity_manager(
    store: EntityStore = Depends(get_entity_store)
) -> ReferentialIntegrityManager:
    return ReferentialIntegrityManager(store)
