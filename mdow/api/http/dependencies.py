from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from mdow.core.config import Settings
from mdow.core.db import get_db
from mdow.domains.documents.services import DocumentService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_document_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> DocumentService:
    return DocumentService(db, settings)
