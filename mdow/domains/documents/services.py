import logging
from datetime import datetime
from typing import Optional, List

from sqlalchemy.ext.asyncio import AsyncSession

from mdow.core.config import Settings
from mdow.db.repositories.document_repository import DocumentRepository
from mdow.domains.documents.entities import Document, utcnow
from mdow.domains.documents.schemas import RenderedDocument, DocumentSummary
from mdow.domains.rendering import (
    DEFAULT_TITLE, clean, convert_markdown_to_html, extract_title_from_html
)

logger = logging.getLogger(__name__)


def render_markdown(raw_content: str) -> str:
    """Очистка и преобразование markdown в HTML (для предпросмотра)"""
    return convert_markdown_to_html(clean(raw_content))


class DocumentService:
    """Сервис публикации и просмотра документов"""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.settings = settings
        self.document_repository = DocumentRepository(session)

    async def share_document(self, raw_content: str) -> Document:
        """Публикация документа: очистка, новый id и срок жизни, сохранение"""
        document = Document.create_document(content=clean(raw_content))

        saved = await self.document_repository.save(
            document.id,
            document.content,
            document.created_at,
            document.expires_at
        )
        logger.info(f"Shared document {saved.id}, expires at {saved.expires_at.isoformat()}")
        return saved

    async def get_active_document(self, doc_id: str, now: Optional[datetime] = None) -> Optional[Document]:
        """Получение документа, если он не истек"""
        document = await self.document_repository.find_active(doc_id, now or utcnow())
        if document is None:
            logger.info(f"Document {doc_id} not found or expired")
        return document

    def render_document(self, document: Document) -> RenderedDocument:
        """HTML и метаданные документа для страницы просмотра"""
        html_output = convert_markdown_to_html(document.content)

        return RenderedDocument(
            id=document.id,
            content=document.content,
            html=html_output,
            title=extract_title_from_html(html_output) or DEFAULT_TITLE,
            created_at=document.created_at,
            expires_at=document.expires_at,
            share_url=self.share_url(document.id)
        )

    def share_url(self, doc_id: str) -> str:
        return f"{self.settings.public_base_url.rstrip('/')}/view/{doc_id}"

    async def get_recent_documents(self, limit: int = 5) -> List[DocumentSummary]:
        """Последние документы для отладочной страницы"""
        now = utcnow()
        documents = await self.document_repository.get_recent(limit)
        return [
            DocumentSummary(
                id=doc.id,
                content=doc.content,
                created_at=doc.created_at,
                expires_at=doc.expires_at,
                is_active=doc.is_active(now)
            )
            for doc in documents
        ]
