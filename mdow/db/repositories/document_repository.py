import logging
from datetime import datetime
from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mdow.db.models.document import MarkdownDocument as MarkdownDocumentModel
from mdow.domains.documents.entities import Document, as_utc

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Репозиторий опубликованных документов.

    Документы только добавляются и читаются. Истекшие записи остаются в таблице,
    их отсекает условие на expires_at при чтении.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(
        self,
        doc_id: str,
        content: str,
        created_at: datetime,
        expires_at: datetime
    ) -> Document:
        """Вставка нового документа"""
        db_document = MarkdownDocumentModel(
            id=doc_id,
            content=content,
            created_at=as_utc(created_at),
            expires_at=as_utc(expires_at)
        )

        self.session.add(db_document)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to save document {doc_id}: {e}")
            raise

        return self._to_domain(db_document)

    async def find_active(self, doc_id: str, now: datetime) -> Optional[Document]:
        """Документ по id, если он еще не истек к моменту now"""
        result = await self.session.execute(
            select(MarkdownDocumentModel).where(
                MarkdownDocumentModel.id == doc_id,
                MarkdownDocumentModel.expires_at > as_utc(now)
            )
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def get_recent(self, limit: int = 5) -> List[Document]:
        """Последние созданные документы, включая истекшие"""
        result = await self.session.execute(
            select(MarkdownDocumentModel)
            .order_by(MarkdownDocumentModel.created_at.desc())
            .limit(limit)
        )
        db_documents = result.scalars().all()
        return [self._to_domain(doc) for doc in db_documents]

    def _to_domain(self, db_document: MarkdownDocumentModel) -> Document:
        """Преобразование модели БД в доменную сущность"""
        return Document(
            id=db_document.id,
            content=db_document.content,
            created_at=db_document.created_at,
            expires_at=db_document.expires_at
        )
