from mdow.domains.documents.entities import (
    Document, DOCUMENT_EXPIRY_DAYS, DOCUMENT_ID_LENGTH, generate_short_id
)
from mdow.domains.documents.schemas import RenderedDocument, DocumentSummary

__all__ = [
    "Document", "DOCUMENT_EXPIRY_DAYS", "DOCUMENT_ID_LENGTH", "generate_short_id",
    "RenderedDocument", "DocumentSummary",
]
