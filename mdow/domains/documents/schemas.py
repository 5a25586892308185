from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RenderedDocument(BaseModel):
    """Данные опубликованного документа для страницы просмотра"""
    id: str
    content: str
    html: str
    title: str
    created_at: datetime
    expires_at: datetime
    share_url: str

    model_config = ConfigDict(frozen=True)


class DocumentSummary(BaseModel):
    """Краткие сведения о документе для отладочного списка"""
    id: str
    content: str
    created_at: datetime
    expires_at: datetime
    is_active: bool
