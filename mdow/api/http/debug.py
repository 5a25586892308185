from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from mdow.api.http.dependencies import get_document_service
from mdow.core.templates import templates
from mdow.domains.documents.services import DocumentService

router = APIRouter(tags=["debug"])


@router.get("/debug", response_class=HTMLResponse)
async def recent_documents(
    request: Request,
    document_service: DocumentService = Depends(get_document_service)
):
    """Последние пять документов, включая истекшие"""
    documents = await document_service.get_recent_documents(limit=5)
    return templates.TemplateResponse(request, "debug.html", {"documents": documents})
