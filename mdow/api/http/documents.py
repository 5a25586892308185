from fastapi import APIRouter, Depends, Form, Request, Response
from fastapi.responses import HTMLResponse

from mdow.api.http.dependencies import get_document_service
from mdow.core.templates import templates, render_not_found
from mdow.domains.documents.services import DocumentService
from mdow.domains.rendering import generate_qr_svg

router = APIRouter(tags=["documents"])


@router.post("/share")
async def share_document(
    content: str = Form(""),
    document_service: DocumentService = Depends(get_document_service)
):
    """Публикация документа и перенаправление htmx на страницу просмотра"""
    document = await document_service.share_document(content)
    return Response(content="", headers={"HX-Redirect": f"/view/{document.id}"})


@router.get("/view/{document_id}", response_class=HTMLResponse)
async def view_document(
    request: Request,
    document_id: str,
    document_service: DocumentService = Depends(get_document_service)
):
    """Страница опубликованного документа"""
    document = await document_service.get_active_document(document_id)

    if not document:
        return render_not_found(request, "Document not found or expired")

    rendered = document_service.render_document(document)
    return templates.TemplateResponse(
        request,
        "viewer.html",
        {
            "title": rendered.title,
            "document": rendered,
            "qr_svg": generate_qr_svg(rendered.share_url)
        }
    )
