from fastapi import APIRouter, Form, Query, Request
from fastapi.responses import HTMLResponse

from mdow.core.templates import templates
from mdow.domains.documents.services import render_markdown

router = APIRouter(tags=["editor"])


@router.get("/", response_class=HTMLResponse)
async def editor_page(request: Request, content: str = Query("")):
    """Страница редактора; ?content= подставляется в поле ввода"""
    return templates.TemplateResponse(request, "editor.html", {"content": content})


@router.post("/preview", response_class=HTMLResponse)
async def preview(request: Request, content: str = Form("")):
    """Фрагмент предпросмотра: исходный текст в скрытом поле и HTML"""
    return templates.TemplateResponse(
        request,
        "preview.html",
        {"content": content, "html": render_markdown(content)}
    )


@router.post("/edit", response_class=HTMLResponse)
async def edit(request: Request, content: str = Form("")):
    """Возврат из предпросмотра в поле ввода"""
    return templates.TemplateResponse(request, "edit.html", {"content": content})
