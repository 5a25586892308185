from pathlib import Path

from fastapi import Request, status
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_not_found(request: Request, heading: str = "404 - Page Not Found"):
    """Страница 404 для отсутствующих путей и истекших документов"""
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"title": "404", "heading": heading},
        status_code=status.HTTP_404_NOT_FOUND
    )
