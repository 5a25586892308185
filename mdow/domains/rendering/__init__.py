from mdow.domains.rendering.sanitizer import clean
from mdow.domains.rendering.markdown import (
    DEFAULT_TITLE, convert_markdown_to_html, add_syntax_highlighting_containers,
    extract_title_from_html
)
from mdow.domains.rendering.qr import generate_qr_svg

__all__ = [
    "clean",
    "DEFAULT_TITLE", "convert_markdown_to_html", "add_syntax_highlighting_containers",
    "extract_title_from_html",
    "generate_qr_svg",
]
