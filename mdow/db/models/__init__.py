from mdow.db.models.document import MarkdownDocument

__all__ = [
    "MarkdownDocument",
]
