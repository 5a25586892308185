from sqlalchemy import Column, String, Text, DateTime

from mdow.core.db import Base


class MarkdownDocument(Base):
    __tablename__ = "markdown_documents"

    id = Column(String, primary_key=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
