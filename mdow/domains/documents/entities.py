import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

# Срок жизни опубликованного документа
DOCUMENT_EXPIRY_DAYS = 30
# Длина короткого идентификатора в ссылке
DOCUMENT_ID_LENGTH = 7


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Приведение времени к UTC; наивное время считается уже UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def generate_short_id() -> str:
    """Короткий случайный идентификатор документа.

    Уникальность не проверяется: при коллизии вставка упадет на первичном ключе.
    """
    return str(uuid.uuid4())[:DOCUMENT_ID_LENGTH]


class Document:
    """Сущность опубликованного markdown-документа"""

    def __init__(
        self,
        id: str,
        content: str,
        created_at: datetime,
        expires_at: Optional[datetime] = None
    ):
        self.id = id
        self.content = content
        self.created_at = as_utc(created_at)
        self.expires_at = as_utc(expires_at) if expires_at else self.created_at + timedelta(days=DOCUMENT_EXPIRY_DAYS)

    def is_active(self, now: Optional[datetime] = None) -> bool:
        """Документ доступен, пока текущее время строго меньше expires_at"""
        now = as_utc(now) if now else utcnow()
        return now < self.expires_at

    @classmethod
    def create_document(cls, content: str, now: Optional[datetime] = None) -> "Document":
        """Создание нового документа со сроком жизни DOCUMENT_EXPIRY_DAYS"""
        created_at = as_utc(now) if now else utcnow()
        return cls(
            id=generate_short_id(),
            content=content,
            created_at=created_at,
            expires_at=created_at + timedelta(days=DOCUMENT_EXPIRY_DAYS)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Document(id={self.id}, created_at={self.created_at}, expires_at={self.expires_at})"
