from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///data/database.db"
    database_pool_size: int = 5
    # Секунды ожидания блокировки SQLite перед ошибкой записи
    database_busy_timeout: float = 30.0
    database_echo: bool = False

    host: str = "0.0.0.0"
    port: int = 8081

    # Адрес, на который указывает QR-код страницы документа
    public_base_url: str = "https://mdow.yree.io"

    debug_routes: bool = False
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
