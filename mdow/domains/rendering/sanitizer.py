import nh3


def clean(content: str) -> str:
    """Удаление опасной разметки (script, обработчики событий и т.п.) из ввода пользователя"""
    return nh3.clean(content or "")
