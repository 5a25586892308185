import html
import re
from typing import Optional

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

DEFAULT_TITLE = "mdow"

# CommonMark с таблицами, ~~зачеркиванием~~ и списками задач; сырой HTML пропускается как есть
_markdown = (
    MarkdownIt("commonmark", {"html": True})
    .enable(["table", "strikethrough"])
    .use(tasklists_plugin)
)

_TAG_RE = re.compile(r"<[^>]+>")


def convert_markdown_to_html(markdown_content: str) -> str:
    """Markdown -> HTML-фрагмент.

    Сырой HTML не фильтруется: пользовательский ввод сначала передается через clean().
    """
    html_output = _markdown.render(markdown_content or "")
    return add_syntax_highlighting_containers(html_output)


def add_syntax_highlighting_containers(html_content: str) -> str:
    """Оборачивание каждого <pre> в div.highlighter-rouge для стилей блоков кода.

    Простая замена строк: непарные теги не исправляются.
    """
    return (
        html_content
        .replace("<pre>", '<div class="highlighter-rouge"><pre>')
        .replace("</pre>", "</pre></div>")
    )


def extract_title_from_html(html_content: str) -> Optional[str]:
    """Текст первого <h1> или None, если заголовка нет"""
    start = html_content.find("<h1>")
    if start == -1:
        return None

    end = html_content.find("</h1>", start)
    if end == -1:
        return None

    title = html.unescape(_TAG_RE.sub("", html_content[start + len("<h1>"):end])).strip()
    return title or None
