import datetime

import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]


def render_markdown(content: str) -> str:
    """Render a post body to HTML."""
    return markdown.markdown(content, extensions=MARKDOWN_EXTENSIONS)


def format_date(value: datetime.date) -> str:
    # "January 1, 2024"; %-d is not portable, so the day is formatted by hand
    return f"{value:%B} {value.day}, {value.year}"
