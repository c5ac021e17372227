"""Text helpers shared by the source adapters and the publisher."""

import html
import re
from typing import Optional

IMG_SRC_PATTERN = re.compile(r"""<img[^>]+src=["']([^"']+)["']""")


def clean_text(text: Optional[str]) -> Optional[str]:
    """Clean text by stripping HTML, fixing escapes, and collapsing whitespace."""
    if not text:
        return None
    # Strip HTML tags (keep text content)
    text = re.sub(r"<[^>]+>", " ", text)
    text = html.unescape(text)
    # Remove escaped quotes
    text = text.replace('\\"', '"')
    # Collapse whitespace
    text = re.sub(r"\s+", " ", text).strip()
    return text if text else None


def truncate(text: Optional[str], limit: int) -> str:
    if not text:
        return ""
    return text[:limit]


def extract_image_from_html(content: Optional[str]) -> Optional[str]:
    """Return the first <img src> URL in an HTML fragment."""
    if not content:
        return None
    match = IMG_SRC_PATTERN.search(content)
    return match.group(1) if match else None


def word_count(text: Optional[str]) -> int:
    if not text:
        return 0
    return len(text.split())
