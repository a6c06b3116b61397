"""Pure helpers deriving a note's title and excerpt from its content."""

from jotter.config import settings

ELLIPSIS = "..."


def derive_title(
    content: str | None,
    max_length: int = settings.title_max_length,
    untitled: str = settings.untitled_title,
) -> str:
    """Derive a title from the first line of the content.

    Args:
        content: Raw note content
        max_length: Maximum number of characters kept from the first line
        untitled: Value returned when the content has no usable first line

    Returns:
        The trimmed first line, truncated with an ellipsis marker if it is too long
    """
    if not content or not content.strip():
        return untitled

    first_line = content.strip().split("\n", 1)[0]
    if not first_line.strip():
        return untitled

    if len(first_line) > max_length:
        first_line = first_line[:max_length] + ELLIPSIS

    return first_line.strip()


def derive_excerpt(content: str | None, max_length: int = settings.excerpt_max_length) -> str:
    """Derive a short excerpt from the trimmed content."""
    if not content:
        return ""

    clean_content = content.strip()
    if len(clean_content) <= max_length:
        return clean_content

    return clean_content[:max_length] + ELLIPSIS
