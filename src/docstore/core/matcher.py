"""Search predicates: evaluate a document against a SearchRequest"""

from __future__ import annotations

from docstore.core.models import Document, SearchRequest


def title_matches(document: Document, prefixes: list[str] | None) -> bool:
    """True if no prefixes are given, or the title starts with any of them."""
    if not prefixes:
        return True
    title = document.title
    return title is not None and any(title.startswith(p) for p in prefixes)


def content_matches(document: Document, needles: list[str] | None) -> bool:
    """True if no substrings are given, or the content contains any of them literally."""
    if not needles:
        return True
    content = document.content
    return content is not None and any(n in content for n in needles)


def author_matches(document: Document, author_ids: list[str] | None) -> bool:
    """True if no author ids are given, or the document's author id is one of them."""
    if not author_ids:
        return True
    author = document.author
    return author is not None and any(a == author.id for a in author_ids)


def created_in_range(document: Document, created_from=None, created_to=None) -> bool:
    """Inclusive range check on document.created.

    document.created must be set whenever a bound is given; documents saved
    through a repo always satisfy this.
    """
    return (
        (created_from is None or document.created >= created_from)
        and (created_to is None or document.created <= created_to)
    )


def matches(document: Document, request: SearchRequest | None) -> bool:
    """AND of the title, content, author and created-range criteria. None matches all."""
    if request is None:
        return True
    return (
        title_matches(document, request.title_prefixes)
        and content_matches(document, request.contains_contents)
        and author_matches(document, request.author_ids)
        and created_in_range(document, request.created_from, request.created_to)
    )
