"""Search clause evaluators.

Each clause takes (document, request) and returns True when the document
passes it. A clause whose request field is None (or an empty list) is skipped
and always passes, so callers only constrain the dimensions they care about.
"""

from docstore.crud.models import Document, SearchRequest


def match_title_prefixes(document: Document, request: SearchRequest) -> bool:
    """Title starts with any of the requested prefixes (case-sensitive)."""
    if not request.title_prefixes:
        return True
    title = document.title
    return title is not None and any(title.startswith(p) for p in request.title_prefixes)


def match_contents(document: Document, request: SearchRequest) -> bool:
    """Content contains any of the requested substrings."""
    if not request.contains_contents:
        return True
    content = document.content
    return content is not None and any(c in content for c in request.contains_contents)


def match_author_ids(document: Document, request: SearchRequest) -> bool:
    """Author id is one of the requested ids. Missing author or author id never matches."""
    if not request.author_ids:
        return True
    author = document.author
    if author is None or author.id is None:
        return False
    return author.id in request.author_ids


def match_created_from(document: Document, request: SearchRequest) -> bool:
    """Created strictly after created_from."""
    if request.created_from is None:
        return True
    return document.created is not None and document.created > request.created_from


def match_created_to(document: Document, request: SearchRequest) -> bool:
    """Created strictly before created_to."""
    if request.created_to is None:
        return True
    return document.created is not None and document.created < request.created_to


CLAUSES = (
    match_title_prefixes,
    match_contents,
    match_author_ids,
    match_created_from,
    match_created_to,
)
