"""Tag transforms — pure document-in, document-out edits.

Every function takes the full document text and returns document text.
When nothing changes, the *same* string object is handed back, so callers
can compare against the input to decide whether a file needs writing.

Documents without a frontmatter block are left alone by every transform
except :func:`add_tags`, which creates a block. A malformed block raises
:class:`~fme.domain.frontmatter.MalformedFrontmatterError` from all of them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from fme.domain.frontmatter import (
    Header,
    NoFrontmatterError,
    parse_document,
    render_document,
)


def _append_novel(current: list[str], tags: Iterable[str]) -> bool:
    """Append each tag of *tags* missing from *current*. Returns True if any was."""
    added = False
    for tag in tags:
        if tag not in current:
            current.append(tag)
            added = True
    return added


def add_tags(content: str, tags: Iterable[str]) -> str:
    """Append *tags* not already present, keeping existing order.

    Without a frontmatter block, a new one is created with an empty
    ``id``/``aliases`` scaffold in front of the whole document.

    Examples:
        >>> add_tags("---\\ntags:\\n  - a\\n---\\nbody", ["b"])
        '---\\ntags:\\n  - a\\n  - b\\n---\\nbody'
    """
    try:
        header, body = parse_document(content)
    except NoFrontmatterError:
        novel: list[str] = []
        if not _append_novel(novel, tags):
            return content
        return render_document(Header(id="", aliases=[], tags=novel), content)

    current = list(header.tags or [])
    if not _append_novel(current, tags):
        return content

    header.tags = current
    return render_document(header, body)


def remove_tags(content: str, tags: Iterable[str]) -> str:
    """Drop every tag listed in *tags*; an emptied list removes the field."""
    try:
        header, body = parse_document(content)
    except NoFrontmatterError:
        return content

    if header.tags is None:
        return content

    unwanted = set(tags)
    kept = [t for t in header.tags if t not in unwanted]
    if len(kept) == len(header.tags):
        return content

    header.tags = kept or None
    return render_document(header, body)


def replace_tags(content: str, from_tag: str, to_tag: str) -> str:
    """Replace tags matching *from_tag* with *to_tag*.

    A tag matches when it is a substring of *from_tag* (``"a"`` matches
    ``"abc"``, not the other way round). *to_tag* is appended once, only if
    something was removed.
    """
    try:
        header, body = parse_document(content)
    except NoFrontmatterError:
        return content

    if header.tags is None:
        return content

    kept = [t for t in header.tags if t not in from_tag]
    if len(kept) == len(header.tags):
        return content

    if to_tag not in kept:
        kept.append(to_tag)
    header.tags = kept
    return render_document(header, body)


def clear_tags(content: str) -> str:
    """Remove the tags field entirely."""
    try:
        header, body = parse_document(content)
    except NoFrontmatterError:
        return content

    if header.tags is None:
        return content

    header.tags = None
    return render_document(header, body)


def remove_blank_aliases(content: str) -> str:
    """Remove ``aliases`` when it is present and an empty list."""
    try:
        header, body = parse_document(content)
    except NoFrontmatterError:
        return content

    if header.aliases is None or header.aliases:
        return content

    header.aliases = None
    return render_document(header, body)


def remove_id(content: str) -> str:
    """Remove the ``id`` field, including an empty one."""
    try:
        header, body = parse_document(content)
    except NoFrontmatterError:
        return content

    if header.id is None:
        return content

    header.id = None
    return render_document(header, body)


# Operation name -> transform. Extra parameters are passed as keywords.
TRANSFORMS: dict[str, Callable[..., str]] = {
    "add": add_tags,
    "remove": remove_tags,
    "replace": replace_tags,
    "clear": clear_tags,
    "remove_aliases": remove_blank_aliases,
    "remove_id": remove_id,
}
