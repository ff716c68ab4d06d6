"""Frontmatter header model and the parse/serialize pair.

A document is either::

    ---
    <YAML mapping>
    ---
    <body>

or plain body text with no block at all. :func:`parse_document` splits the
two and decodes the mapping into a :class:`Header`; :func:`render_document`
is the inverse. Serialization is canonical: ``id``, ``aliases``, ``tags``
first (``None`` fields omitted), then every other key in source order,
sequences indented two spaces under their key.
"""

from __future__ import annotations

import re
from io import StringIO
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError
from ruamel.yaml.resolver import VersionedResolver

FRONTMATTER_DELIMITER = "---"

# Emission order of the typed fields.
KNOWN_FIELDS: tuple[str, ...] = ("id", "aliases", "tags")

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class FrontmatterError(ValueError):
    """Base class for frontmatter parse failures."""


class NoFrontmatterError(FrontmatterError):
    """The document does not begin with a delimited frontmatter block."""


class MalformedFrontmatterError(FrontmatterError):
    """The block exists but is not a YAML mapping of the expected shape."""


# ---------------------------------------------------------------------------
# YAML parser (round-trip keeps quoting and flow style of untouched values)
# ---------------------------------------------------------------------------


_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _TextDateResolver(VersionedResolver):
    """Resolver that leaves date-shaped scalars as plain strings.

    ``id: 2024-01-05`` stays the string it was written as, and an impossible
    date such as ``2024-02-30`` is just text instead of a constructor error.
    """

    def add_version_implicit_resolver(
        self, version: Any, tag: Any, regexp: Any, first: Any
    ) -> None:
        if tag == _TIMESTAMP_TAG:
            return
        super().add_version_implicit_resolver(version, tag, regexp, first)


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML instance.

    ruamel.yaml's YAML object is stateful, so each load/dump gets its own.
    """
    y = YAML()
    y.Resolver = _TextDateResolver
    y.preserve_quotes = True
    y.default_flow_style = False
    y.width = 4096
    y.indent(mapping=2, sequence=4, offset=2)
    return y


# ---------------------------------------------------------------------------
# Header model
# ---------------------------------------------------------------------------


class Header(BaseModel):
    """Parsed frontmatter.

    ``None`` means the key is absent from the block; it is never written
    back as a YAML null. ``other`` keeps every unrecognised key, in source
    order, with the values exactly as the round-trip loader produced them.
    """

    model_config = {"extra": "forbid"}

    id: str | None = None
    aliases: list[str] | None = None
    tags: list[str] | None = None
    other: dict[str, Any] = Field(default_factory=dict)


def _describe_validation(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


# Lines end at "\n" only; other Unicode line breaks are ordinary characters.
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+\Z")


def _is_delimiter(line: str) -> bool:
    return line.rstrip(" \t\r\n") == FRONTMATTER_DELIMITER


def split_document(content: str) -> tuple[str, str]:
    """Split *content* into ``(yaml_block, body)``.

    The body is everything after the closing delimiter line, untouched.

    Raises:
        NoFrontmatterError: If the first line is not a delimiter or the
            block is never closed.
    """
    lines = _LINE_RE.findall(content)
    if not lines or not _is_delimiter(lines[0]):
        raise NoFrontmatterError("document does not start with a frontmatter delimiter")

    for idx in range(1, len(lines)):
        if _is_delimiter(lines[idx]):
            return "".join(lines[1:idx]), "".join(lines[idx + 1 :])

    raise NoFrontmatterError("frontmatter block has no closing delimiter")


def parse_document(content: str) -> tuple[Header, str]:
    """Parse *content* into a :class:`Header` and the body text.

    Raises:
        NoFrontmatterError: If there is no frontmatter block.
        MalformedFrontmatterError: If the block is not valid YAML, is not a
            mapping, or ``id``/``aliases``/``tags`` have the wrong shape.
    """
    block, body = split_document(content)

    try:
        data = _new_yaml().load(block)
    except (YAMLError, ValueError) as exc:
        msg = f"invalid YAML in frontmatter: {exc}"
        raise MalformedFrontmatterError(msg) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"frontmatter must be a mapping, got {type(data).__name__}"
        raise MalformedFrontmatterError(msg)

    fields: dict[str, Any] = {key: data[key] for key in KNOWN_FIELDS if key in data}
    fields["other"] = {key: value for key, value in data.items() if key not in KNOWN_FIELDS}

    try:
        header = Header.model_validate(fields)
    except ValidationError as exc:
        msg = f"unexpected frontmatter field shape: {_describe_validation(exc)}"
        raise MalformedFrontmatterError(msg) from exc

    return header, body


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def serialize_header(header: Header) -> str:
    """Render *header* as the YAML text that goes between the delimiters.

    An empty header renders as an empty string; anything else ends with
    exactly one newline.
    """
    data = CommentedMap()
    for key in KNOWN_FIELDS:
        value = getattr(header, key)
        if value is not None:
            data[key] = value
    for key, value in header.other.items():
        data[key] = value

    if not data:
        return ""

    buf = StringIO()
    _new_yaml().dump(data, buf)
    return buf.getvalue().rstrip("\n") + "\n"


def render_document(header: Header, body: str) -> str:
    """Fence the serialized *header* with delimiters and append *body*."""
    delim = FRONTMATTER_DELIMITER + "\n"
    return f"{delim}{serialize_header(header)}{delim}{body}"
