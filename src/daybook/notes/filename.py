"""Note file-name grammar.

A note's file name carries its metadata::

    20231019T204900==sig--monday-19-september-2023__journal_work.org
    |  identifier  |sig| |         title          | | keywords | ext

Each segment is introduced by a fixed delimiter (``@@`` identifier, ``==``
signature, ``--`` title, ``__`` keywords, keywords joined by ``_``). The
identifier carries no delimiter when it is the first component. The order of
segments is configurable; the extension always trails.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime

from daybook.core.exceptions import ConfigurationError

IDENTIFIER_FORMAT = "%Y%m%dT%H%M%S"
IDENTIFIER_PATTERN = r"\d{8}T\d{6}"

COMPONENTS = ("identifier", "signature", "title", "keywords", "extension")
# journal lookup needs both to build its pattern
REQUIRED_COMPONENTS = ("identifier", "keywords")

DELIMITERS = {
    "identifier": "@@",
    "signature": "==",
    "title": "--",
    "keywords": "__",
}
KEYWORD_SEPARATOR = "_"

# file type -> extension
FILE_TYPES = {
    "org": ".org",
    "markdown-yaml": ".md",
    "markdown-toml": ".md",
    "text": ".txt",
}
NOTE_EXTENSIONS = frozenset(FILE_TYPES.values())

_IDENTIFIER_RE = re.compile(rf"(?:^|@@)({IDENTIFIER_PATTERN})")
_SEGMENT_SPLIT_RE = re.compile(r"(@@|==|--|__)")
# the extension is the last suffix; titles may contain dots
_STEM_EXT_RE = re.compile(r"^(?P<stem>.*?)(?P<ext>\.[^.]*)?$", re.DOTALL)
_DELIMITER_TO_COMPONENT = {v: k for k, v in DELIMITERS.items()}


def sluggify_title(title: str) -> str:
    """Lowercase, hyphen-separated form of a title."""
    return re.sub(r"[\W_]+", "-", title.lower()).strip("-")


def sluggify_keyword(keyword: str) -> str:
    """Lowercase keyword with everything but letters and digits removed."""
    return re.sub(r"[\W_]+", "", keyword.lower())


def sluggify_signature(signature: str) -> str:
    return re.sub(r"[\W_]+", "=", signature.lower()).strip("=")


def format_identifier(moment: datetime) -> str:
    return moment.strftime(IDENTIFIER_FORMAT)


def parse_identifier(identifier: str) -> datetime:
    """Turn ``YYYYMMDDTHHMMSS`` back into a datetime.

    Raises:
        ValueError: If the text is not a valid identifier.
    """
    if not re.fullmatch(IDENTIFIER_PATTERN, identifier):
        raise ValueError(f"Not a note identifier: {identifier!r}")
    return datetime.strptime(identifier, IDENTIFIER_FORMAT)


def has_identifier(name: str) -> bool:
    return _IDENTIFIER_RE.search(name) is not None


def is_note_filename(name: str) -> bool:
    """True if ``name`` has an identifier and a note extension.

    Only the bare name is inspected; the file need not exist.
    """
    if not isinstance(name, str) or not name:
        return False
    ext = _STEM_EXT_RE.match(name).group("ext") or ""
    return has_identifier(name) and ext.lower() in NOTE_EXTENSIONS


@dataclass(frozen=True)
class ComponentOrder:
    """Order in which file-name segments are written.

    ``extension`` may be listed for completeness but is always written last.
    """

    components: tuple[str, ...] = ("identifier", "signature", "title", "keywords")

    def __post_init__(self):
        unknown = [c for c in self.components if c not in COMPONENTS]
        if unknown:
            raise ConfigurationError(f"Unknown file name components: {unknown}")
        if len(set(self.components)) != len(self.components):
            raise ConfigurationError(f"Duplicate file name components: {list(self.components)}")
        missing = [c for c in REQUIRED_COMPONENTS if c not in self.components]
        if missing:
            raise ConfigurationError(f"Missing file name components: {missing}")

    @classmethod
    def from_names(cls, names) -> ComponentOrder:
        return cls(tuple(names))

    @property
    def segments(self) -> tuple[str, ...]:
        """Components that are written before the extension, in order."""
        return tuple(c for c in self.components if c != "extension")

    def position(self, component: str) -> int | None:
        try:
            return self.segments.index(component)
        except ValueError:
            return None

    def identifier_precedes_keywords(self) -> bool:
        """Whether the identifier is written before the keywords."""
        return self.position("identifier") < self.position("keywords")


DEFAULT_ORDER = ComponentOrder()


@dataclass(frozen=True)
class NoteFileName:
    """Structured view of a note file name."""

    identifier: str
    title: str = ""
    keywords: tuple[str, ...] = field(default_factory=tuple)
    signature: str = ""
    extension: str = ".org"

    def _segment(self, component: str, first: bool) -> str:
        if component == "identifier":
            if not self.identifier:
                return ""
            return self.identifier if first else DELIMITERS["identifier"] + self.identifier
        if component == "keywords":
            if not self.keywords:
                return ""
            return DELIMITERS["keywords"] + KEYWORD_SEPARATOR.join(self.keywords)
        value = getattr(self, component)
        return DELIMITERS[component] + value if value else ""

    def format(self, order: ComponentOrder = DEFAULT_ORDER) -> str:
        """Render the file name following ``order``."""
        segments = order.segments
        parts = [self._segment(c, first=(i == 0)) for i, c in enumerate(segments)]
        return "".join(parts) + self.extension

    @classmethod
    def parse(cls, name: str) -> NoteFileName:
        """Read the segments back out of a file name, whatever their order.

        Raises:
            ValueError: If the name carries no identifier.
        """
        match = _STEM_EXT_RE.match(name)
        stem, ext = match.group("stem"), match.group("ext") or ""

        values: dict[str, str] = {}
        tokens = _SEGMENT_SPLIT_RE.split(stem)
        if tokens[0]:
            values["identifier"] = tokens[0]
        for delimiter, value in zip(tokens[1::2], tokens[2::2]):
            component = _DELIMITER_TO_COMPONENT[delimiter]
            values.setdefault(component, value)

        identifier = values.get("identifier", "")
        if not re.fullmatch(IDENTIFIER_PATTERN, identifier):
            raise ValueError(f"No identifier in file name: {name!r}")

        keywords = tuple(k for k in values.get("keywords", "").split(KEYWORD_SEPARATOR) if k)
        return cls(
            identifier=identifier,
            title=values.get("title", ""),
            keywords=keywords,
            signature=values.get("signature", ""),
            extension=ext,
        )
