"""Path parsing for dotted/bracketed storage keys.

A path like ``"form.values[0].name"`` is split into typed segments:
``[Key('form'), Key('values'), Index(0), Key('name')]``. Dotted segments made
only of digits are indexes too, so ``"values.0.name"`` parses the same way.

The parser is tolerant: substrings that match neither form (stray brackets,
empty segments between dots) are skipped rather than rejected.
"""
from __future__ import annotations
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

_TOKEN_RE = re.compile(r"([^\[.\]]+)|\[([0-9]+)\]", re.ASCII)
_DIGITS_RE = re.compile(r"[0-9]+", re.ASCII)


@dataclass(frozen=True)
class Segment(ABC):
    @property
    @abstractmethod
    def key(self) -> Union[str, int]: ...


@dataclass(frozen=True)
class Key(Segment):
    """Addresses an entry of a mapping."""
    name: str

    @property
    def key(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Index(Segment):
    """Addresses a position in a list."""
    position: int

    @property
    def key(self) -> int:
        return self.position

    def __str__(self) -> str:
        return f"[{self.position}]"


PathLike = Union[str, Sequence[Segment]]


def parse_path(path: str) -> List[Segment]:
    """Parse `path` into a list of `Key`/`Index` segments.

    Examples:
        "a.b[0].c"    -> [Key a, Key b, Index 0, Key c]
        "0.name"      -> [Index 0, Key name]
        "report.2025" -> [Key report, Index 2025]
    """
    parts: List[Segment] = []
    for m in _TOKEN_RE.finditer(path):
        dot_seg, bracket_index = m.group(1), m.group(2)
        if bracket_index is not None:
            parts.append(Index(int(bracket_index)))
        elif _DIGITS_RE.fullmatch(dot_seg):
            # "01" is an index as well
            parts.append(Index(int(dot_seg)))
        else:
            parts.append(Key(dot_seg))
    return parts


def as_segments(path: PathLike) -> List[Segment]:
    """Accept either a path string or an already parsed segment sequence."""
    if isinstance(path, str):
        return parse_path(path)
    return list(path)


def format_path(segments: Iterable[Segment]) -> str:
    """Render segments back into a readable path, used in error messages."""
    out = ""
    for seg in segments:
        if isinstance(seg, Index):
            out += str(seg)
        else:
            out += ("." if out else "") + str(seg)
    return out
