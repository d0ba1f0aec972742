from __future__ import annotations
import copy
import logging
from typing import Any, List, MutableMapping, Sequence, Union

from valuestore_lib.errors import KeyNotFound, RawValueDetected
from .interfaces import ValueAccessor
from .path import Index, Key, PathLike, Segment, as_segments, format_path, parse_path

logger = logging.getLogger(__name__)

_SCALARS = (str, bytes, int, float, bool, type(None))


def is_container(value: Any) -> bool:
    return isinstance(value, (MutableMapping, list))


def _mapping_key(seg: Segment) -> str:
    # Mappings are keyed by strings; Index(0) addresses "0".
    return str(seg.key)


def _lookup(container: Any, seg: Segment) -> Any:
    """Return the value under `seg`, or None when it is absent."""
    if isinstance(container, MutableMapping):
        return container.get(_mapping_key(seg))
    if isinstance(container, list):
        if isinstance(seg, Index) and seg.position < len(container):
            return container[seg.position]
        return None
    return None


def _store(container: Any, seg: Segment, value: Any) -> None:
    if isinstance(container, MutableMapping):
        container[_mapping_key(seg)] = value
        return
    if not isinstance(container, list) or not isinstance(seg, Index):
        raise TypeError(f"Cannot assign {seg!s} on a {type(container).__name__}")
    pos = seg.position
    if pos >= len(container):
        container.extend([None] * (pos + 1 - len(container)))
    container[pos] = value


def deep_clone(value: Any) -> Any:
    """Return a structural copy of `value` sharing no mutable state with it.

    Mappings become plain dicts and lists are copied element by element.
    Scalars are returned as-is; any other object goes through `copy.deepcopy`.
    """
    if isinstance(value, MutableMapping):
        return {k: deep_clone(v) for k, v in value.items()}
    if isinstance(value, list):
        return [deep_clone(v) for v in value]
    if isinstance(value, _SCALARS):
        return value
    return copy.deepcopy(value)


class PathAccessor:
    """Navigate and mutate a nested dict/list tree using a parsed path.

    `set` infers the shape of each missing intermediate container from the
    segment that follows it: an `Index` needs a list, a `Key` needs a mapping.
    Paths may be given as strings or as already parsed segment sequences.
    """

    def get(self, value: Any, path: PathLike) -> Any:
        segments = as_segments(path)
        cur = value
        for i, seg in enumerate(segments):
            if cur is None:
                partial = format_path(segments[:i])
                raise KeyNotFound(
                    f"{partial} is not defined.",
                    path=format_path(segments),
                    partial=partial,
                )
            cur = _lookup(cur, seg)
        return cur

    def set(self, value: Any, path: PathLike, new: Any) -> None:
        segments = as_segments(path)
        if not segments:
            return
        cur = value
        # RawValueDetected can only fire before the first mutation: created
        # and downgraded containers hold no scalar under a non-numeric Key.
        for i, seg in enumerate(segments[:-1]):
            next_seg = segments[i + 1]
            should_be_list = isinstance(next_seg, Index)
            slot = _lookup(cur, seg)

            if slot is None:
                slot = [] if should_be_list else {}
                _store(cur, seg, slot)
            elif not is_container(slot):
                partial = format_path(segments[: i + 1])
                logger.warning("Refusing to overwrite raw value at %s", partial)
                raise RawValueDetected(
                    f"{partial} contains raw value, {next_seg} can't be assigned to it.",
                    path=format_path(segments),
                    partial=partial,
                )
            elif not should_be_list and isinstance(slot, list):
                # list -> mapping keeps the items under "0", "1", ...
                slot = {str(n): item for n, item in enumerate(slot)}
                _store(cur, seg, slot)
                logger.debug("Converted list at %s to mapping", format_path(segments[: i + 1]))
            # A mapping where a list is wanted is left alone so that
            # non-numeric keys are never dropped.
            cur = slot

        _store(cur, segments[-1], new)

    def delete(self, value: Any, path: PathLike, preserve_length: bool = False) -> Any:
        """Remove the value at `path` and return it.

        Unreachable paths are a no-op returning None. With `preserve_length`
        the slot is set to None instead: lists keep their length and mapping
        keys stay present.
        """
        segments = as_segments(path)
        if not segments:
            return None
        cur = value
        for seg in segments[:-1]:
            cur = _lookup(cur, seg)
            if not is_container(cur):
                return None

        last = segments[-1]
        if isinstance(cur, MutableMapping):
            k = _mapping_key(last)
            if k not in cur:
                return None
            if preserve_length:
                old = cur[k]
                cur[k] = None
                return old
            return cur.pop(k)

        if isinstance(cur, list):
            if not isinstance(last, Index) or last.position >= len(cur):
                return None
            if preserve_length:
                old = cur[last.position]
                cur[last.position] = None
                return old
            return cur.pop(last.position)

        return None


class AccessorView:
    """A proxy exposing chained indexing over a storage root.

    ``view['form']['items'][0]`` builds the path ``form.items[0]``; nothing
    is read until `get()` is called. String keys may themselves be dotted
    paths; ints become list indexes.
    """

    def __init__(self, accessor: ValueAccessor, root: Any, path: Sequence[Segment] = ()):
        self._accessor = accessor
        self._root = root
        self._path = tuple(path)

    @property
    def path(self) -> str:
        return format_path(self._path)

    def _full_path(self, key: Union[str, int]) -> List[Segment]:
        if isinstance(key, bool):
            raise TypeError("bool is not a valid storage key")
        if isinstance(key, int):
            extra: List[Segment] = [Index(key)]
        elif isinstance(key, Segment):
            extra = [key]
        else:
            extra = parse_path(key) or [Key(key)]
        return list(self._path) + extra

    def __getitem__(self, key: Union[str, int]) -> 'AccessorView':
        return AccessorView(self._accessor, self._root, self._full_path(key))

    def __setitem__(self, key: Union[str, int], value: Any) -> None:
        self._accessor.set(self._root, self._full_path(key), value)

    def __delitem__(self, key: Union[str, int]) -> None:
        self._accessor.delete(self._root, self._full_path(key))

    def get(self) -> Any:
        return self._accessor.get(self._root, self._path)

    def set(self, value: Any) -> None:
        self._accessor.set(self._root, self._path, value)

    def delete(self, preserve_length: bool = False) -> Any:
        return self._accessor.delete(self._root, self._path, preserve_length)

    def __repr__(self) -> str:  # pragma: no cover - convenience
        try:
            val = self.get()
        except KeyNotFound:
            val = '<unreadable>'
        return f"AccessorView(path={self.path!r}, value={val!r})"
