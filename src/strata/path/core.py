from typing import Any, Hashable, Iterable, Iterator, Tuple, Union

WILDCARD = "*"

Segment = Hashable


class GetterPath:
    __slots__ = ("_segments",)

    def __init__(self, segments: Iterable[Segment] = ()):
        # Internal storage of the ordered segments, root first
        self._segments: Tuple[Segment, ...] = tuple(segments)

    @classmethod
    def parse(cls, dotted: str) -> "GetterPath":
        return cls(s for s in dotted.split(".") if s)

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self._segments

    @property
    def name(self) -> Segment:
        if not self._segments:
            raise ValueError("The root path has no name.")
        return self._segments[-1]

    @property
    def parent(self) -> "GetterPath":
        return GetterPath(self._segments[:-1])

    def count(self, segment: Segment) -> int:
        return self._segments.count(segment)

    def __getattr__(self, name: str) -> "GetterPath":
        # Keep dunder/private lookups (copy, pickle, ...) out of the path
        if name.startswith("_"):
            raise AttributeError(name)
        return GetterPath(self._segments + (name,))

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __str__(self) -> str:
        return ".".join(str(s) for s in self._segments)

    def __repr__(self) -> str:
        return f"<P: '{self}'>" if self._segments else "<P: (root)>"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, GetterPath):
            return self._segments == other._segments
        return str(other) == str(self)

    def __hash__(self) -> int:
        # Consistent with equality against the dotted string
        return hash(str(self))

    def _join(self, other: Union[Segment, "GetterPath"]) -> "GetterPath":
        if isinstance(other, GetterPath):
            return GetterPath(self._segments + other._segments)
        if isinstance(other, str):
            suffix = other.strip(".")
            if not suffix:
                return self
            return GetterPath(self._segments + tuple(suffix.split(".")))
        return GetterPath(self._segments + (other,))

    def __add__(self, other: Any) -> "GetterPath":
        return self._join(other)

    def __truediv__(self, other: Union[Segment, "GetterPath"]) -> "GetterPath":
        return self._join(other)

    def __getitem__(self, key: Segment) -> "GetterPath":
        # Subscripts are taken verbatim: P.chats["a.b"] is a single segment
        return GetterPath(self._segments + (key,))


# The root path. P.counter.value -> "counter.value"
P = GetterPath()
