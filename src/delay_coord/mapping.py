# src/delay_coord/mapping.py
import operator
from typing import Iterator, List, Optional, Sequence

from .geometry import CoordinateGeometry


class MappedView:
    """
    Read-through window over source[start : start + window_size].

    Elements are reached through the geometry's index law; nothing is copied.
    The view holds a reference to the source, so the source must not be
    mutated while the view is in use.
    """

    __slots__ = ("source", "start", "geometry")

    def __init__(self, source: Sequence, start: int, geometry: CoordinateGeometry):
        start = operator.index(start)
        if start < 0 or start + geometry.window_size > len(source):
            raise ValueError(f"Window [{start}, {start + geometry.window_size}) does not fit "
                             f"in a source of length {len(source)}.")
        self.source = source
        self.start = start
        self.geometry = geometry

    @property
    def window_size(self) -> int:
        return self.geometry.window_size

    def _offset(self, index: int) -> Optional[int]:
        off = self.geometry.map_coord(index)
        if off is None or off < 0 or off >= self.window_size:
            return None
        pos = self.start + off
        if pos >= len(self.source):
            return None
        return pos

    def get(self, index: int):
        """Element at logical `index`, or None if the index is out of range."""
        pos = self._offset(operator.index(index))
        if pos is None:
            return None
        return self.source[pos]

    def __getitem__(self, index: int):
        pos = self._offset(operator.index(index))
        if pos is None:
            raise IndexError(f"logical index {index} out of range for dimension {self.geometry.dimension}")
        return self.source[pos]

    def __len__(self) -> int:
        return self.geometry.dimension

    def __iter__(self) -> "ViewIterator":
        return ViewIterator(self)

    def to_list(self) -> List:
        """The embedded point: `dimension` elements, newest first for forward geometries."""
        return list(self)

    def to_flat_list(self) -> List:
        """
        Concatenate the items of each (compound) element in logical order.
        For samples of c components the result has dimension * c values.
        """
        out = []
        for i, el in enumerate(self):
            if isinstance(el, (str, bytes)) or not hasattr(el, "__iter__"):
                raise TypeError(f"element {i} is a scalar ({type(el).__name__}); use to_list()")
            out.extend(el)
        return out

    def __repr__(self) -> str:
        return f"MappedView(start={self.start}, geometry={self.geometry!r})"


class ViewIterator:
    """Yields a view's logical elements in increasing index order; not restartable."""

    __slots__ = ("view", "index")

    def __init__(self, view: MappedView):
        self.view = view
        self.index = 0

    def __iter__(self) -> "ViewIterator":
        return self

    def __next__(self):
        if self.index >= len(self.view):
            raise StopIteration
        pos = self.view._offset(self.index)
        if pos is None:
            # Stay exhausted after an out-of-range mapping
            self.index = len(self.view)
            raise StopIteration
        self.index += 1
        return self.view.source[pos]


class MappingIterator:
    """
    Slides a window of `geometry.window_size` samples over `source`, one
    sample per step, yielding a MappedView per valid start offset.

    For N samples this yields max(0, N - window_size + 1) views (N views for a
    zero-size window). Once exhausted it stays exhausted; build a new one from
    the source to start over.
    """

    def __init__(self, geometry: CoordinateGeometry, source: Sequence):
        self.geometry = geometry
        self.source = source
        self.position = 0

    def remaining(self) -> int:
        return len(self.source) - self.position

    def __iter__(self) -> "MappingIterator":
        return self

    def __next__(self) -> MappedView:
        n_left = self.remaining()
        if n_left <= 0 or n_left < self.geometry.window_size:
            self.position = len(self.source)
            raise StopIteration
        view = MappedView(self.source, self.position, self.geometry)
        self.position += 1
        return view

    def __length_hint__(self) -> int:
        n_left = self.remaining()
        if n_left <= 0:
            return 0
        return max(0, n_left - max(self.geometry.window_size, 1) + 1)


def embed_points(geometry: CoordinateGeometry, source: Sequence, flatten: bool = False) -> Iterator[List]:
    """Lazily materialize every window of `source` as a list."""
    for view in geometry.mapping_iter(source):
        yield view.to_flat_list() if flatten else view.to_list()
