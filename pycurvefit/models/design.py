"""
Sample set design.

SampleSet is the validated, immutable container every fitter consumes.
It is built once at the API boundary; fitters and linearizing transforms
work on it without re-validating.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurvefit.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_pairs,
    check_consistent_length,
)


@dataclass(frozen=True, eq=False)
class SampleSet:
    """
    Ordered, immutable collection of (x, y) sample points.

    Insertion order is preserved for display; the fitters do not depend
    on it. Coordinate arrays are read-only.

    Construction:
        SampleSet.from_points([(0, 3), (1, 5), (2, 7)])
        SampleSet.from_points(np.array([[0, 3], [1, 5]]))
        SampleSet.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float]] | ArrayLike) -> SampleSet:
        """
        Build a SampleSet from (x, y) pairs.

        Args:
            points: Sequence of (x, y) pairs, an (n, 2) array, or an
                existing SampleSet (returned unchanged).

        Returns:
            SampleSet ready for fitting

        Raises:
            ValidationError: If coordinates are non-numeric or non-finite
            DimensionError: If the input is not a table of pairs
        """
        if isinstance(points, SampleSet):
            return points
        if not isinstance(points, np.ndarray) and not hasattr(points, '__len__'):
            points = list(points)

        arr = check_array(points, 'points')
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        check_pairs(arr, 'points')
        check_finite(arr, 'points')
        return cls._build(arr[:, 0], arr[:, 1])

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> SampleSet:
        """Build a SampleSet from parallel x and y arrays."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        return cls._build(x_arr, y_arr)

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> SampleSet:
        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        x.setflags(write=False)
        y.setflags(write=False)
        return cls(_x=x, _y=y)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Abscissae (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Ordinates (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of sample points."""
        return int(self._x.shape[0])

    def points(self) -> list[tuple[float, float]]:
        """The samples as a list of (x, y) float tuples, in insertion order."""
        return [(float(x), float(y)) for x, y in zip(self._x, self._y)]

    def transformed(
        self,
        fx: Callable[[NDArray], NDArray] | None = None,
        fy: Callable[[NDArray], NDArray] | None = None,
    ) -> SampleSet:
        """
        Return a new SampleSet with coordinates mapped through fx and fy.

        Used to linearize a model before handing it to the linear solver,
        e.g. ``samples.transformed(fx=np.log)`` for y = a·ln(x) + c.
        Callers are responsible for only applying transforms whose
        domain the samples satisfy.
        """
        x = self._x if fx is None else fx(self._x)
        y = self._y if fy is None else fy(self._y)
        return self._build(x, y)

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return iter(self.points())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleSet):
            return NotImplemented
        return np.array_equal(self._x, other._x) and np.array_equal(self._y, other._y)

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0 so equal sets hash alike
        return hash(((self._x + 0.0).tobytes(), (self._y + 0.0).tobytes()))

    def __repr__(self) -> str:
        return f"SampleSet(n={self.n})"
