"""cachematrix error categories.

Keep this module lightweight and dependency-free apart from NumPy to avoid
import cycles.
"""

from __future__ import annotations

from typing import Any

import numpy as np


def _rebuild(cls: type, reason: str, shape: tuple[int, ...] | None) -> Any:
    return cls(reason, shape=shape)


class NotInvertibleError(np.linalg.LinAlgError):
    """Raised when the cached matrix has no inverse.

    Covers empty, non-2D, non-square and singular (exactly or numerically)
    matrices. Subclasses ``numpy.linalg.LinAlgError`` so existing handlers
    for the NumPy error still catch it.
    """

    def __init__(self, reason: str, *, shape: tuple[int, ...] | None = None):
        self.reason = str(reason)
        self.shape = shape
        if shape is None:
            message = f"matrix is not invertible: {self.reason}"
        else:
            message = f"matrix of shape {shape} is not invertible: {self.reason}"
        super().__init__(message)

    def __reduce__(self) -> Any:
        return (_rebuild, (self.__class__, self.reason, self.shape))
