import unittest

import numpy as np

import cachematrix
from cachematrix._internal import coercion


class _AccessorMatrix:
    def __init__(self, data):
        self._data = data

    def rows(self):
        return len(self._data)

    def cols(self):
        return len(self._data[0]) if self._data else 0

    def get(self, i, j):
        return self._data[i][j]


class TestCoercion(unittest.TestCase):
    def test_ndarray_passes_through(self):
        a = np.eye(3)
        self.assertIs(coercion.as_matrix_array(a), a)

    def test_nested_sequences(self):
        a = coercion.as_matrix_array(((1.0, 2.0), (3.0, 4.0)))
        self.assertEqual(a.shape, (2, 2))
        self.assertEqual(a[1, 0], 3.0)

    def test_accessor_objects_are_read_elementwise(self):
        src = _AccessorMatrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        a = coercion.as_matrix_array(src)
        np.testing.assert_array_equal(a, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        self.assertEqual(coercion.matrix_shape(src), (2, 3))

    def test_accessor_objects_can_be_cached(self):
        cache = cachematrix.MatrixCache(_AccessorMatrix([[4.0, 7.0], [2.0, 6.0]]))
        self.assertEqual(cache.shape, (2, 2))
        inv = cachematrix.cached_inverse(cache)
        np.testing.assert_allclose(inv, [[0.6, -0.7], [-0.2, 0.4]])

    def test_matrix_shape(self):
        self.assertEqual(coercion.matrix_shape(np.zeros((3, 4))), (3, 4))
        self.assertEqual(coercion.matrix_shape([]), (0, 0))
        self.assertEqual(coercion.matrix_shape([[1, 2], [3, 4]]), (2, 2))
        self.assertIsNone(coercion.matrix_shape(np.zeros(4)))
        self.assertIsNone(coercion.matrix_shape([1, 2]))
        self.assertIsNone(coercion.matrix_shape(None))
        self.assertIsNone(coercion.matrix_shape(b"ab"))

    def test_is_sequence_like(self):
        self.assertTrue(coercion.is_sequence_like([1]))
        self.assertTrue(coercion.is_sequence_like((1,)))
        self.assertFalse(coercion.is_sequence_like("ab"))
        self.assertFalse(coercion.is_sequence_like(np.zeros(2)))


if __name__ == "__main__":
    unittest.main()
