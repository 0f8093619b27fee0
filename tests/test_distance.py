import math

import pytest

from cloverleaf.distance import Distance


def test_alt():
    assert Distance.ALT.compute([1.0, 2.0, 1.0], [3.0, 2.0, 4.0]) == 3.0


def test_alt_empty():
    assert Distance.ALT.compute([], []) == 0.0


def test_cosine():
    d = Distance.COSINE.compute([1.0, 2.0, 1.0], [3.0, 2.0, 4.0])
    dot = 3.0 + 4.0 + 4.0
    n1 = math.sqrt(1.0 + 4.0 + 1.0)
    n2 = math.sqrt(9.0 + 4.0 + 16.0)
    assert d == pytest.approx(1.0 - dot / (n1 * n2), rel=1e-6)


def test_cosine_identical_is_zero():
    assert Distance.COSINE.compute([0.5, 0.5, 2.0], [0.5, 0.5, 2.0]) == pytest.approx(0.0, abs=1e-9)


def test_cosine_zero_vector_is_infinite():
    assert Distance.COSINE.compute([0.0, 0.0], [1.0, 2.0]) == math.inf


def test_euclidean():
    d = Distance.EUCLIDEAN.compute([1.0, 2.0, 1.0], [3.0, 2.0, 4.0])
    assert d == pytest.approx(math.sqrt(13.0))


def test_dot():
    assert Distance.DOT.compute([1.0, 2.0, 1.0], [3.0, 2.0, 4.0]) == -11.0


def test_hamming():
    d = Distance.HAMMING.compute([1.0, 2.0, 1.0], [3.0, 2.0, 4.0])
    assert d == pytest.approx(2.0 / 3.0)


def test_jaccard():
    d = Distance.JACCARD.compute([1.0, 2.0, -1.0], [2.0, 4.0, 5.0])
    assert d == pytest.approx(1.0 - 1.0 / 4.0)


def test_jaccard_identical_sets():
    assert Distance.JACCARD.compute([1.0, 3.0, -1.0], [1.0, 3.0, -1.0]) == 0.0


def test_jaccard_disjoint_sets():
    assert Distance.JACCARD.compute([1.0, 2.0], [3.0, 4.0]) == 1.0