"""
Tests for random sources and precision resolution.
"""

import functools
import threading
import warnings

import numpy as np
import pytest
from sdetools import (
    generate_ornstein_uhlenbeck,
    sdeset,
    RandomSourceArityMismatch,
    RandomSourceFailure,
    RandomSourceShapeMismatch,
    InconsistentPrecisionWarning,
)
from sdetools.core import CustomSource, NormalSource, default_rng, reset_default_rng
from sdetools.core import random_source
from sdetools.core.random_source import resolve_precision


def test_normal_source_shape_and_reproducibility():
    """Test that the default source draws the requested shape from its stream."""
    a = NormalSource(np.random.default_rng(1))(4, 3)
    b = NormalSource(np.random.default_rng(1))(4, 3)
    assert a.shape == (4, 3)
    np.testing.assert_array_equal(a, b)


def test_default_stream_is_created_once():
    """Test that the process-wide stream is created lazily and reused."""
    assert default_rng() is default_rng()


def test_default_stream_created_once_across_threads(monkeypatch):
    """Test that concurrent first calls all receive the same stream."""
    monkeypatch.setattr(random_source, "_default_rng", None)
    barrier = threading.Barrier(8)
    streams = []

    def first_call():
        barrier.wait()
        streams.append(default_rng())

    threads = [threading.Thread(target=first_call) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(streams) == 8
    assert all(stream is streams[0] for stream in streams)


def test_reset_default_stream():
    """Test that reseeding the default stream makes default draws repeatable."""
    t = np.linspace(0, 1, 11)
    reset_default_rng(123)
    Y1 = generate_ornstein_uhlenbeck(1.0, 0.0, 0.5, t, [0.0, 1.0])
    reset_default_rng(123)
    Y2 = generate_ornstein_uhlenbeck(1.0, 0.0, 0.5, t, [0.0, 1.0])
    np.testing.assert_array_equal(Y1, Y2)


def test_default_stream_advances():
    """Test that consecutive default draws differ."""
    t = np.linspace(0, 1, 11)
    Y1 = generate_ornstein_uhlenbeck(1.0, 0.0, 0.5, t, 0.0)
    Y2 = generate_ornstein_uhlenbeck(1.0, 0.0, 0.5, t, 0.0)
    assert not np.array_equal(Y1, Y2)


def test_custom_source_passes_valid_output():
    """Test that a valid custom function is returned unchanged."""
    draws = np.arange(6, dtype=float).reshape(3, 2)
    source = CustomSource(lambda m, n: draws, "SDE_OU")
    np.testing.assert_array_equal(source(3, 2), draws)


@pytest.mark.parametrize("func", [
    lambda m, n, scale=1.0: scale * np.zeros((m, n)),
    lambda *size: np.zeros(size),
    functools.partial(lambda m, n, k: np.full((m, n), k), k=0.5),
])
def test_custom_source_flexible_signatures(func):
    """Test that optional or variadic signatures are accepted."""
    assert CustomSource(func)(2, 3).shape == (2, 3)


def test_custom_source_too_few_inputs():
    """Test that a function taking fewer than two inputs fails."""
    source = CustomSource(lambda m: np.zeros((m, 1)), "SDE_OU")
    with pytest.raises(RandomSourceArityMismatch, match="at least two inputs") as excinfo:
        source(3, 1)
    assert excinfo.value.reason is RandomSourceFailure.TOO_FEW_INPUTS


def test_custom_source_too_many_inputs():
    """Test that a function requiring more than two inputs fails."""
    source = CustomSource(lambda m, n, k: np.zeros((m, n)), "SDE_OU")
    with pytest.raises(RandomSourceArityMismatch, match="more than two") as excinfo:
        source(3, 1)
    assert excinfo.value.reason is RandomSourceFailure.TOO_MANY_INPUTS


def test_custom_source_no_output():
    """Test that a function returning nothing fails."""
    def rand_fun(m, n):
        np.zeros((m, n))

    with pytest.raises(RandomSourceArityMismatch) as excinfo:
        CustomSource(rand_fun)(3, 1)
    assert excinfo.value.reason is RandomSourceFailure.NO_OUTPUT


@pytest.mark.parametrize("output", [
    np.zeros(3),
    np.zeros((3, 1, 1)),
    np.zeros((0, 0)),
    np.ones((3, 1), dtype=int),
    np.full((3, 1), "a"),
])
def test_custom_source_not_float_matrix(output):
    """Test that non-matrix, empty or non-float output fails."""
    with pytest.raises(RandomSourceShapeMismatch) as excinfo:
        CustomSource(lambda m, n: output)(3, 1)
    assert excinfo.value.reason is RandomSourceFailure.NOT_FLOAT_MATRIX


def test_custom_source_dimension_mismatch():
    """Test that output of the wrong size fails."""
    with pytest.raises(RandomSourceShapeMismatch, match="3 by 2") as excinfo:
        CustomSource(lambda m, n: np.zeros((n, m)))(3, 2)
    assert excinfo.value.reason is RandomSourceFailure.DIMENSION_MISMATCH


class _UnsignedSource:
    """Callable whose signature cannot be inspected, like many builtins."""

    __signature__ = 42

    def __init__(self, shape):
        self.shape = shape

    def __call__(self, *args):
        return np.zeros(self.shape)


def test_custom_source_without_signature_is_accepted():
    """Test that a callable with no inspectable signature skips the arity check."""
    r = CustomSource(_UnsignedSource((3, 2)))(3, 2)
    assert r.shape == (3, 2)


def test_custom_source_without_signature_output_is_checked():
    """Test that output of a callable with no inspectable signature is still validated."""
    with pytest.raises(RandomSourceShapeMismatch) as excinfo:
        CustomSource(_UnsignedSource((2, 3)))(3, 2)
    assert excinfo.value.reason is RandomSourceFailure.DIMENSION_MISMATCH


def test_custom_source_errors_propagate():
    """Test that errors raised by the user function are not masked."""
    def rand_fun(m, n):
        raise KeyError("broken")

    with pytest.raises(KeyError):
        CustomSource(rand_fun)(3, 1)


def test_generator_reports_custom_source_errors():
    """Test that contract violations surface from the generator."""
    t = np.linspace(0, 1, 5)
    with pytest.raises(RandomSourceShapeMismatch, match="SDE_OU"):
        generate_ornstein_uhlenbeck(1.0, 0.0, 0.5, t, [0.0, 0.0],
                                    sdeset(RandFUN=lambda m, n: np.zeros((m, 1))))

    with pytest.raises(RandomSourceArityMismatch):
        generate_ornstein_uhlenbeck(1.0, 0.0, 0.5, t, 0.0,
                                    sdeset(RandFUN=lambda m: np.zeros((m, 1))))


def test_resolve_precision():
    """Test the dominant precision rules."""
    f32 = np.zeros(2, dtype=np.float32)
    f64 = np.zeros(2)

    assert resolve_precision(1.0, [1, 2]) == np.float64
    assert resolve_precision(f32, 1.0, [0.5]) == np.float32
    assert resolve_precision(f32, np.float32(2)) == np.float32
    assert resolve_precision(f64, 1.0) == np.float64
    assert resolve_precision(np.arange(3), 1.0) == np.float64

    with pytest.warns(InconsistentPrecisionWarning, match="THETA, Y0"):
        assert resolve_precision(f32, f64, names=["THETA", "Y0"]) == np.float64


def test_resolve_precision_without_mixture_is_silent():
    """Test that consistent inputs do not warn."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        resolve_precision(np.zeros(2, dtype=np.float32), np.float32(1), 0.5)
