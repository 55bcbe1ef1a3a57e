import dataclasses

import numpy as np
import pytest

from ffnet.core.neuron import Neuron, relu
from ffnet.init.distributions import ConstantWeightDistribution


def test_propagate_clamps_negative_activation() -> None:
    neuron = Neuron(bias=0.5, weights=[-0.3, 0.8])

    assert neuron.propagate([-10.0, -10.0]) == 0.0


def test_propagate_weighted_sum_plus_bias() -> None:
    neuron = Neuron(bias=0.5, weights=[-0.3, 0.8])

    output = neuron.propagate([0.5, 1.0])

    assert output.dtype == np.float32
    np.testing.assert_allclose(output, (-0.3 * 0.5) + (0.8 * 1.0) + 0.5, rtol=1e-6)


def test_propagate_sums_left_to_right() -> None:
    # In float32, 1e8 + 1 rounds back to 1e8, so only the last input survives
    neuron = Neuron(bias=0.0, weights=[1.0, 1.0, 1.0, 1.0])
    inputs = np.array([1e8, 1.0, -1e8, 1.0], dtype=np.float32)

    expected = np.float32(0.0)
    for x, w in zip(inputs, neuron.weights):
        expected = np.float32(expected + x * w)

    output = neuron.propagate(inputs)

    assert output == expected
    assert output == np.float32(1.0)


def test_propagate_without_inputs_returns_activated_bias() -> None:
    assert Neuron(bias=0.25, weights=[]).propagate([]) == np.float32(0.25)
    assert Neuron(bias=-0.25, weights=[]).propagate([]) == 0.0


def test_propagate_is_never_negative() -> None:
    rng = np.random.default_rng(7)
    for _ in range(50):
        neuron = Neuron.random(rng, 5)
        inputs = rng.normal(scale=10.0, size=5)
        assert neuron.propagate(inputs) >= 0.0


def test_propagate_rejects_mismatched_inputs() -> None:
    neuron = Neuron(bias=0.5, weights=[-0.3, 0.8])

    with pytest.raises(AssertionError, match=r"Expected input shape \(2,\), got \(3,\)"):
        neuron.propagate([1.0, 2.0, 3.0])


def test_relu_clamps_nan_to_zero() -> None:
    assert relu(np.float32(np.nan)) == 0.0
    assert relu(np.float32(-1.0)) == 0.0
    assert relu(np.float32(2.5)) == np.float32(2.5)


def test_random_draws_bias_before_weights(rng, uniform_draws) -> None:
    neuron = Neuron.random(rng, 4)
    draws = np.array(uniform_draws(0, 5), dtype=np.float32)

    assert neuron.bias == draws[0]
    np.testing.assert_array_equal(neuron.weights, draws[1:])


def test_random_consumes_one_draw_per_value(rng, uniform_draws) -> None:
    Neuron.random(rng, 4)

    assert rng.uniform(-1.0, 1.0) == uniform_draws(0, 6)[5]


def test_random_values_within_unit_range(rng) -> None:
    neuron = Neuron.random(rng, 100)

    assert -1.0 <= neuron.bias <= 1.0
    assert np.all(neuron.weights >= -1.0)
    assert np.all(neuron.weights <= 1.0)


def test_random_same_seed_is_reproducible() -> None:
    a = Neuron.random(np.random.default_rng(123), 8)
    b = Neuron.random(np.random.default_rng(123), 8)

    assert a.bias == b.bias
    np.testing.assert_array_equal(a.weights, b.weights)


def test_random_uses_given_distribution(rng) -> None:
    neuron = Neuron.random(rng, 3, ConstantWeightDistribution(0.5))

    assert neuron.bias == np.float32(0.5)
    np.testing.assert_array_equal(neuron.weights, [0.5, 0.5, 0.5])


def test_neuron_is_immutable() -> None:
    neuron = Neuron(bias=0.1, weights=[0.2, 0.3])

    assert neuron.weights.dtype == np.float32
    assert neuron.input_size == 2

    with pytest.raises(dataclasses.FrozenInstanceError):
        neuron.bias = 1.0  # type: ignore[misc]
    with pytest.raises(ValueError):
        neuron.weights[0] = 1.0


def test_weights_are_copied_on_construction() -> None:
    source = np.array([0.2, 0.3], dtype=np.float32)
    neuron = Neuron(bias=0.0, weights=source)

    source[0] = 9.0

    assert neuron.weights[0] == np.float32(0.2)
