import pytest

from compressor.models.image_model import DEFAULT_BUDGET, CompressionBudget
from compressor.services.compression_params import (
    MIB,
    escalated_attempt,
    first_attempt,
    initial_quality,
)


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, 0.8),
        (500 * 1024, 0.8),
        (2 * MIB, 0.8),
        (2 * MIB + 1, 0.7),
        (5 * MIB, 0.7),
        (5 * MIB + 1, 0.6),
        (10 * MIB, 0.6),
        (10 * MIB + 1, 0.5),
        (500 * MIB, 0.5),
    ],
)
def test_initial_quality_thresholds_are_strict(size, expected):
    assert initial_quality(size) == expected


def test_initial_quality_is_non_increasing():
    sizes = [0, MIB, 2 * MIB, 2 * MIB + 1, 3 * MIB, 5 * MIB + 1, 8 * MIB, 10 * MIB + 1, 20 * MIB]
    qualities = [initial_quality(s) for s in sizes]
    assert set(qualities) <= {0.5, 0.6, 0.7, 0.8}
    assert qualities == sorted(qualities, reverse=True)


def test_first_attempt_uses_heuristic_and_1920():
    params = first_attempt(12 * MIB, DEFAULT_BUDGET)
    assert params.quality == 0.5
    assert params.max_dimension_px == 1920
    assert params.target_budget_bytes == 999 * 1024


def test_escalated_attempt_is_fixed():
    params = escalated_attempt(CompressionBudget(5000))
    assert (params.quality, params.max_dimension_px, params.target_budget_bytes) == (0.5, 1280, 5000)
