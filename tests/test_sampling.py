"""Tests for the sampling policies."""

import pytest

from odegallery.sampling import SamplingKind, SamplingPolicy


def test_none_keeps_everything() -> None:
    policy = SamplingPolicy.none()
    assert all(policy.retains(i, 0.37 * i) for i in range(50))


def test_index_modulo() -> None:
    policy = SamplingPolicy.index_modulo(10)
    kept = [i for i in range(1001) if policy.retains(i, 0.0)]
    assert kept[:3] == [0, 10, 20]
    assert len(kept) == 101


def test_time_modulo_uses_float_remainder() -> None:
    policy = SamplingPolicy.time_modulo(2.0, 0.1)
    assert policy.retains(0, 0.0)
    assert policy.retains(20, 2.05)
    assert not policy.retains(19, 1.9999999)
    assert not policy.retains(5, 0.5)


def test_time_modulo_accumulated_time_matches_loop() -> None:
    # Walk t the way the integrator does and count retained samples.
    policy = SamplingPolicy.time_modulo(0.5, 0.1)
    t, index, kept = 0.0, 0, []
    while t <= 50.0:
        if policy.retains(index, t):
            kept.append(t)
        t += 0.1
        index += 1
    assert kept[0] == 0.0
    assert kept == sorted(kept)
    # about one sample per interval, boundary jitter allowed
    assert 90 <= len(kept) <= 110


def test_select_filters_triples() -> None:
    policy = SamplingPolicy.index_modulo(3)
    out = list(policy.select((i, i * 0.1, f"p{i}") for i in range(7)))
    assert [p for _, _, p in out] == ["p0", "p3", "p6"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"kind": SamplingKind.INDEX_MODULO, "n": 0},
        {"kind": SamplingKind.TIME_MODULO, "interval": 0.0, "tolerance": 0.1},
        {"kind": SamplingKind.TIME_MODULO, "interval": 1.0, "tolerance": 0.0},
    ],
)
def test_invalid_policies(kwargs) -> None:
    with pytest.raises(ValueError):
        SamplingPolicy(**kwargs)


def test_config_roundtrip() -> None:
    for policy in (
        SamplingPolicy.none(),
        SamplingPolicy.index_modulo(10),
        SamplingPolicy.time_modulo(0.1, 0.01),
    ):
        assert SamplingPolicy.from_config(policy.to_config()) == policy
    assert SamplingPolicy(kind="index_modulo", n=4).kind is SamplingKind.INDEX_MODULO
