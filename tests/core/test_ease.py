"""core.ease のイージング関数と合成子のテスト。"""

from __future__ import annotations

import pytest

from frameweave.core import ease


@pytest.mark.parametrize("name", ease.names())
def test_all_eases_hit_endpoints(name: str) -> None:
    func = ease.get(name)
    assert func(0.0) == pytest.approx(0.0, abs=1e-9)
    assert func(1.0) == pytest.approx(1.0, abs=1e-9)


def test_linear_and_none_are_identity() -> None:
    for t in (0.0, 0.25, 0.5, 0.9):
        assert ease.linear(t) == t
        assert ease.none(t) == t


def test_quad_formulas() -> None:
    assert ease.quad_in(0.5) == pytest.approx(0.25)
    # quad_out(t) = -t * (t - 2)
    assert ease.quad_out(0.5) == pytest.approx(0.75)


def test_expo_boundaries_are_exact() -> None:
    assert ease.expo_in(0.0) == 0.0
    assert ease.expo_out(1.0) == 1.0


def test_in_out_is_symmetric_around_half() -> None:
    f = ease.cubic_in_out
    assert f(0.5) == pytest.approx(0.5)
    for t in (0.1, 0.2, 0.35):
        assert f(t) + f(1.0 - t) == pytest.approx(1.0)


def test_in_out_combinator_uses_halves() -> None:
    f = ease.in_out(ease.quad_in, ease.quad_out)
    assert f(0.25) == pytest.approx(0.5 * ease.quad_in(0.5))
    assert f(0.75) == pytest.approx(0.5 * ease.quad_out(0.5) + 0.5)


def test_out_in_starts_fast() -> None:
    f = ease.out_in(ease.quad_out, ease.quad_in)
    assert f(0.25) > 0.25
    assert f(0.75) < 0.75


def test_reflect_turns_in_into_out() -> None:
    f = ease.reflect(ease.cubic_in)
    for t in (0.1, 0.5, 0.8):
        assert f(t) == pytest.approx(ease.cubic_out(t))


def test_back_overshoots_below_zero() -> None:
    assert ease.back_in(0.2) < 0.0


def test_get_unknown_name_raises() -> None:
    with pytest.raises(KeyError):
        ease.get("wobbly_in")
