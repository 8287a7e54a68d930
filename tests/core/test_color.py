from __future__ import annotations

import pytest

from engine.core.color import BLACK, WHITE, Color


def test_color_components_are_unclamped() -> None:
    c = Color(-0.5, 0.4, 1.7)
    assert c.red == -0.5
    assert c.green == 0.4
    assert c.blue == 1.7


def test_color_arithmetic() -> None:
    c1 = Color(0.9, 0.6, 0.75)
    c2 = Color(0.7, 0.1, 0.25)
    assert c1 + c2 == Color(1.6, 0.7, 1.0)
    assert c1 - c2 == Color(0.2, 0.5, 0.5)
    assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
    assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)


def test_hadamard_product() -> None:
    assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)


def test_constants_and_unhashable() -> None:
    assert BLACK == Color(0, 0, 0)
    assert WHITE == Color(1, 1, 1)
    assert list(WHITE) == [1.0, 1.0, 1.0]
    with pytest.raises(TypeError):
        hash(BLACK)
