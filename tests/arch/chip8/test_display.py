# tests/arch/chip8/test_display.py
"""
Framebufferの単体テスト。
"""
import pytest

from retro_chip8.arch.chip8.display import Framebuffer, DISPLAY_WIDTH, DISPLAY_HEIGHT

# @intent:test_suite XOR描画、衝突検出、座標の折り返しを検証します。

@pytest.fixture
def fb():
    return Framebuffer()

def test_initial_framebuffer_is_blank(fb):
    assert fb.width == DISPLAY_WIDTH
    assert fb.height == DISPLAY_HEIGHT
    assert fb.is_blank()
    assert list(fb.lit_pixels()) == []

def test_set_pixel_turns_pixel_on_without_collision(fb):
    assert fb.set_pixel(3, 4) is False
    assert fb.get_pixel(3, 4) == 1

# @intent:test_case 2回目の描画で元に戻り、消去したことを衝突として報告します。
def test_set_pixel_is_its_own_inverse(fb):
    first = fb.set_pixel(10, 20)
    second = fb.set_pixel(10, 20)
    assert first is False
    assert second is True
    assert fb.get_pixel(10, 20) == 0
    assert fb.is_blank()

@pytest.mark.parametrize("wrapped, direct", [
    ((64, 10), (0, 10)),
    ((-1, 10), (63, 10)),
    ((5, 32), (5, 0)),
    ((5, -1), (5, 31)),
    ((70, 40), (6, 8)),
])
def test_coordinate_wraparound(fb, wrapped, direct):
    fb.set_pixel(*wrapped)
    assert fb.get_pixel(*direct) == 1
    assert list(fb.lit_pixels()) == [direct]
    # 折り返し先と同じピクセルを操作していること
    assert fb.set_pixel(*direct) is True
    assert fb.is_blank()

def test_wrap_is_applied_once_only(fb):
    # 1回の折り返しでも画面外の座標は描画しない
    assert fb.set_pixel(200, 5) is False
    assert fb.set_pixel(5, -40) is False
    assert fb.is_blank()

def test_clear(fb):
    fb.set_pixel(0, 0)
    fb.set_pixel(63, 31)
    fb.clear()
    assert fb.is_blank()

def test_lit_pixels_is_re_renderable(fb):
    fb.set_pixel(1, 0)
    fb.set_pixel(0, 1)
    assert list(fb.lit_pixels()) == [(1, 0), (0, 1)]
    assert list(fb.lit_pixels()) == [(1, 0), (0, 1)]
    fb.set_pixel(1, 0)
    assert list(fb.lit_pixels()) == [(0, 1)]
