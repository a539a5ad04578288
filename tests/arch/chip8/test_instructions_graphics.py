import unittest

from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.arch.chip8.cpu import Chip8Cpu

class TestChip8GraphicsInstructions(unittest.TestCase):
    def setUp(self):
        self.bus = Bus()
        self.bus.register_device(0x000, 0xFFF, RAM(0x1000))
        self.cpu = Chip8Cpu(self.bus)
        self.cpu.load_fontset()
        self.state = self.cpu.get_state()
        self.fb = self.cpu.framebuffer

    def _draw(self, opcode, sprite, x_value, y_value):
        self.bus.load(0x300, sprite)
        self.state.i = 0x300
        self.state.v[(opcode >> 8) & 0xF] = x_value
        self.state.v[(opcode >> 4) & 0xF] = y_value
        self.cpu.execute(opcode)

    def test_draw_uses_row_origin_for_columns_by_default(self):
        # V1 = 10 (x), V2 = 3 (y) -> 列の基準は V2
        self._draw(0xD121, bytes([0b1000_0001]), 10, 3)
        self.assertEqual(list(self.fb.lit_pixels()), [(3, 3), (10, 3)])
        self.assertEqual(self.state.vf, 0)

    def test_draw_with_vx_origin(self):
        cpu = Chip8Cpu(self.bus, sprite_origin_quirk=False)
        state = cpu.get_state()
        self.bus.load(0x300, bytes([0b1100_0000, 0b0100_0000]))
        state.i = 0x300
        state.v[1], state.v[2] = 10, 3
        cpu.execute(0xD122)
        self.assertEqual(list(cpu.framebuffer.lit_pixels()), [(10, 3), (11, 3), (11, 4)])

    def test_draw_collision_sets_flag(self):
        self._draw(0xD121, bytes([0xFF]), 0, 0)
        self.assertEqual(self.state.vf, 0)
        self.cpu.execute(0xD121)
        self.assertEqual(self.state.vf, 1)
        self.assertTrue(self.fb.is_blank())

    def test_draw_resets_flag_before_drawing(self):
        self.state.vf = 1
        self._draw(0xD121, bytes([0x80]), 5, 5)
        self.assertEqual(self.state.vf, 0)

    def test_draw_font_glyph(self):
        # "0" のグリフ: 0xF0, 0x90, 0x90, 0x90, 0xF0
        self.state.v[0] = 0
        self.cpu.execute(0xF029)
        self.state.v[1] = self.state.v[2] = 0
        self.cpu.execute(0xD125)
        lit = set(self.fb.lit_pixels())
        self.assertEqual(len(lit), 14)
        self.assertIn((0, 0), lit)
        self.assertIn((3, 4), lit)
        self.assertNotIn((1, 1), lit)

    def test_draw_wraps_at_edges(self):
        self._draw(0xD121, bytes([0xC0]), 0, 63)
        # 列はV2(=63)基準: 63 と 64->0、行は 63->31
        self.assertEqual(sorted(self.fb.lit_pixels()), [(0, 31), (63, 31)])

    def test_draw_far_off_screen_is_clipped(self):
        # 列はV2(=200)基準: 1回折り返しても画面外のため何も描画しない
        self._draw(0xD121, bytes([0xFF]), 5, 200)
        self.assertTrue(self.fb.is_blank())
        self.assertEqual(self.state.vf, 0)

    # @intent:test_case 描画後にCLSを実行すると全ピクセルが0になることを検証します。
    def test_cls_after_draw(self):
        self._draw(0xD125, bytes([0xFF] * 5), 0, 0)
        self.assertFalse(self.fb.is_blank())
        self.bus.load(0x202, bytes([0x00, 0xE0]))
        self.cpu.step()
        self.assertTrue(self.fb.is_blank())

if __name__ == '__main__':
    unittest.main()
