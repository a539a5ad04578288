import unittest

from retro_chip8.arch.chip8.keypad import Keypad
from retro_chip8.arch.chip8.timers import Timers

class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.keypad = Keypad()

    def test_press_and_release(self):
        self.assertFalse(self.keypad.is_pressed(0xA))
        self.keypad.press(0xA)
        self.assertTrue(self.keypad.is_pressed(0xA))
        self.keypad.release(0xA)
        self.assertFalse(self.keypad.is_pressed(0xA))

    def test_out_of_range_query_is_not_pressed(self):
        self.assertFalse(self.keypad.is_pressed(0x10))
        self.assertFalse(self.keypad.is_pressed(-1))

    def test_press_invalid_key(self):
        with self.assertRaises(ValueError):
            self.keypad.press(16)

    def test_one_shot_callback(self):
        received = []
        self.keypad.on_next_key_press = received.append
        self.assertTrue(self.keypad.awaiting_press)

        self.keypad.press(0x3)
        self.keypad.press(0x4)

        self.assertEqual(received, [0x3])
        self.assertFalse(self.keypad.awaiting_press)
        self.assertTrue(self.keypad.is_pressed(0x4))

    def test_release_all(self):
        self.keypad.press(0x1)
        self.keypad.press(0xF)
        self.keypad.release_all()
        self.assertFalse(any(self.keypad.is_pressed(k) for k in range(16)))

class TestTimers(unittest.TestCase):
    def test_tick_decrements_both(self):
        timers = Timers(delay=2, sound=1)
        timers.tick()
        self.assertEqual((timers.delay, timers.sound), (1, 0))
        self.assertFalse(timers.sound_active)

    def test_tick_floors_at_zero(self):
        timers = Timers(delay=3)
        for _ in range(4):
            timers.tick()
        self.assertEqual(timers.delay, 0)
        self.assertEqual(timers.sound, 0)

if __name__ == '__main__':
    unittest.main()
