import unittest

from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.common.errors import StackOverflowError, StackUnderflowError

class TestChip8ControlInstructions(unittest.TestCase):
    def setUp(self):
        self.bus = Bus()
        self.bus.register_device(0x000, 0xFFF, RAM(0x1000))
        self.cpu = Chip8Cpu(self.bus)
        self.state = self.cpu.get_state()

    def test_sys_is_noop(self):
        self.cpu.execute(0x0123)
        self.assertEqual(self.state.pc, 0x202)
        self.assertEqual(self.state.stack, [])

    def test_jp(self):
        self.cpu.execute(0x1ABC)
        self.assertEqual(self.state.pc, 0xABC)

    def test_call_pushes_return_address(self):
        self.cpu.execute(0x2456)
        self.assertEqual(self.state.pc, 0x456)
        self.assertEqual(self.state.stack, [0x202])

    # @intent:test_case CALL直後のRETで、CALLのフェッチ後のPCに戻ることを検証します。
    def test_call_then_ret_round_trip(self):
        self.bus.load(0x200, bytes([0x23, 0x00]))  # CALL $300
        self.bus.load(0x300, bytes([0x00, 0xEE]))  # RET
        self.cpu.step()
        self.cpu.step()
        self.assertEqual(self.state.pc, 0x202)
        self.assertEqual(self.state.stack, [])

    def test_ret_with_empty_stack(self):
        with self.assertRaises(StackUnderflowError) as cm:
            self.cpu.execute(0x00EE)
        self.assertEqual(cm.exception.pc, 0x200)

    def test_call_stack_limit(self):
        for _ in range(16):
            self.cpu.execute(0x2200)
        self.assertEqual(len(self.state.stack), 16)
        with self.assertRaises(StackOverflowError):
            self.cpu.execute(0x2200)

    def test_unbounded_call_stack(self):
        cpu = Chip8Cpu(self.bus, stack_depth=None)
        for _ in range(100):
            cpu.execute(0x2200)
        self.assertEqual(len(cpu.get_state().stack), 100)

    def test_se_vx_byte(self):
        self.state.v[1] = 0x12
        self.cpu.execute(0x3112)
        self.assertEqual(self.state.pc, 0x204)
        self.cpu.execute(0x3113)
        self.assertEqual(self.state.pc, 0x206)

    def test_sne_vx_byte(self):
        self.state.v[1] = 0x12
        self.cpu.execute(0x4112)
        self.assertEqual(self.state.pc, 0x202)
        self.cpu.execute(0x4113)
        self.assertEqual(self.state.pc, 0x206)

    def test_se_vx_vy(self):
        self.state.v[1] = self.state.v[2] = 0x33
        self.cpu.execute(0x5120)
        self.assertEqual(self.state.pc, 0x204)
        self.state.v[2] = 0x34
        self.cpu.execute(0x5120)
        self.assertEqual(self.state.pc, 0x206)

    def test_sne_vx_vy(self):
        self.state.v[1], self.state.v[2] = 0x01, 0x02
        self.cpu.execute(0x9120)
        self.assertEqual(self.state.pc, 0x204)
        self.state.v[2] = 0x01
        self.cpu.execute(0x9120)
        self.assertEqual(self.state.pc, 0x206)

    def test_jp_v0(self):
        self.state.v[0] = 0x10
        self.cpu.execute(0xB300)
        self.assertEqual(self.state.pc, 0x310)

    def test_ignored_opcode_only_advances_pc(self):
        self.state.v[1] = 0x05
        self.cpu.execute(0x8128)
        self.assertEqual(self.state.pc, 0x202)
        self.assertEqual(self.state.v[1], 0x05)

if __name__ == '__main__':
    unittest.main()
