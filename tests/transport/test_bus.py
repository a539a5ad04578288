# tests/transport/test_bus.py
"""
retro_chip8.transport.busモジュールの単体テスト。
"""
import pytest
from retro_chip8.transport.bus import Bus, Device, RAM
from retro_chip8.common.errors import MemoryAccessError, EmulationError

# @intent:test_suite 共通バスとデバイスの基本的な機能とエラーハンドリングを検証します。

class TestRAM:
    """
    RAMデバイスの単体テスト。
    """
    def test_ram_init_valid_size(self):
        ram = RAM(16)
        assert ram.get_size() == 16
        assert all(ram.read(i) == 0 for i in range(16)) # 全て0で初期化される

    def test_ram_init_invalid_size(self):
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(0)
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(-1)
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(1.5) # float

    def test_ram_read_write_within_bounds(self):
        ram = RAM(4)
        ram.write(0, 0x12)
        ram.write(3, 0x78)
        assert ram.read(0) == 0x12
        assert ram.read(3) == 0x78

    # @intent:test_case_error 範囲外アクセスはMemoryAccessError（IndexErrorでもある）になることを検証します。
    def test_ram_out_of_bounds(self):
        ram = RAM(4)
        with pytest.raises(MemoryAccessError):
            ram.read(4)
        with pytest.raises(IndexError):
            ram.write(-1, 0x00)
        with pytest.raises(EmulationError):
            ram.read(100)

    def test_ram_write_invalid_data(self):
        ram = RAM(4)
        with pytest.raises(ValueError, match="not an 8-bit value"):
            ram.write(0, 0x100)

class TestBus:
    """
    Busの単体テスト。
    """
    @pytest.fixture
    def bus(self):
        bus = Bus()
        bus.register_device(0x000, 0xFFF, RAM(0x1000))
        return bus

    def test_read_write(self, bus):
        bus.write(0x200, 0xAB)
        assert bus.read(0x200) == 0xAB

    def test_unmapped_address(self, bus):
        with pytest.raises(MemoryAccessError):
            bus.read(0x1000)
        with pytest.raises(MemoryAccessError):
            bus.write(0x1000, 0x00)

    def test_read_word_is_big_endian(self, bus):
        bus.write(0x200, 0x12)
        bus.write(0x201, 0x34)
        assert bus.read_word(0x200) == 0x1234

    def test_read_word_past_end(self, bus):
        with pytest.raises(MemoryAccessError):
            bus.read_word(0xFFF)

    def test_load_block(self, bus):
        count = bus.load(0x300, bytes([1, 2, 3]))
        assert count == 3
        assert [bus.read(0x300 + i) for i in range(3)] == [1, 2, 3]

    def test_register_device_invalid_range(self):
        bus = Bus()
        with pytest.raises(ValueError):
            bus.register_device(0x200, 0x100, RAM(0x100))
        with pytest.raises(ValueError):
            bus.register_device(-1, 0x100, RAM(0x100))

    def test_register_device_size_mismatch(self):
        bus = Bus()
        with pytest.raises(ValueError):
            bus.register_device(0x000, 0x0FF, RAM(0x200))

    def test_register_non_device(self):
        bus = Bus()
        with pytest.raises(TypeError):
            bus.register_device(0x000, 0x0FF, object())

    def test_custom_device_dispatch(self):
        class EchoDevice(Device):
            def __init__(self):
                self.writes = []

            def read(self, address: int) -> int:
                return address & 0xFF

            def write(self, address: int, data: int) -> None:
                self.writes.append((address, data))

        bus = Bus()
        device = EchoDevice()
        bus.register_device(0x100, 0x1FF, device)
        assert bus.read(0x105) == 0x05
        bus.write(0x110, 0x42)
        assert device.writes == [(0x10, 0x42)]
