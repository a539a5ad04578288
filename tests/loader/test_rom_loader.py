# tests/loader/test_rom_loader.py
"""
retro_chip8.loader.loaderモジュールの単体テスト。
生バイナリROMのロードとサイズ上限を検証します。
"""
import pytest

from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.loader.loader import RomLoader, MAX_PROGRAM_SIZE
from retro_chip8.common.errors import ProgramTooLargeError

# @intent:test_suite ROMローダー機能の検証。

class TestRomLoader:
    @pytest.fixture
    def setup_loader(self):
        bus = Bus()
        ram = RAM(0x1000)
        bus.register_device(0x000, 0xFFF, ram)
        return RomLoader(), bus, ram

    def test_load_bytes_at_program_start(self, setup_loader):
        loader, bus, ram = setup_loader
        count = loader.load_bytes(bytes([0x60, 0x0A, 0x12, 0x00]), bus)
        assert count == 4
        assert [ram.read(0x200 + k) for k in range(4)] == [0x60, 0x0A, 0x12, 0x00]
        assert ram.read(0x1FF) == 0x00

    def test_load_file(self, setup_loader, tmp_path):
        loader, bus, ram = setup_loader
        rom = tmp_path / "game.ch8"
        rom.write_bytes(bytes([0x00, 0xE0, 0x12, 0x02]))
        assert loader.load_file(rom, bus) == 4
        assert ram.read(0x201) == 0xE0
        assert ram.read(0x203) == 0x02

    def test_largest_program_fits(self, setup_loader):
        loader, bus, ram = setup_loader
        assert MAX_PROGRAM_SIZE == 0xE00
        assert loader.load_bytes(bytes([0xAB]) * MAX_PROGRAM_SIZE, bus) == 0xE00
        assert ram.read(0xFFF) == 0xAB

    def test_program_too_large(self, setup_loader):
        loader, bus, ram = setup_loader
        with pytest.raises(ProgramTooLargeError):
            loader.load_bytes(bytes(MAX_PROGRAM_SIZE + 1), bus)
        # 何も書き込まれていないこと
        assert ram.read(0x200) == 0x00

    def test_missing_file(self, setup_loader, tmp_path):
        loader, bus, _ = setup_loader
        with pytest.raises(FileNotFoundError):
            loader.load_file(tmp_path / "missing.ch8", bus)
