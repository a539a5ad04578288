# retro_chip8/loader/loader.py
"""
プログラムイメージローダーモジュール。
生のバイナリROMをプログラム領域（0x200-）へそのままロードします。
"""
import logging
from pathlib import Path
from typing import Union

from retro_chip8.transport.bus import Bus
from retro_chip8.common.errors import ProgramTooLargeError
from retro_chip8.arch.chip8.state import MEMORY_SIZE, PROGRAM_START

logger = logging.getLogger(__name__)

MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START

class RomLoader:
    """
    CHIP-8のROMイメージ（ヘッダなしのバイト列）をバスにロードするローダー。
    """
    def load_bytes(self, data: bytes, bus: Bus, address: int = PROGRAM_START) -> int:
        limit = MEMORY_SIZE - address
        if len(data) > limit:
            raise ProgramTooLargeError(
                f"Program of {len(data)} bytes does not fit in {limit} bytes at {address:#05x}"
            )
        count = bus.load(address, data)
        logger.info("Loaded %d bytes at %#05x", count, address)
        return count

    def load_file(self, file_path: Union[str, Path], bus: Bus) -> int:
        path = Path(file_path)
        data = path.read_bytes()
        logger.info("Loading ROM %s", path)
        return self.load_bytes(data, bus)
