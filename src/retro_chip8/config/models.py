from dataclasses import dataclass, field
from typing import Dict, Optional

# 物理キー名 -> キー値
#   1 2 3 4      1 2 3 C
#   Q W E R  ->  4 5 6 D
#   A S D F      7 8 9 E
#   Z X C V      A 0 B F
DEFAULT_KEYMAP: Dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}

@dataclass
class DisplayConfig:
    scale: int = 10
    foreground: str = "#000000"
    background: str = "#FFFFFF"

@dataclass
class AudioConfig:
    enabled: bool = True
    tone_frequency: int = 40  # Hz
    volume: float = 0.25  # 0.0 - 1.0

@dataclass
class MachineConfig:
    speed: int = 10  # 1フレームあたりの命令数
    stack_depth: Optional[int] = 16  # None で無制限
    sprite_origin_quirk: bool = True
    strict_opcodes: bool = False
    rom: Optional[str] = None
    display: DisplayConfig = field(default_factory=DisplayConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    keymap: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_KEYMAP))
