# src/retro_chip8/arch/chip8/timers.py
"""
ディレイタイマーとサウンドタイマー。
"""
from dataclasses import dataclass

# @intent:constant タイマーの減算レート（Hz）。論理フレームレートと同一。
TIMER_HZ = 60

# @intent:responsibility 60Hzで1ずつ減算される2つの8ビットカウンタを保持します。
@dataclass
class Timers:
    delay: int = 0
    sound: int = 0

    # @intent:responsibility 各タイマーを1だけ減算します。0未満にはなりません。
    def tick(self) -> None:
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1

    @property
    def sound_active(self) -> bool:
        return self.sound > 0
