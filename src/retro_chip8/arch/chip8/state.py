# src/retro_chip8/arch/chip8/state.py
"""
CHIP-8 CPU固有の状態定義。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from retro_chip8.core.state import CpuState
from retro_chip8.arch.chip8.timers import Timers

# @intent:constant メモリ構成と各種固定値。
MEMORY_SIZE = 0x1000
PROGRAM_START = 0x200
REGISTER_COUNT = 16
FLAG_REGISTER = 0xF
DEFAULT_STACK_DEPTH = 16

# @intent:responsibility 命令フェッチの可否を表す実行モード。
class ExecutionMode(Enum):
    RUNNING = "RUNNING"
    AWAITING_KEY = "AWAITING_KEY"  # Fx0A によるキー待ち

# @intent:responsibility CHIP-8 CPUの全てのレジスタ（V0-VF, I, PC）、スタック、タイマー、実行モードを保持します。
@dataclass
class Chip8CpuState(CpuState):
    """
    CHIP-8 CPUのレジスタ状態を保持するデータクラス。
    """
    pc: int = PROGRAM_START
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)  # V0-VF
    i: int = 0x0000  # Address Register
    stack: List[int] = field(default_factory=list)
    timers: Timers = field(default_factory=Timers)
    mode: ExecutionMode = ExecutionMode.RUNNING
    # キー待ち中に押されたキーを格納するレジスタ番号
    awaiting_key_register: Optional[int] = None

    @property
    def vf(self) -> int:
        return self.v[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value

    @property
    def paused(self) -> bool:
        return self.mode is ExecutionMode.AWAITING_KEY
