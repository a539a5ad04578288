# src/retro_chip8/arch/chip8/instructions/base.py
"""
CHIP-8命令実装用の共通定義とユーティリティ。
"""
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from retro_chip8.core.operation import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState
from retro_chip8.arch.chip8.display import Framebuffer
from retro_chip8.arch.chip8.keypad import Keypad

# @intent:responsibility デコード結果の命令種別。ニーモニックは慣用のアセンブラ表記に従います。
class Opcode(Enum):
    SYS = auto()          # 0nnn
    CLS = auto()          # 00E0
    RET = auto()          # 00EE
    JP = auto()           # 1nnn
    CALL = auto()         # 2nnn
    SE_VX_BYTE = auto()   # 3xkk
    SNE_VX_BYTE = auto()  # 4xkk
    SE_VX_VY = auto()     # 5xy0
    LD_VX_BYTE = auto()   # 6xkk
    ADD_VX_BYTE = auto()  # 7xkk
    LD_VX_VY = auto()     # 8xy0
    OR = auto()           # 8xy1
    AND = auto()          # 8xy2
    XOR = auto()          # 8xy3
    ADD_VX_VY = auto()    # 8xy4
    SUB = auto()          # 8xy5
    SHR = auto()          # 8xy6
    SUBN = auto()         # 8xy7
    SHL = auto()          # 8xyE
    SNE_VX_VY = auto()    # 9xy0
    LD_I = auto()         # Annn
    JP_V0 = auto()        # Bnnn
    RND = auto()          # Cxkk
    DRW = auto()          # Dxyn
    SKP = auto()          # Ex9E
    SKNP = auto()         # ExA1
    LD_VX_DT = auto()     # Fx07
    LD_VX_K = auto()      # Fx0A
    LD_DT_VX = auto()     # Fx15
    LD_ST_VX = auto()     # Fx18
    ADD_I_VX = auto()     # Fx1E
    LD_F_VX = auto()      # Fx29
    LD_B_VX = auto()      # Fx33
    LD_I_VX = auto()      # Fx55
    LD_VX_I = auto()      # Fx65
    IGNORED = auto()      # 既知グループ内の未定義下位コード（0nnnと同様に無視）

# @intent:responsibility 命令実行に必要な共有状態と周辺機器への参照をまとめます。
# @intent:rationale 命令関数のシグネチャを (ctx, op) に統一し、ディスパッチテーブルから一様に呼び出せるようにします。
@dataclass
class ExecutionContext:
    state: Chip8CpuState
    bus: Bus
    framebuffer: Framebuffer
    keypad: Keypad
    rng: random.Random
    resolve_key_wait: Callable[[int], None]
    stack_depth: Optional[int] = None  # Noneの場合は無制限
    sprite_origin_quirk: bool = True

# @intent:utility_function オペコードから固定位置のビットフィールドを切り出し、Operationを生成します。
def make_operation(opcode: int, kind: Opcode) -> Operation:
    return Operation(
        opcode=opcode,
        kind=kind,
        x=(opcode & 0x0F00) >> 8,
        y=(opcode & 0x00F0) >> 4,
        kk=opcode & 0x00FF,
        nnn=opcode & 0x0FFF,
        n=opcode & 0x000F,
    )

# @intent:utility_function 次の命令をスキップします（PCは既に2進んでいるため、さらに2加算）。
def skip_next(state: Chip8CpuState) -> None:
    state.pc = (state.pc + 2) & 0xFFFF
