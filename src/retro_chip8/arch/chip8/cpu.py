# src/retro_chip8/arch/chip8/cpu.py
"""
CHIP-8 CPUエミュレーションの中心モジュール。
"""
import logging
import random
from typing import Dict, Optional

from retro_chip8.core.cpu import AbstractCpu
from retro_chip8.core.operation import Operation
from retro_chip8.common.errors import EmulationError
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState, ExecutionMode, DEFAULT_STACK_DEPTH
from retro_chip8.arch.chip8.display import Framebuffer
from retro_chip8.arch.chip8.keypad import Keypad
from retro_chip8.arch.chip8.fonts import FONTSET, FONT_BASE_ADDRESS
from retro_chip8.arch.chip8.instructions import ExecutionContext, decode_opcode, execute_instruction

logger = logging.getLogger(__name__)

# @intent:responsibility CHIP-8 CPUの具体的なエミュレーションロジック（フェッチ、デコード、実行）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 CPUをエミュレートするクラス。
    フレームバッファとキーパッドは命令から直接操作される周辺機器として保持します。
    """
    def __init__(
        self,
        bus: Bus,
        framebuffer: Optional[Framebuffer] = None,
        keypad: Optional[Keypad] = None,
        rng: Optional[random.Random] = None,
        stack_depth: Optional[int] = DEFAULT_STACK_DEPTH,
        sprite_origin_quirk: bool = True,
        strict_opcodes: bool = False,
    ):
        self.framebuffer = framebuffer if framebuffer is not None else Framebuffer()
        self.keypad = keypad if keypad is not None else Keypad()
        self._rng = rng if rng is not None else random.Random()
        self._stack_depth = stack_depth
        self._sprite_origin_quirk = sprite_origin_quirk
        self._strict_opcodes = strict_opcodes
        super().__init__(bus)
        self._ctx = self._create_context()

    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState()

    # @intent:responsibility 状態と周辺機器を初期化します。メモリ内容は保持されます。
    def reset(self) -> None:
        super().reset()
        self.framebuffer.clear()
        self.keypad.release_all()
        self.keypad.on_next_key_press = None
        self._ctx = self._create_context()

    def _create_context(self) -> ExecutionContext:
        return ExecutionContext(
            state=self._state,
            bus=self._bus,
            framebuffer=self.framebuffer,
            keypad=self.keypad,
            rng=self._rng,
            resolve_key_wait=self._resolve_key_wait,
            stack_depth=self._stack_depth,
            sprite_origin_quirk=self._sprite_origin_quirk,
        )

    # @intent:responsibility フォントデータをインタプリタ領域（0x000-）に書き込みます。
    def load_fontset(self) -> None:
        self._bus.load(FONT_BASE_ADDRESS, FONTSET)
        logger.debug("Loaded %d font bytes at %#05x", len(FONTSET), FONT_BASE_ADDRESS)

    @property
    def paused(self) -> bool:
        return self._state.paused

    def _is_halted(self) -> bool:
        return self._state.paused

    # @intent:responsibility PCが指す2バイトをビッグエンディアンで結合してオペコードとします。
    def _fetch(self) -> int:
        return self._bus.read_word(self._state.pc)

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode, strict=self._strict_opcodes)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._ctx)

    # @intent:responsibility 1命令をフェッチして実行します。キー待ち中は何もしません。
    def step(self) -> Optional[Operation]:
        pc = self._state.pc
        try:
            return super().step()
        except EmulationError as e:
            if e.pc is None:
                e.pc = pc
            raise

    # @intent:responsibility 与えられたオペコードを現在の状態に対して実行します（PCは実行前に2進みます）。
    def execute(self, opcode: int) -> Operation:
        pc = self._state.pc
        try:
            operation = self._decode(opcode)
            self._update_pc(operation)
            self._execute(operation)
        except EmulationError as e:
            if e.pc is None:
                e.pc = pc
            raise
        self._instruction_count += 1
        return operation

    # @intent:responsibility キー待ち（Fx0A）を押下されたキー値で解決し、実行を再開します。
    # @intent:pre-condition キーパッドの一回限りのコールバックとしてのみ呼ばれます。
    def _resolve_key_wait(self, key: int) -> None:
        state = self._state
        if not state.paused or state.awaiting_key_register is None:
            return
        logger.debug("Key %X delivered to V%X", key, state.awaiting_key_register)
        state.v[state.awaiting_key_register] = key
        state.awaiting_key_register = None
        state.mode = ExecutionMode.RUNNING

    # @intent:responsibility エラー報告・表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{index:X}": value for index, value in enumerate(s.v)}
        registers.update({
            "I": s.i, "PC": s.pc, "SP": len(s.stack), "DT": s.timers.delay, "ST": s.timers.sound
        })
        return registers
