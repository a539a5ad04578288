# src/retro_chip8/arch/chip8/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.common.errors import StackOverflowError, StackUnderflowError
from .base import ExecutionContext, skip_next

# --- SYS (0nnn) ---
# @intent:responsibility 旧式のマシン語サブルーチン呼び出し。何もしません。
def execute_sys(ctx: ExecutionContext, op: Operation) -> None:
    pass

# --- RET (00EE) ---
# @intent:responsibility コールスタックからPCを復元します。
def execute_ret(ctx: ExecutionContext, op: Operation) -> None:
    state = ctx.state
    if not state.stack:
        raise StackUnderflowError("Return with an empty call stack", pc=(state.pc - 2) & 0xFFFF)
    state.pc = state.stack.pop()

# --- JP addr (1nnn) ---
def execute_jp(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.pc = op.nnn

# --- CALL addr (2nnn) ---
# @intent:responsibility 現在のPC（次の命令）をプッシュしてからnnnへジャンプします。
def execute_call(ctx: ExecutionContext, op: Operation) -> None:
    state = ctx.state
    if ctx.stack_depth is not None and len(state.stack) >= ctx.stack_depth:
        raise StackOverflowError(
            f"Call stack exceeded {ctx.stack_depth} entries", pc=(state.pc - 2) & 0xFFFF
        )
    state.stack.append(state.pc)
    state.pc = op.nnn

# --- JP V0, addr (Bnnn) ---
def execute_jp_v0(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.pc = (op.nnn + ctx.state.v[0]) & 0xFFFF

# --- SE Vx, byte (3xkk) ---
def execute_se_vx_byte(ctx: ExecutionContext, op: Operation) -> None:
    if ctx.state.v[op.x] == op.kk:
        skip_next(ctx.state)

# --- SNE Vx, byte (4xkk) ---
def execute_sne_vx_byte(ctx: ExecutionContext, op: Operation) -> None:
    if ctx.state.v[op.x] != op.kk:
        skip_next(ctx.state)

# --- SE Vx, Vy (5xy0) ---
def execute_se_vx_vy(ctx: ExecutionContext, op: Operation) -> None:
    if ctx.state.v[op.x] == ctx.state.v[op.y]:
        skip_next(ctx.state)

# --- SNE Vx, Vy (9xy0) ---
def execute_sne_vx_vy(ctx: ExecutionContext, op: Operation) -> None:
    if ctx.state.v[op.x] != ctx.state.v[op.y]:
        skip_next(ctx.state)

# --- IGNORED ---
# @intent:responsibility 既知グループ内で未定義の下位コード。0nnnと同様に無視します。
def execute_ignored(ctx: ExecutionContext, op: Operation) -> None:
    pass
