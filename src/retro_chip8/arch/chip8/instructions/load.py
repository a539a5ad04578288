# src/retro_chip8/arch/chip8/instructions/load.py
"""
ロード/ストア命令（Iレジスタ、タイマー、メモリ一括転送）の実装。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.arch.chip8.fonts import FONT_BASE_ADDRESS, GLYPH_SIZE
from .base import ExecutionContext

# --- LD I, addr (Annn) ---
def execute_ld_i(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.i = op.nnn

# --- ADD I, Vx (Fx1E) ---
# @intent:rationale Iは16ビットで保持する。メモリ範囲外となった場合は実際のアクセス時にバスが検出する。
def execute_add_i_vx(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.i = (ctx.state.i + ctx.state.v[op.x]) & 0xFFFF

# --- LD F, Vx (Fx29) ---
def execute_ld_f_vx(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.i = FONT_BASE_ADDRESS + ctx.state.v[op.x] * GLYPH_SIZE

# --- LD Vx, DT (Fx07) ---
def execute_ld_vx_dt(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.v[op.x] = ctx.state.timers.delay

# --- LD DT, Vx (Fx15) ---
def execute_ld_dt_vx(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.timers.delay = ctx.state.v[op.x]

# --- LD ST, Vx (Fx18) ---
def execute_ld_st_vx(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.timers.sound = ctx.state.v[op.x]

# --- LD B, Vx (Fx33) ---
# @intent:responsibility Vxの10進表現（百・十・一の位）をI, I+1, I+2に格納します。
def execute_ld_b_vx(ctx: ExecutionContext, op: Operation) -> None:
    value = ctx.state.v[op.x]
    base = ctx.state.i
    ctx.bus.write(base, value // 100)
    ctx.bus.write(base + 1, (value // 10) % 10)
    ctx.bus.write(base + 2, value % 10)

# --- LD [I], Vx (Fx55) ---
# @intent:responsibility V0..Vxをメモリ[I]以降に格納します。Iは変化しません。
def execute_ld_i_vx(ctx: ExecutionContext, op: Operation) -> None:
    base = ctx.state.i
    for index in range(op.x + 1):
        ctx.bus.write(base + index, ctx.state.v[index])

# --- LD Vx, [I] (Fx65) ---
def execute_ld_vx_i(ctx: ExecutionContext, op: Operation) -> None:
    base = ctx.state.i
    for index in range(op.x + 1):
        ctx.state.v[index] = ctx.bus.read(base + index)
