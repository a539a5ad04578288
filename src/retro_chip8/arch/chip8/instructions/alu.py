# src/retro_chip8/arch/chip8/instructions/alu.py
"""
算術論理演算命令の実装。

全ての演算結果は8ビットで折り返します（飽和・例外はありません）。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.arch.chip8.state import FLAG_REGISTER
from .base import ExecutionContext

# --- LD Vx, byte (6xkk) ---
def execute_ld_vx_byte(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.v[op.x] = op.kk

# --- ADD Vx, byte (7xkk) ---
# @intent:responsibility 即値を加算します。キャリーフラグは変化しません。
def execute_add_vx_byte(ctx: ExecutionContext, op: Operation) -> None:
    v = ctx.state.v
    v[op.x] = (v[op.x] + op.kk) & 0xFF

# --- LD Vx, Vy (8xy0) ---
def execute_ld_vx_vy(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.v[op.x] = ctx.state.v[op.y]

# --- OR / AND / XOR (8xy1 - 8xy3) ---
def execute_or(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.v[op.x] |= ctx.state.v[op.y]

def execute_and(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.v[op.x] &= ctx.state.v[op.y]

def execute_xor(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.v[op.x] ^= ctx.state.v[op.y]

# --- ADD Vx, Vy (8xy4) ---
# @intent:responsibility 加算を行い、255を超えた場合にVFへキャリーを設定します。
def execute_add_vx_vy(ctx: ExecutionContext, op: Operation) -> None:
    v = ctx.state.v
    total = v[op.x] + v[op.y]
    v[FLAG_REGISTER] = 1 if total > 0xFF else 0
    v[op.x] = total & 0xFF

# --- SUB Vx, Vy (8xy5) ---
# @intent:responsibility Vx - Vy。Vx > Vy の場合にVF=1（ボローなし）。
# @intent:rationale フラグを先に設定する。x が 0xF の場合は結果で上書きされる。
def execute_sub(ctx: ExecutionContext, op: Operation) -> None:
    v = ctx.state.v
    vx, vy = v[op.x], v[op.y]
    v[FLAG_REGISTER] = 1 if vx > vy else 0
    v[op.x] = (vx - vy) & 0xFF

# --- SHR Vx (8xy6) ---
def execute_shr(ctx: ExecutionContext, op: Operation) -> None:
    v = ctx.state.v
    vx = v[op.x]
    v[FLAG_REGISTER] = vx & 0x01
    v[op.x] = vx >> 1

# --- SUBN Vx, Vy (8xy7) ---
# @intent:responsibility Vy - Vx。Vy > Vx の場合にVF=1。
def execute_subn(ctx: ExecutionContext, op: Operation) -> None:
    v = ctx.state.v
    vx, vy = v[op.x], v[op.y]
    v[FLAG_REGISTER] = 1 if vy > vx else 0
    v[op.x] = (vy - vx) & 0xFF

# --- SHL Vx (8xyE) ---
# @intent:responsibility 左シフト。VFには最上位ビットをマスクした値（0x80または0）をそのまま格納します。
def execute_shl(ctx: ExecutionContext, op: Operation) -> None:
    v = ctx.state.v
    vx = v[op.x]
    v[FLAG_REGISTER] = vx & 0x80
    v[op.x] = (vx << 1) & 0xFF

# --- RND Vx, byte (Cxkk) ---
def execute_rnd(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.v[op.x] = ctx.rng.randrange(0x100) & op.kk
