# src/retro_chip8/arch/chip8/instructions/keys.py
"""
キー入力命令の実装。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.arch.chip8.state import ExecutionMode
from .base import ExecutionContext, skip_next

# --- SKP Vx (Ex9E) ---
def execute_skp(ctx: ExecutionContext, op: Operation) -> None:
    if ctx.keypad.is_pressed(ctx.state.v[op.x]):
        skip_next(ctx.state)

# --- SKNP Vx (ExA1) ---
def execute_sknp(ctx: ExecutionContext, op: Operation) -> None:
    if not ctx.keypad.is_pressed(ctx.state.v[op.x]):
        skip_next(ctx.state)

# --- LD Vx, K (Fx0A) ---
# @intent:responsibility キー待ち状態へ遷移し、格納先レジスタ番号を記録します。
# @intent:rationale スレッドを止めず、状態フラグで命令フェッチとタイマー更新を抑止します。
#                  キーパッドには一回限りのコールバックとしてCPUの解決処理を登録します。
def execute_ld_vx_k(ctx: ExecutionContext, op: Operation) -> None:
    ctx.state.mode = ExecutionMode.AWAITING_KEY
    ctx.state.awaiting_key_register = op.x
    ctx.keypad.on_next_key_press = ctx.resolve_key_wait
