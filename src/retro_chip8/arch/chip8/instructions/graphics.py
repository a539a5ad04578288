# src/retro_chip8/arch/chip8/instructions/graphics.py
"""
画面制御命令（クリア、スプライト描画）の実装。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.arch.chip8.state import FLAG_REGISTER
from .base import ExecutionContext

SPRITE_WIDTH = 8

# --- CLS (00E0) ---
def execute_cls(ctx: ExecutionContext, op: Operation) -> None:
    ctx.framebuffer.clear()

# --- DRW Vx, Vy, nibble (Dxyn) ---
# @intent:responsibility メモリ[I]からn行・幅8ビットのスプライトを読み出し、XORで描画します。
# @intent:post-condition いずれかのピクセルを消去した場合VF=1、それ以外はVF=0。
def execute_drw(ctx: ExecutionContext, op: Operation) -> None:
    state = ctx.state
    v = state.v
    # 列の基準には既定で行側の原点レジスタ(Vy)を用いる。sprite_origin_quirk=False でVxを使う。
    origin_x = v[op.y] if ctx.sprite_origin_quirk else v[op.x]
    origin_y = v[op.y]

    v[FLAG_REGISTER] = 0
    for row in range(op.n):
        sprite = ctx.bus.read(state.i + row)
        for col in range(SPRITE_WIDTH):
            if sprite & 0x80:
                if ctx.framebuffer.set_pixel(origin_x + col, origin_y + row):
                    v[FLAG_REGISTER] = 1
            sprite <<= 1
