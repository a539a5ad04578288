# src/retro_chip8/arch/chip8/instructions/maps.py
"""
オペコードと命令実装のマッピング定義。
"""
from typing import Optional

from . import alu
from . import control
from . import graphics
from . import keys
from . import load
from .base import Opcode

# @intent:map 0nnnグループ（完全一致）。一致しないものはSYSとして扱います。
SYSTEM_MAP = {
    0x00E0: Opcode.CLS,
    0x00EE: Opcode.RET,
}

# @intent:map 8xyNグループ（下位ニブル）。
ALU_MAP = {
    0x0: Opcode.LD_VX_VY,
    0x1: Opcode.OR,
    0x2: Opcode.AND,
    0x3: Opcode.XOR,
    0x4: Opcode.ADD_VX_VY,
    0x5: Opcode.SUB,
    0x6: Opcode.SHR,
    0x7: Opcode.SUBN,
    0xE: Opcode.SHL,
}

# @intent:map ExNNグループ（下位バイト）。
KEY_MAP = {
    0x9E: Opcode.SKP,
    0xA1: Opcode.SKNP,
}

# @intent:map FxNNグループ（下位バイト）。
MISC_MAP = {
    0x07: Opcode.LD_VX_DT,
    0x0A: Opcode.LD_VX_K,
    0x15: Opcode.LD_DT_VX,
    0x18: Opcode.LD_ST_VX,
    0x1E: Opcode.ADD_I_VX,
    0x29: Opcode.LD_F_VX,
    0x33: Opcode.LD_B_VX,
    0x55: Opcode.LD_I_VX,
    0x65: Opcode.LD_VX_I,
}

def _decode_system(opcode: int) -> Optional[Opcode]:
    return SYSTEM_MAP.get(opcode, Opcode.SYS)

def _decode_alu(opcode: int) -> Optional[Opcode]:
    return ALU_MAP.get(opcode & 0x000F)

def _decode_key(opcode: int) -> Optional[Opcode]:
    return KEY_MAP.get(opcode & 0x00FF)

def _decode_misc(opcode: int) -> Optional[Opcode]:
    return MISC_MAP.get(opcode & 0x00FF)

def _fixed(kind: Opcode):
    return lambda opcode: kind

# @intent:map 上位ニブル（opcode & 0xF000）から種別判定関数へのマッピングテーブル。
# @intent:rationale 判定関数がNoneを返した場合は「既知グループ内の未定義コード」を意味します。
DECODE_MAP = {
    0x0000: _decode_system,
    0x1000: _fixed(Opcode.JP),
    0x2000: _fixed(Opcode.CALL),
    0x3000: _fixed(Opcode.SE_VX_BYTE),
    0x4000: _fixed(Opcode.SNE_VX_BYTE),
    0x5000: _fixed(Opcode.SE_VX_VY),
    0x6000: _fixed(Opcode.LD_VX_BYTE),
    0x7000: _fixed(Opcode.ADD_VX_BYTE),
    0x8000: _decode_alu,
    0x9000: _fixed(Opcode.SNE_VX_VY),
    0xA000: _fixed(Opcode.LD_I),
    0xB000: _fixed(Opcode.JP_V0),
    0xC000: _fixed(Opcode.RND),
    0xD000: _fixed(Opcode.DRW),
    0xE000: _decode_key,
    0xF000: _decode_misc,
}

# @intent:map 命令種別から実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Control
    Opcode.SYS: control.execute_sys,
    Opcode.RET: control.execute_ret,
    Opcode.JP: control.execute_jp,
    Opcode.CALL: control.execute_call,
    Opcode.SE_VX_BYTE: control.execute_se_vx_byte,
    Opcode.SNE_VX_BYTE: control.execute_sne_vx_byte,
    Opcode.SE_VX_VY: control.execute_se_vx_vy,
    Opcode.SNE_VX_VY: control.execute_sne_vx_vy,
    Opcode.JP_V0: control.execute_jp_v0,
    Opcode.IGNORED: control.execute_ignored,

    # ALU
    Opcode.LD_VX_BYTE: alu.execute_ld_vx_byte,
    Opcode.ADD_VX_BYTE: alu.execute_add_vx_byte,
    Opcode.LD_VX_VY: alu.execute_ld_vx_vy,
    Opcode.OR: alu.execute_or,
    Opcode.AND: alu.execute_and,
    Opcode.XOR: alu.execute_xor,
    Opcode.ADD_VX_VY: alu.execute_add_vx_vy,
    Opcode.SUB: alu.execute_sub,
    Opcode.SHR: alu.execute_shr,
    Opcode.SUBN: alu.execute_subn,
    Opcode.SHL: alu.execute_shl,
    Opcode.RND: alu.execute_rnd,

    # Load/Store
    Opcode.LD_I: load.execute_ld_i,
    Opcode.ADD_I_VX: load.execute_add_i_vx,
    Opcode.LD_F_VX: load.execute_ld_f_vx,
    Opcode.LD_VX_DT: load.execute_ld_vx_dt,
    Opcode.LD_DT_VX: load.execute_ld_dt_vx,
    Opcode.LD_ST_VX: load.execute_ld_st_vx,
    Opcode.LD_B_VX: load.execute_ld_b_vx,
    Opcode.LD_I_VX: load.execute_ld_i_vx,
    Opcode.LD_VX_I: load.execute_ld_vx_i,

    # Graphics
    Opcode.CLS: graphics.execute_cls,
    Opcode.DRW: graphics.execute_drw,

    # Keys
    Opcode.SKP: keys.execute_skp,
    Opcode.SKNP: keys.execute_sknp,
    Opcode.LD_VX_K: keys.execute_ld_vx_k,
}
