# retro_chip8/core/operation.py
"""
デコード済み命令の不変レコード

このモジュールは、フェッチしたオペコードをデコードした結果を保持するデータ構造を定義します。
"""
from dataclasses import dataclass
from enum import Enum


# @intent:responsibility デコードされた命令の詳細を記録します。
@dataclass(frozen=True) # 不変データ構造
class Operation:
    """
    デコード済みの命令。`kind` に命令種別（アーキテクチャ固有のEnum）を、
    残りのフィールドにオペコードから切り出したビットフィールドを保持します。
    """
    opcode: int      # 生の16ビットオペコード
    kind: Enum       # 例: Opcode.JP
    x: int = 0       # 0x0F00
    y: int = 0       # 0x00F0
    kk: int = 0      # 0x00FF
    nnn: int = 0     # 0x0FFF
    n: int = 0       # 0x000F
    length: int = 2  # 命令のバイト長

    @property
    def mnemonic(self) -> str:
        return self.kind.name

    def __str__(self) -> str:
        return f"{self.opcode:04X} {self.mnemonic}"
