"""
エミュレーション中に発生する例外の定義。

CPU、バス、ローダーから送出され、スケジューラ経由でホストへ伝播します。
"""
from typing import Optional


# @intent:responsibility エミュレーションセッションを終了させる全ての致命的エラーの基底クラス。
class EmulationError(Exception):
    """
    エミュレーションの継続が不可能になったことを示す例外。
    `pc` には発生時点のプログラムカウンタ（判明している場合）が入ります。
    """
    def __init__(self, message: str, pc: Optional[int] = None):
        super().__init__(message)
        self.pc = pc


# @intent:responsibility 未定義の上位ニブルを持つオペコードを検出したことを示します。
class UnknownOpcodeError(EmulationError):
    def __init__(self, opcode: int, pc: Optional[int] = None):
        super().__init__(f"Unknown opcode {opcode:#06x}", pc)
        self.opcode = opcode


# @intent:responsibility 空のコールスタックからの復帰を示します。
class StackUnderflowError(EmulationError):
    pass


# @intent:responsibility コールスタックの段数上限を超えたサブルーチン呼び出しを示します。
class StackOverflowError(EmulationError):
    pass


# @intent:responsibility メモリ範囲外へのアクセスを示します。
# @intent:rationale 既存の呼び出し側が IndexError として扱えるよう、IndexError も継承します。
class MemoryAccessError(EmulationError, IndexError):
    pass


# @intent:responsibility プログラム領域に収まらないイメージのロードを示します。
class ProgramTooLargeError(EmulationError, ValueError):
    pass
