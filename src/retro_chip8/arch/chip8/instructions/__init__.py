"""
CHIP-8命令セット実装パッケージ。
"""
import logging

from retro_chip8.core.operation import Operation
from retro_chip8.common.errors import UnknownOpcodeError
from .base import ExecutionContext, Opcode, make_operation
from .maps import DECODE_MAP, EXECUTE_MAP

logger = logging.getLogger(__name__)

# @intent:responsibility CHIP-8のオペコードをデコードします。
def decode_opcode(opcode: int, strict: bool = False) -> Operation:
    """
    16ビットのオペコードを上位ニブルで振り分け、Operationオブジェクトを返します。
    上位ニブルがどのグループにも該当しない場合はUnknownOpcodeErrorを送出します。
    既知グループ内の未定義コードは無視（IGNORED）されますが、`strict` がTrueの場合は同様に送出します。
    """
    if not 0 <= opcode <= 0xFFFF:
        raise UnknownOpcodeError(opcode)

    decoder = DECODE_MAP.get(opcode & 0xF000)
    if decoder is None:
        raise UnknownOpcodeError(opcode)

    kind = decoder(opcode)
    if kind is None:
        if strict:
            raise UnknownOpcodeError(opcode)
        logger.debug("Ignoring undefined opcode %04X", opcode)
        kind = Opcode.IGNORED
    return make_operation(opcode, kind)

# @intent:responsibility デコードされたCHIP-8命令を実行します。
def execute_instruction(operation: Operation, ctx: ExecutionContext) -> None:
    """
    デコードされたCHIP-8命令を実行し、CPUの状態を変更します。
    """
    executor = EXECUTE_MAP.get(operation.kind)
    if executor is None:
        raise UnknownOpcodeError(operation.opcode)
    executor(ctx, operation)

__all__ = ["ExecutionContext", "Opcode", "decode_opcode", "execute_instruction"]
