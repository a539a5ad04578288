# retro_chip8/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、CPUの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from retro_chip8.transport.bus import Bus
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import CpuState

# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    全てのCPUエミュレーションの基底となる抽象クラス。
    Busとのインターフェース、基本的な状態管理、命令サイクルの抽象化を提供します。
    """
    # @intent:pre-condition `bus`は有効なBusオブジェクトである必要があります。
    def __init__(self, bus: Bus):
        self._bus = bus
        self._state: CpuState = self._create_initial_state()
        self._instruction_count: int = 0
        # @intent:rationale Stateオブジェクトの直接操作を避けるため、protectedな命名規則を採用。
        #                  外部からのアクセスは`get_state()`メソッドを介して行う。

    # @intent:responsibility 初期状態のCpuStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        """
        CPUの初期状態を生成して返します。
        具体的なCPUアーキテクチャはこのメソッドを実装し、
        そのアーキテクチャに特化したCpuStateのサブクラスを返します。
        """
        pass

    # @intent:responsibility CPUをリセットし、初期状態に戻します。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._instruction_count = 0

    def get_state(self) -> CpuState:
        """
        現在のCPUの状態（レジスタ値など）を返します。
        """
        return self._state

    @property
    def instruction_count(self) -> int:
        return self._instruction_count

    # @intent:responsibility メモリから次の命令（オペコード）をフェッチします。
    @abstractmethod
    def _fetch(self) -> int:
        """
        現在のPCからメモリの次の命令（オペコード）をフェッチし、その値を返します。
        PCの更新は `_update_pc` で行います。
        """
        pass

    # @intent:responsibility フェッチしたオペコードを解析し、Operationオブジェクトに変換します。
    @abstractmethod
    def _decode(self, opcode: int) -> Operation:
        pass

    # @intent:responsibility デコードされた命令を実行し、CPUの状態を更新します。
    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    # @intent:responsibility CPUを1命令サイクル進め、実行した命令を返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（停止判定→フェッチ→デコード→PC更新→実行）を定義します。
    #                  アーキテクチャ固有の振る舞い（キー待ちによる停止など）はフックメソッドで対応します。
    def step(self) -> Optional[Operation]:
        """
        CPUを1命令サイクル進めます。停止中で命令を実行しなかった場合はNoneを返します。
        """
        # 1. 停止判定 (Hook)
        if self._is_halted():
            return None

        # 2. フェッチ
        opcode = self._fetch()

        # 3. デコード
        operation = self._decode(opcode)

        # 4. PC更新 (Hook)
        # ジャンプ/コール命令が無条件に上書きできるよう、実行前に命令長分進める
        self._update_pc(operation)

        # 5. 実行
        self._execute(operation)

        self._instruction_count += 1
        return operation

    # @intent:return 命令のフェッチを行うべきでない場合True。
    def _is_halted(self) -> bool:
        """
        停止状態の判定。デフォルトは常に実行可能（False）。
        """
        return False

    # @intent:responsibility 命令実行前にPCを更新します。
    def _update_pc(self, operation: Operation) -> None:
        self._state.pc = (self._state.pc + operation.length) & 0xFFFF

    @abstractmethod
    def get_register_map(self) -> Dict[str, int]:
        """
        現在のレジスタ値を辞書形式で返す。
        エラー報告やホスト側の表示がCPUの内部構造を知らなくても値を扱えるようにするために使用される。
        """
        pass
