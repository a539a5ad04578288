# retro_chip8/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUの基本的な状態（レジスタ群）を保持するデータ構造を定義します。
"""
from dataclasses import dataclass

# @intent:responsibility CPUのレジスタ状態を保持します。アーキテクチャ固有のレジスタはこれを拡張します。
@dataclass
class CpuState:
    """
    CPUのレジスタ状態を保持するデータクラス。
    これは抽象的な基底状態であり、特定のCPUアーキテクチャに応じて拡張されます。
    """
    pc: int = 0x0000  # Program Counter
    # @intent:rationale 初期値は0x0000とする。CHIP-8ではarch側の状態クラスで0x200に上書きされる。
