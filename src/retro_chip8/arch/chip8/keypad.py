# src/retro_chip8/arch/chip8/keypad.py
"""
16キーの16進キーパッド。

    1 2 3 C
    4 5 6 D
    7 8 9 E
    A 0 B F

物理キーからキー値への変換はホスト側（ui層）の責務です。
"""
from typing import Callable, List, Optional

KEY_COUNT = 16

# @intent:responsibility キーの押下状態と、次のキー押下を一度だけ通知するコールバックを保持します。
class Keypad:
    def __init__(self):
        self._held: List[bool] = [False] * KEY_COUNT
        # キー待ち命令が登録する一回限りのコールバック
        self.on_next_key_press: Optional[Callable[[int], None]] = None

    def is_pressed(self, key: int) -> bool:
        # 範囲外のキー値は押下されていないものとして扱う
        if not 0 <= key < KEY_COUNT:
            return False
        return self._held[key]

    # @intent:responsibility キーを押下状態にし、待機中のコールバックがあれば一度だけ呼び出してクリアします。
    def press(self, key: int) -> None:
        self._check_key(key)
        self._held[key] = True

        callback = self.on_next_key_press
        if callback is not None:
            self.on_next_key_press = None
            callback(key)

    def release(self, key: int) -> None:
        self._check_key(key)
        self._held[key] = False

    def release_all(self) -> None:
        self._held = [False] * KEY_COUNT

    @property
    def awaiting_press(self) -> bool:
        return self.on_next_key_press is not None

    def _check_key(self, key: int) -> None:
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"Key value {key} is outside 0x0-0xF.")
