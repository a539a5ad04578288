# retro_chip8/transport/bus.py
"""
Transport Layer (共通バス)

このモジュールは、システム全体のメモリアドレス空間を抽象化し、
読み書きアクセスを適切なデバイスに委譲する責務を負います。
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple

from retro_chip8.common.errors import MemoryAccessError

# @intent:responsibility バスの抽象デバイスインターフェースを定義します。
class Device(ABC):
    """
    バスに接続されるデバイスの抽象基底クラス。
    全てのデバイスはreadとwriteのインターフェースを実装する必要があります。
    """
    # @intent:responsibility 指定されたアドレスから8bitのデータを読み出す責務を負います。
    # @intent:pre-condition アドレスはデバイスの有効範囲内である必要があります。
    @abstractmethod
    def read(self, address: int) -> int:
        """
        指定されたアドレスから8bitのデータを読み出します。
        アドレスはデバイス内でのオフセットとして扱われます。
        """
        pass

    # @intent:responsibility 指定されたアドレスに8bitのデータを書き込みます。
    @abstractmethod
    def write(self, address: int, data: int) -> None:
        pass

# @intent:responsibility 基本的なRAMデバイスの機能を提供します。
class RAM(Device):
    """
    範囲チェック付きのRAMデバイス。CHIP-8の4KBメモリ本体として使用します。
    """
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("RAM size must be a positive integer.")
        self._memory = bytearray(size)
        self._size = size

    def read(self, address: int) -> int:
        if not 0 <= address < self._size:
            raise MemoryAccessError(f"Address {address:#06x} out of bounds for RAM of size {self._size}.")
        return self._memory[address]

    def write(self, address: int, data: int) -> None:
        if not 0 <= address < self._size:
            raise MemoryAccessError(f"Address {address:#06x} out of bounds for RAM of size {self._size}.")
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        self._memory[address] = data

    def get_size(self) -> int:
        return self._size

# @intent:responsibility メモリアドレス空間を管理し、デバイスへのアクセスをディスパッチする共通バス。
class Bus:
    """
    メモリアドレス空間を管理し、デバイスへのアクセスをディスパッチする共通バス。
    """
    def __init__(self):
        # メモリマップ: (start_address, end_address, device) のタプルリスト
        self._memory_map: List[Tuple[int, int, Device]] = []

    # @intent:responsibility 指定されたアドレス範囲にデバイスを登録します。
    # @intent:pre-condition start_address <= end_addressかつ非負であり、deviceはDeviceのインスタンスである必要があります。
    # @intent:rationale アドレス範囲の重複チェックは行いません。システム構築側（SystemBuilder）の責務とします。
    def register_device(self, start_address: int, end_address: int, device: Device) -> None:
        if not (0 <= start_address <= end_address):
            raise ValueError("Invalid address range: start_address must be <= end_address and non-negative.")
        if not isinstance(device, Device):
            raise TypeError("Device must be an instance of a class derived from Device.")

        if isinstance(device, RAM):
            expected_size = end_address - start_address + 1
            if device.get_size() != expected_size:
                raise ValueError(
                    f"Registered {type(device).__name__} device size ({device.get_size()} bytes) does not match "
                    f"the specified address range size ({expected_size} bytes)."
                )

        self._memory_map.append((start_address, end_address, device))

    # @intent:post-condition デバイスが見つからなかった場合、MemoryAccessErrorを発生させます。
    def _find_device(self, address: int) -> Tuple[Device, int]:
        for start, end, device in self._memory_map:
            if start <= address <= end:
                return device, address - start
        raise MemoryAccessError(f"Address {address:#06x} not mapped to any device.")

    def read(self, address: int) -> int:
        device, offset = self._find_device(address)
        return device.read(offset)

    def write(self, address: int, data: int) -> None:
        device, offset = self._find_device(address)
        device.write(offset, data)

    # @intent:responsibility ビッグエンディアンの16ビットワードを読み出します。
    def read_word(self, address: int) -> int:
        """Big-endian 16-bit read."""
        return (self.read(address) << 8) | self.read(address + 1)

    # @intent:responsibility 連続したバイト列を指定アドレスから書き込みます（フォント・ROMのロード用）。
    def load(self, address: int, data: Iterable[int]) -> int:
        """
        `data` を `address` から順に書き込み、書き込んだバイト数を返します。
        """
        count = 0
        for offset, byte in enumerate(data):
            self.write(address + offset, byte)
            count += 1
        return count
