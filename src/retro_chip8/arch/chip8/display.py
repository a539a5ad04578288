# src/retro_chip8/arch/chip8/display.py
"""
CHIP-8のモノクロフレームバッファ。
"""
from typing import Iterator, Tuple

DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32

# @intent:responsibility 64x32の2値ピクセルを保持し、XOR描画と折り返しアドレッシングを提供します。
class Framebuffer:
    """
    ピクセルは `x + y * width` のフラットな配列に 0/1 で格納されます。
    """
    def __init__(self, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT):
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height)

    # @intent:responsibility 座標を片側1回だけ折り返し、ピクセルをXORで反転します。
    # @intent:return 反転後のピクセルが0（＝既存ピクセルを消去した、衝突）の場合True。
    def set_pixel(self, x: int, y: int) -> bool:
        """
        範囲を超えた座標は幅（高さ）を1回だけ減算し、負の座標は1回だけ加算します。
        それでも画面外となる座標は描画せず、Falseを返します。
        """
        if x >= self.width:
            x -= self.width
        elif x < 0:
            x += self.width

        if y >= self.height:
            y -= self.height
        elif y < 0:
            y += self.height

        # 1回折り返しても画面外の座標は描画しない。フラットな添字 x + y * width で
        # 別の画素へ回り込ませる方式とは意図的に異なる
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False

        index = x + (y * self.width)
        self._pixels[index] ^= 1
        return not self._pixels[index]

    def get_pixel(self, x: int, y: int) -> int:
        return self._pixels[x + (y * self.width)]

    def clear(self) -> None:
        self._pixels = bytearray(self.width * self.height)

    def is_blank(self) -> bool:
        return not any(self._pixels)

    # @intent:responsibility 点灯しているピクセルの座標を遅延評価で列挙します。
    # @intent:rationale 呼び出しごとに現在のバッファから生成し直すため、描画側は毎フレーム再利用できます。
    def lit_pixels(self) -> Iterator[Tuple[int, int]]:
        for index, value in enumerate(self._pixels):
            if value:
                yield index % self.width, index // self.width
