"""
Display View モジュール。

フレームバッファの点灯ピクセルを、拡大率に応じた矩形として描画するウィジェットを提供します。
"""
from typing import Optional, Tuple

from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QPainter, QColor, QPaintEvent

from retro_chip8.arch.chip8.display import Framebuffer, DISPLAY_WIDTH, DISPLAY_HEIGHT
from retro_chip8.scheduler.scheduler import Renderer

# @intent:responsibility フレームバッファを width*scale x height*scale の面へ描画します。
class DisplayView(QWidget):
    """
    `render()` で受け取ったフレームバッファを次回の paintEvent で描画します。
    描画のたびに背景色で全面をクリアしてから点灯ピクセルを塗ります。
    """
    def __init__(self, scale: int = 10, foreground: str = "#000000", background: str = "#FFFFFF", parent=None):
        super().__init__(parent)
        self._scale = scale
        self._foreground = QColor(foreground)
        self._background = QColor(background)
        self._framebuffer: Optional[Framebuffer] = None
        self.setFixedSize(*self.surface_size())

    @property
    def scale(self) -> int:
        return self._scale

    def surface_size(self) -> Tuple[int, int]:
        if self._framebuffer is not None:
            return self._framebuffer.width * self._scale, self._framebuffer.height * self._scale
        return DISPLAY_WIDTH * self._scale, DISPLAY_HEIGHT * self._scale

    # @intent:responsibility 描画対象のフレームバッファを設定し、再描画を要求します。
    def render(self, framebuffer: Framebuffer) -> None:
        self._framebuffer = framebuffer
        self.update()

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)
        if self._framebuffer is not None:
            s = self._scale
            for x, y in self._framebuffer.lit_pixels():
                painter.fillRect(x * s, y * s, s, s, self._foreground)
        painter.end()

# @intent:rationale QWidgetのメタクラスとABCMetaは併用できないため、仮想サブクラスとして登録します。
Renderer.register(DisplayView)
