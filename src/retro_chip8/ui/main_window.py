# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
ディスプレイ、スピーカー、キーボードをエミュレータに接続し、フレーム駆動用のタイマーを管理します。
"""
import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtWidgets import QMainWindow, QLabel, QFileDialog, QMessageBox
from PySide6.QtGui import QAction, QCloseEvent, QKeyEvent, QFocusEvent
from PySide6.QtCore import Qt, QTimer, Slot

from retro_chip8.common.errors import EmulationError
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig
from retro_chip8.loader.loader import RomLoader
from retro_chip8.scheduler.scheduler import SchedulerState
from .display_view import DisplayView
from .speaker import QtSpeaker

logger = logging.getLogger(__name__)

# @intent:constant ホストの定期コールバック間隔（ミリ秒）。フレームの間引きはスケジューラが行う。
PUMP_INTERVAL_MS = 1

def _key_code(key) -> int:
    return key.value if hasattr(key, "value") else int(key)

# @intent:utility_function 設定のキー名（"Q", "1" など）をQtのキーコードに変換した対応表を作ります。
def build_qt_keymap(keymap: Dict[str, int]) -> Dict[int, int]:
    result: Dict[int, int] = {}
    for name, value in keymap.items():
        qt_key = getattr(Qt.Key, f"Key_{name}", None)
        if qt_key is None:
            logger.warning("Ignoring unknown key name in keymap: %s", name)
            continue
        result[_key_code(qt_key)] = value
    return result

# @intent:responsibility アプリケーションのメインウィンドウを定義し、エミュレータとホスト側コラボレータを組み立てます。
class MainWindow(QMainWindow):
    def __init__(self, config: Optional[MachineConfig] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Retro CHIP-8 Tracer")

        self._config = config if config is not None else MachineConfig()
        self._builder = SystemBuilder()
        self._qt_keymap = build_qt_keymap(self._config.keymap)
        self._rom_path: Optional[Path] = None

        display = self._config.display
        self.display_view = DisplayView(display.scale, display.foreground, display.background)
        self.setCentralWidget(self.display_view)
        self.speaker = QtSpeaker(self._config.audio.volume)

        self.status_label = QLabel("No ROM loaded", self)
        self.statusBar().addWidget(self.status_label)

        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.PreciseTimer)
        self._timer.timeout.connect(self._on_tick)

        self._setup_backend()
        self._create_menus()

    # @intent:responsibility CPU・バス・スケジューラを新しく構築します（ROMロードのたびにメモリを初期化するため）。
    def _setup_backend(self):
        self.cpu, self.bus = self._builder.build_system(self._config)
        self.scheduler = self._builder.build_scheduler(
            self.cpu, self._config, renderer=self.display_view, speaker=self.speaker
        )
        self.display_view.render(self.cpu.framebuffer)
        self._last_state: Optional[SchedulerState] = None

    def _create_menus(self):
        file_menu = self.menuBar().addMenu("File")

        self.open_action = QAction("Open ROM...", self)
        self.open_action.setShortcut("Ctrl+O")
        self.open_action.triggered.connect(self._open_rom_dialog)
        file_menu.addAction(self.open_action)

        self.reset_action = QAction("Reset", self)
        self.reset_action.setShortcut("Ctrl+R")
        self.reset_action.triggered.connect(self._reset)
        file_menu.addAction(self.reset_action)

        exit_action = QAction("Exit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    # @intent:responsibility ROMファイルをロードし、フレーム駆動を開始します。
    def load_rom(self, path: str) -> None:
        self._timer.stop()
        self.speaker.stop()
        self._setup_backend()
        RomLoader().load_file(path, self.bus)
        self._rom_path = Path(path)
        self.setWindowTitle(f"Retro CHIP-8 Tracer - {self._rom_path.name}")
        self.scheduler.reset_clock()
        self._timer.start(PUMP_INTERVAL_MS)
        self._update_status()

    @Slot()
    def _open_rom_dialog(self):
        file_name, _ = QFileDialog.getOpenFileName(self, "Open ROM", "", "CHIP-8 ROMs (*.ch8 *.c8);;All Files (*)")
        if file_name:
            try:
                self.load_rom(file_name)
            except (OSError, EmulationError) as e:
                QMessageBox.critical(self, "Error", f"Failed to load ROM: {e}")

    @Slot()
    def _reset(self):
        if self._rom_path is not None:
            self.load_rom(str(self._rom_path))

    # @intent:responsibility タイマーから呼ばれ、スケジューラにフレーム処理を委譲します。
    @Slot()
    def _on_tick(self):
        try:
            self.scheduler.step()
        except EmulationError as e:
            self._timer.stop()
            self._update_status()
            QMessageBox.critical(self, "Emulation Error", str(e))
            return
        self._update_status()

    def _update_status(self):
        state = self.scheduler.state
        if state == self._last_state:
            return
        self._last_state = state
        rom = self._rom_path.name if self._rom_path else "No ROM"
        if state == SchedulerState.PAUSED:
            self.status_label.setText(f"{rom}: waiting for key")
        elif state == SchedulerState.HALTED:
            self.status_label.setText(f"{rom}: halted")
        else:
            self.status_label.setText(f"{rom}: running")

    def keyPressEvent(self, event: QKeyEvent):
        key = self._qt_keymap.get(_key_code(event.key()))
        if key is None:
            super().keyPressEvent(event)
            return
        if not event.isAutoRepeat():
            self.cpu.keypad.press(key)

    def keyReleaseEvent(self, event: QKeyEvent):
        key = self._qt_keymap.get(_key_code(event.key()))
        if key is None:
            super().keyReleaseEvent(event)
            return
        if not event.isAutoRepeat():
            self.cpu.keypad.release(key)

    # @intent:rationale フォーカスを失うとキー解放イベントが届かないため、押下状態を全て解除する。
    def focusOutEvent(self, event: QFocusEvent):
        self.cpu.keypad.release_all()
        super().focusOutEvent(event)

    def closeEvent(self, event: QCloseEvent):
        self._timer.stop()
        self.speaker.stop()
        event.accept()
