# retro_chip8/scheduler/scheduler.py
"""
ティックスケジューラモジュール。

ホストの定期コールバックから呼び出され、60Hzの論理フレームごとに
一定数の命令実行、タイマー更新、音声制御、画面描画を順に行う責務を負います。
"""
import logging
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional

from retro_chip8.common.errors import EmulationError
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.display import Framebuffer
from retro_chip8.arch.chip8.timers import TIMER_HZ

logger = logging.getLogger(__name__)

# @intent:constant 論理フレームレートと既定値。
FRAMES_PER_SECOND = TIMER_HZ
FRAME_INTERVAL = 1.0 / FRAMES_PER_SECOND
DEFAULT_SPEED = 10            # 1フレームあたりの命令数
DEFAULT_TONE_FREQUENCY = 40   # Hz

# @intent:responsibility フレームバッファを画面へ描画する外部コラボレータのインターフェース。
class Renderer(ABC):
    @abstractmethod
    def render(self, framebuffer: Framebuffer) -> None:
        """
        点灯ピクセルごとに矩形を描画します。描画前に画面全体をクリアすること。
        """
        pass

# @intent:responsibility 一定周波数のトーンを鳴らす外部コラボレータのインターフェース。
class Speaker(ABC):
    @abstractmethod
    def play(self, frequency: float) -> None:
        """
        トーンが鳴っていなければ開始します。既に鳴っている場合は何もしません。
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        pass

# @intent:responsibility スケジューラの状態。PAUSEDはCPUのキー待ちを反映します。
class SchedulerState(Enum):
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"
    HALTED = "HALTED"   # 致命的エラーにより停止

# @intent:responsibility 論理フレームの実行と、壁時計に基づくフレームのスキップ制御を行います。
class TickScheduler:
    """
    `step()` はホストの定期コールバックから何度呼ばれてもよく、
    前回処理したフレームから1フレーム間隔以上経過した場合にのみ1フレーム分の処理を行います。
    複数フレーム分の時間が経過していても、まとめて追いつく処理は行いません。
    """
    def __init__(
        self,
        cpu: Chip8Cpu,
        renderer: Optional[Renderer] = None,
        speaker: Optional[Speaker] = None,
        speed: int = DEFAULT_SPEED,
        tone_frequency: float = DEFAULT_TONE_FREQUENCY,
        clock: Callable[[], float] = time.monotonic,
    ):
        if speed <= 0:
            raise ValueError("speed must be a positive number of instructions per frame.")
        self._cpu = cpu
        self._renderer = renderer
        self._speaker = speaker
        self.speed = speed
        self.tone_frequency = tone_frequency
        self._clock = clock
        self._last_frame: Optional[float] = None
        self._halted = False
        self._error: Optional[EmulationError] = None
        self._frame_count = 0

    @property
    def state(self) -> SchedulerState:
        if self._halted:
            return SchedulerState.HALTED
        if self._cpu.paused:
            return SchedulerState.PAUSED
        return SchedulerState.RUNNING

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def error(self) -> Optional[EmulationError]:
        return self._error

    # @intent:responsibility フレーム間隔の計測起点をリセットします。
    def reset_clock(self, now: Optional[float] = None) -> None:
        self._last_frame = self._clock() if now is None else now

    # @intent:responsibility 1フレーム間隔以上経過していれば1フレームを処理します。
    # @intent:return フレームを処理した場合True。
    def step(self, now: Optional[float] = None) -> bool:
        if self._halted:
            return False
        if now is None:
            now = self._clock()
        if self._last_frame is None:
            self._last_frame = now
            return False
        if now - self._last_frame < FRAME_INTERVAL:
            return False

        self._last_frame = now
        self.run_frame()
        return True

    # @intent:responsibility 1論理フレーム分の処理（命令実行→タイマー→音声→描画）を無条件に行います。
    # @intent:post-condition EmulationErrorが発生した場合、HALTED状態に遷移した上で例外を再送出します。
    def run_frame(self) -> None:
        if self._halted:
            return

        cpu = self._cpu
        try:
            for _ in range(self.speed):
                # キー待ちに入った時点で残りの命令は実行しない
                if cpu.paused:
                    break
                cpu.step()
        except EmulationError as e:
            self._halt(e)
            raise

        state = cpu.get_state()
        if not cpu.paused:
            state.timers.tick()

        self._update_sound(state.timers.sound_active)

        if self._renderer is not None:
            self._renderer.render(cpu.framebuffer)
        self._frame_count += 1

    def _update_sound(self, active: bool) -> None:
        if self._speaker is None:
            return
        if active:
            self._speaker.play(self.tone_frequency)
        else:
            self._speaker.stop()

    def _halt(self, error: EmulationError) -> None:
        self._halted = True
        self._error = error
        pc = f"{error.pc:#06x}" if error.pc is not None else "unknown"
        logger.error("Emulation halted at PC %s: %s", pc, error)
        logger.error("Registers: %s", self._cpu.get_register_map())
        if self._speaker is not None:
            self._speaker.stop()
