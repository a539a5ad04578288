"""
矩形波のトーンを再生するスピーカー。
"""
import logging
from typing import Optional

from PySide6.QtCore import QBuffer, QByteArray, QIODevice
from PySide6.QtMultimedia import QAudio, QAudioDevice, QAudioFormat, QAudioSink, QMediaDevices

from retro_chip8.scheduler.scheduler import Speaker

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
# ループ再生するバッファの長さ。末尾に達したら先頭から再生し直す
TONE_SECONDS = 1

# @intent:utility_function 符号なし8ビット・モノラルの矩形波サンプル列を生成します。
# @intent:post-condition 長さは1周期の整数倍となり、ループ再生しても波形が途切れません。
def square_wave(frequency: float, volume: float, sample_rate: int = SAMPLE_RATE, seconds: float = TONE_SECONDS) -> bytes:
    amplitude = int(127 * volume)
    high = 128 + amplitude
    low = 128 - amplitude

    # 1周期分を作り、バイト列の乗算で繰り返す
    period = max(2, int(round(sample_rate / frequency)))
    half = period // 2
    cycle = bytes([high]) * half + bytes([low]) * (period - half)
    repeats = max(1, int(sample_rate * seconds) // period)
    return cycle * repeats

# @intent:responsibility QtMultimediaのQAudioSinkでトーンを再生・停止します。
class QtSpeaker(Speaker):
    """
    トーンはstop()が呼ばれるまで鳴り続けます。
    バッファを使い切ってシンクがアイドルになった場合は先頭に戻して再開します。
    """
    def __init__(self, volume: float = 0.25):
        self._volume = volume
        self._sink: Optional[QAudioSink] = None
        self._buffer: Optional[QBuffer] = None
        self._device_missing_reported = False

    @property
    def playing(self) -> bool:
        return self._sink is not None

    def play(self, frequency: float) -> None:
        if self._sink is not None:
            return

        device = self._default_device()
        if device.isNull():
            if not self._device_missing_reported:
                logger.warning("No audio output device available; sound is disabled")
                self._device_missing_reported = True
            return

        audio_format = QAudioFormat()
        audio_format.setSampleRate(SAMPLE_RATE)
        audio_format.setChannelCount(1)
        audio_format.setSampleFormat(QAudioFormat.SampleFormat.UInt8)

        self._buffer = QBuffer()
        self._buffer.setData(QByteArray(square_wave(frequency, self._volume)))
        self._buffer.open(QIODevice.OpenModeFlag.ReadOnly)

        self._sink = self._create_sink(device, audio_format)
        self._sink.stateChanged.connect(self._on_state_changed)
        self._sink.start(self._buffer)

    # @intent:responsibility 再生中のトーンを停止し、シンクとバッファを解放します。
    def stop(self) -> None:
        if self._sink is None:
            return
        sink = self._sink
        self._sink = None
        sink.stop()
        if self._buffer is not None:
            self._buffer.close()
            self._buffer = None

    def _default_device(self) -> QAudioDevice:
        return QMediaDevices.defaultAudioOutput()

    def _create_sink(self, device: QAudioDevice, audio_format: QAudioFormat) -> QAudioSink:
        return QAudioSink(device, audio_format)

    # @intent:responsibility バッファ終端でアイドルになったシンクを先頭から再開し、トーンを途切れさせません。
    def _on_state_changed(self, state) -> None:
        if state != QAudio.State.IdleState:
            return
        if self._sink is None or self._buffer is None:
            return
        self._buffer.seek(0)
        self._sink.start(self._buffer)
