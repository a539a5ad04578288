import logging
import random
from typing import Optional, Tuple

from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.display import Framebuffer
from retro_chip8.arch.chip8.keypad import Keypad
from retro_chip8.arch.chip8.state import MEMORY_SIZE
from retro_chip8.scheduler.scheduler import TickScheduler, Renderer, Speaker
from .models import MachineConfig

logger = logging.getLogger(__name__)

# @intent:responsibility 設定（Config）に基づいて、Bus、RAM、周辺機器、CPUを生成・接続し、フォントを配置します。
class SystemBuilder:
    def build_system(self, config: MachineConfig, rng: Optional[random.Random] = None) -> Tuple[Chip8Cpu, Bus]:
        bus = Bus()
        bus.register_device(0x000, MEMORY_SIZE - 1, RAM(MEMORY_SIZE))

        cpu = Chip8Cpu(
            bus,
            framebuffer=Framebuffer(),
            keypad=Keypad(),
            rng=rng,
            stack_depth=config.stack_depth,
            sprite_origin_quirk=config.sprite_origin_quirk,
            strict_opcodes=config.strict_opcodes,
        )
        cpu.load_fontset()
        logger.debug(
            "Built CHIP-8 system (stack_depth=%s, sprite_origin_quirk=%s, strict_opcodes=%s)",
            config.stack_depth, config.sprite_origin_quirk, config.strict_opcodes,
        )
        return cpu, bus

    # @intent:responsibility CPUとホスト側コラボレータからスケジューラを組み立てます。
    def build_scheduler(
        self,
        cpu: Chip8Cpu,
        config: MachineConfig,
        renderer: Optional[Renderer] = None,
        speaker: Optional[Speaker] = None,
    ) -> TickScheduler:
        if not config.audio.enabled:
            speaker = None
        return TickScheduler(
            cpu,
            renderer=renderer,
            speaker=speaker,
            speed=config.speed,
            tone_frequency=config.audio.tone_frequency,
        )
