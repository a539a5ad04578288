import yaml
from typing import Any, Dict, Optional
from .models import MachineConfig, DisplayConfig, AudioConfig, DEFAULT_KEYMAP

class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return self.parse_config(data or {})

    def parse_config(self, data: Dict[str, Any]) -> MachineConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        speed = self._parse_int(data.get("speed", 10))
        if speed <= 0:
            raise ValueError(f"speed must be positive: {speed}")

        stack_depth = self._parse_optional_int(data.get("stack_depth", 16))
        if stack_depth is not None and stack_depth <= 0:
            raise ValueError(f"stack_depth must be positive or null: {stack_depth}")

        # Parse Display
        display_data = data.get("display", {}) or {}
        display = DisplayConfig(
            scale=self._parse_int(display_data.get("scale", 10)),
            foreground=str(display_data.get("foreground", "#000000")),
            background=str(display_data.get("background", "#FFFFFF")),
        )
        if display.scale <= 0:
            raise ValueError(f"display.scale must be positive: {display.scale}")

        # Parse Audio
        audio_data = data.get("audio", {}) or {}
        audio = AudioConfig(
            enabled=bool(audio_data.get("enabled", True)),
            tone_frequency=self._parse_int(audio_data.get("tone_frequency", 40)),
            volume=float(audio_data.get("volume", 0.25)),
        )
        if not 0.0 <= audio.volume <= 1.0:
            raise ValueError(f"audio.volume must be within 0.0-1.0: {audio.volume}")

        # Parse Keymap
        keymap = dict(DEFAULT_KEYMAP)
        keymap_data = data.get("keymap")
        if keymap_data is not None:
            keymap = {}
            for name, value in keymap_data.items():
                key_value = self._parse_int(value)
                if not 0 <= key_value <= 0xF:
                    raise ValueError(f"Keymap value for '{name}' is outside 0x0-0xF: {value}")
                keymap[str(name).upper()] = key_value

        rom = data.get("rom")

        return MachineConfig(
            speed=speed,
            stack_depth=stack_depth,
            sprite_origin_quirk=bool(data.get("sprite_origin_quirk", True)),
            strict_opcodes=bool(data.get("strict_opcodes", False)),
            rom=str(rom) if rom is not None else None,
            display=display,
            audio=audio,
            keymap=keymap,
        )

    def _parse_optional_int(self, value: Any) -> Optional[int]:
        if value is None:
            return None
        return self._parse_int(value)

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
