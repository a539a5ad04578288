# src/retro_chip8/ui/app.py
"""
Qtアプリケーションのエントリポイント。
コマンドライン引数と設定ファイルを読み込み、メインウィンドウを起動します。
"""
import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import MachineConfig
from .main_window import MainWindow

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="retro-chip8", description="CHIP-8 emulator")
    parser.add_argument("rom", nargs="?", help="ROM image to load at 0x200")
    parser.add_argument("--config", help="YAML machine configuration file")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity (default: WARNING)")
    return parser.parse_args(argv)

# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = ConfigLoader().load_from_file(args.config) if args.config else MachineConfig()
    rom = args.rom or config.rom

    app = QApplication(sys.argv[:1])
    main_win = MainWindow(config)
    if rom:
        main_win.load_rom(rom)
    main_win.show()
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
