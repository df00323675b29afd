from __future__ import annotations
from PyQt6.QtCore import QObject, pyqtSignal


class AppLogger(QObject):
    message_logged = pyqtSignal(str, str)  # category, message

    def log(self, category: str, message: str) -> None:
        print(f"[{category}] {message}", flush=True)
        self.message_logged.emit(category, message)

    def midi(self, message: str) -> None:
        self.log("MIDI", message)

    def settings(self, message: str) -> None:
        self.log("SETTINGS", message)

    def general(self, message: str) -> None:
        self.log("GENERAL", message)

    def traffic(self, direction: str, data: list[int] | bytes) -> None:
        """Log raw MIDI bytes, e.g. traffic("TX", [0xB0, 0x7A, 0x7F])."""
        self.log("TRAFFIC", f"{direction}: " + " ".join(f"{b:02X}" for b in data))
