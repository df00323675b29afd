from __future__ import annotations
import json
from pathlib import Path

_DEFAULTS = {
    "midi_out_port": None,
    "midi_in_port": None,
    "log_midi_traffic": True,
}


class AppConfig:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path.home() / ".config" / "brute-config" / "config.json"
        self.midi_out_port: str | None = _DEFAULTS["midi_out_port"]
        self.midi_in_port: str | None = _DEFAULTS["midi_in_port"]
        self.log_midi_traffic: bool = _DEFAULTS["log_midi_traffic"]
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text())
            for key in _DEFAULTS:
                if key in data:
                    setattr(self, key, data[key])
        except (json.JSONDecodeError, OSError):
            pass

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = {key: getattr(self, key) for key in _DEFAULTS}
        self._path.write_text(json.dumps(data, indent=2))
