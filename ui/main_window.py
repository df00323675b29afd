from __future__ import annotations
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QSplitter, QMessageBox,
)
from PyQt6.QtCore import Qt
from core.config import AppConfig
from core.logger import AppLogger
from midi.commands import Command
from midi.labels import option_name, option_value
from model.settings import Registry, initial_registry, update_setting
from ui.device_panel import DevicePanel
from ui.log_panel import LogPanel
from ui.settings_panel import SettingsPanel


class MainWindow(QMainWindow):
    """Owns the settings registry.

    Each pick from the settings panel is folded into the registry with
    `update_setting` on the GUI thread, then sent to the device when one is
    connected.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__()
        self.setWindowTitle("MicroBrute Settings")
        self.resize(900, 700)
        self._config = config or AppConfig()
        self._logger = AppLogger()
        self._registry: Registry = initial_registry()
        self._build_ui()
        self._connect_signals()

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        layout = QHBoxLayout(central)

        h_splitter = QSplitter(Qt.Orientation.Horizontal)
        self._settings_panel = SettingsPanel(self._registry)
        self._device_panel = DevicePanel(config=self._config, logger=self._logger)
        h_splitter.addWidget(self._settings_panel)
        h_splitter.addWidget(self._device_panel)
        h_splitter.setSizes([600, 300])

        self._log_panel = LogPanel()

        v_splitter = QSplitter(Qt.Orientation.Vertical)
        v_splitter.addWidget(h_splitter)
        v_splitter.addWidget(self._log_panel)
        v_splitter.setSizes([520, 180])

        layout.addWidget(v_splitter)

    def _connect_signals(self) -> None:
        self._logger.message_logged.connect(self._log_panel.append_message)
        self._settings_panel.command_selected.connect(self.apply_command)
        self._device_panel.connected.connect(
            lambda name: self._logger.general(f"connected to {name}"))
        self._device_panel.disconnected.connect(
            lambda: self._logger.general("disconnected"))

    @property
    def registry(self) -> Registry:
        return self._registry

    def apply_command(self, command: Command) -> None:
        self._registry = update_setting(self._registry, command)
        self._settings_panel.set_registry(self._registry)
        self._logger.settings(f"{option_name(command)} = {option_value(command)}")

        device = self._device_panel.device
        if not device.connected:
            self.statusBar().showMessage("Not connected -- setting not sent", 3000)
            return
        try:
            device.send_command(command)
        except RuntimeError as exc:
            self._logger.midi(f"send failed: {exc}")
            QMessageBox.warning(self, "Send Failed", str(exc))
