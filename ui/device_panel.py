from __future__ import annotations
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QComboBox, QGroupBox, QMessageBox, QFormLayout,
)
from PyQt6.QtCore import QTimer, pyqtSignal
from core.config import AppConfig
from core.logger import AppLogger
from midi.device import (
    MidiDevice, PortInfo, list_midi_ports, find_device_port, find_port_by_name,
)


# Hot-plug poll interval while disconnected
PORT_POLL_MS = 2000


class DevicePanel(QWidget):
    connected = pyqtSignal(str)
    disconnected = pyqtSignal()

    def __init__(self, config: AppConfig | None = None,
                 logger: AppLogger | None = None, parent=None) -> None:
        super().__init__(parent)
        self._config = config or AppConfig()
        self._logger = logger or AppLogger()
        self._device = MidiDevice(logger=self._logger,
                                  log_traffic=self._config.log_midi_traffic)
        self._ports: list[PortInfo] = []
        self._build_ui()
        self._refresh_ports()
        self._poll_timer = QTimer(self)
        self._poll_timer.setInterval(PORT_POLL_MS)
        self._poll_timer.timeout.connect(self._poll_ports)
        self._poll_timer.start()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        conn_group = QGroupBox("Device")
        conn_layout = QVBoxLayout(conn_group)

        form = QFormLayout()
        self.out_combo = QComboBox()
        form.addRow("Output:", self.out_combo)
        self.in_combo = QComboBox()
        form.addRow("Input:", self.in_combo)
        conn_layout.addLayout(form)

        btn_row = QHBoxLayout()
        refresh_btn = QPushButton("Refresh")
        refresh_btn.clicked.connect(lambda: self._refresh_ports())
        self.connect_btn = QPushButton("Connect")
        self.connect_btn.clicked.connect(self._toggle_connect)
        btn_row.addWidget(refresh_btn)
        btn_row.addWidget(self.connect_btn)
        conn_layout.addLayout(btn_row)

        self.status_label = QLabel("Not connected")
        conn_layout.addWidget(self.status_label)

        layout.addWidget(conn_group)
        layout.addStretch()

    def _refresh_ports(self, ports: list[PortInfo] | None = None) -> None:
        if ports is None:
            ports = list_midi_ports()
        # Keep what the user picked; fall back to the last connected ports
        out_name = _selected_name(self.out_combo) or self._config.midi_out_port
        in_name = _selected_name(self.in_combo) or self._config.midi_in_port
        self._ports = ports
        self._fill_combo(self.out_combo, ports, "output", out_name)
        self._fill_combo(self.in_combo, ports, "input", in_name, allow_none=True)

    def _poll_ports(self) -> None:
        if self._device.connected:
            return
        ports = list_midi_ports()
        if ports != self._ports:
            self._logger.midi(f"port list changed: {len(ports)} ports")
            self._refresh_ports(ports)

    def _fill_combo(self, combo: QComboBox, ports: list[PortInfo],
                    port_type: str, saved: str | None, allow_none: bool = False) -> None:
        combo.clear()
        if allow_none:
            combo.addItem("(none)", None)
        for port in ports:
            if port.type == port_type:
                combo.addItem(port.name, port)
        # Last used port wins over name matching
        preferred = find_port_by_name(ports, port_type, saved) or find_device_port(ports, port_type)
        for i in range(combo.count()):
            if preferred is not None and combo.itemData(i) == preferred:
                combo.setCurrentIndex(i)

    def _toggle_connect(self) -> None:
        if self._device.connected:
            self._device.disconnect()
            self._set_connected(False)
            return
        output = self.out_combo.currentData()
        if output is None:
            return
        input = self.in_combo.currentData()
        try:
            self._device.connect(output, input)
        except RuntimeError as exc:
            self._logger.midi(f"connect failed: {exc}")
            QMessageBox.critical(self, "Connection Failed", str(exc))
            return
        self._config.midi_out_port = output.name
        self._config.midi_in_port = input.name if input is not None else None
        self._config.save()
        self._set_connected(True)

    def _set_connected(self, state: bool) -> None:
        self.out_combo.setEnabled(not state)
        self.in_combo.setEnabled(not state)
        if state:
            self._poll_timer.stop()
            self.connect_btn.setText("Disconnect")
            self.status_label.setText(f"Connected: {self._device.port_name}")
            self.connected.emit(self._device.port_name or "")
        else:
            self.connect_btn.setText("Connect")
            self._poll_timer.start()
            self.status_label.setText("Not connected")
            self.disconnected.emit()

    @property
    def device(self) -> MidiDevice:
        return self._device


def _selected_name(combo: QComboBox) -> str | None:
    port = combo.currentData()
    return port.name if port is not None else None
