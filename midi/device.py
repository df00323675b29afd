from __future__ import annotations
from dataclasses import dataclass
import rtmidi
from core.logger import AppLogger
from midi.commands import Command
from midi.sysex import get_command_data

DEVICE_NAME_FRAGMENT = "MicroBrute"


@dataclass(frozen=True)
class PortInfo:
    name: str
    type: str  # "input" or "output"
    index: int


def list_midi_ports() -> list[PortInfo]:
    """Enumerate MIDI inputs, then outputs."""
    ports: list[PortInfo] = []
    for port_type, cls in (("input", rtmidi.MidiIn), ("output", rtmidi.MidiOut)):
        midi_port = cls()
        ports.extend(PortInfo(name, port_type, i) for i, name in enumerate(midi_port.get_ports()))
        midi_port.delete()
    return ports


def find_device_port(ports: list[PortInfo], port_type: str) -> PortInfo | None:
    candidates = [p for p in ports if p.type == port_type]
    for port in candidates:
        if DEVICE_NAME_FRAGMENT.lower() in port.name.lower():
            return port
    return None


def find_port_by_name(ports: list[PortInfo], port_type: str, name: str | None) -> PortInfo | None:
    if name is None:
        return None
    return next((p for p in ports if p.type == port_type and p.name == name), None)


class MidiDevice:
    """Output (and optional input) connection to the synth.

    Outbound bytes come from `get_command_data`; inbound messages are logged
    and handed to an optional callback, nothing in the settings model reads
    them.
    """

    def __init__(self, logger: AppLogger | None = None, log_traffic: bool = True) -> None:
        self._midi_out = rtmidi.MidiOut()
        self._midi_in = rtmidi.MidiIn()
        self._output: PortInfo | None = None
        self._input: PortInfo | None = None
        self._logger = logger or AppLogger()
        self._message_callback = None
        self.log_traffic = log_traffic

    @property
    def connected(self) -> bool:
        return self._output is not None

    @property
    def port_name(self) -> str | None:
        return self._output.name if self._output else None

    @property
    def input_port_name(self) -> str | None:
        return self._input.name if self._input else None

    def connect(self, output: PortInfo, input: PortInfo | None = None) -> None:
        if output.type != "output":
            raise RuntimeError(f"Port '{output.name}' is not an output port")
        if input is not None and input.type != "input":
            raise RuntimeError(f"Port '{input.name}' is not an input port")
        if self.connected:
            self.disconnect()
        try:
            self._midi_out.open_port(output.index)
        except rtmidi.SystemError as exc:
            raise RuntimeError(
                f"Could not open MIDI output port '{output.name}'. "
                "It may be in use by another application (e.g. MIDI Control Center)."
            ) from exc
        self._logger.midi(f"OUT: {output.name} (index {output.index})")
        if input is not None:
            try:
                self._midi_in.open_port(input.index)
            except rtmidi.SystemError as exc:
                self._midi_out.close_port()
                raise RuntimeError(
                    f"Could not open MIDI input port '{input.name}'. "
                    "It may be in use by another application (e.g. MIDI Control Center)."
                ) from exc
            self._midi_in.ignore_types(sysex=False)
            self._midi_in.set_callback(self._dispatch_midi_input)
            self._logger.midi(f"IN:  {input.name} (index {input.index})")
        self._output = output
        self._input = input

    def disconnect(self) -> None:
        if self._output is not None:
            self._midi_out.close_port()
        if self._input is not None:
            self._midi_in.cancel_callback()
            self._midi_in.close_port()
        self._output = None
        self._input = None

    def send(self, message: list[int]) -> None:
        if not self.connected:
            raise RuntimeError("Not connected to a MIDI device")
        if self.log_traffic:
            self._logger.traffic("TX", message)
        self._midi_out.send_message(message)

    def send_command(self, command: Command) -> list[int]:
        """Encode and send one setting change; returns the bytes sent."""
        data = get_command_data(command)
        self.send(data)
        return data

    def set_message_callback(self, callback) -> None:
        """Register callback(message: list[int]) for inbound MIDI."""
        self._message_callback = callback

    def _dispatch_midi_input(self, event, _data=None) -> None:
        msg = event[0]
        if not msg:
            return
        if self.log_traffic:
            self._logger.traffic("RX", msg)
        if self._message_callback is not None:
            self._message_callback(list(msg))
