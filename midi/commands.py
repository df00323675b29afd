"""Every MicroBrute setting this tool can change, as immutable value objects.

A command is a settable parameter paired with the value chosen for it.  The
taxonomy is closed: `MidiCommand` covers the one Control-Change parameter,
`SysexCommand` the vendor-specific ones.  Two commands are equal when they are
the same variant carrying the same value.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class MidiChannel:
    value: int

    MIN = 1
    MAX = 16

    def __post_init__(self) -> None:
        # Every construction path is clamped, not just from_int
        object.__setattr__(self, "value", max(self.MIN, min(self.MAX, self.value)))

    @classmethod
    def from_int(cls, n: int) -> MidiChannel:
        return cls(n)

    def to_int(self) -> int:
        return self.value

    @classmethod
    def all(cls) -> list[MidiChannel]:
        return [cls(n) for n in range(cls.MIN, cls.MAX + 1)]


@dataclass(frozen=True)
class BendRange:
    value: int

    MIN = 1
    MAX = 12

    def __post_init__(self) -> None:
        # Every construction path is clamped, not just from_int
        object.__setattr__(self, "value", max(self.MIN, min(self.MAX, self.value)))

    @classmethod
    def from_int(cls, n: int) -> BendRange:
        return cls(n)

    def to_int(self) -> int:
        return self.value

    @classmethod
    def all(cls) -> list[BendRange]:
        return [cls(n) for n in range(cls.MIN, cls.MAX + 1)]


# ---------------------------------------------------------------------------
# Closed value sets.  Enum values are the display labels.
# ---------------------------------------------------------------------------

class OnOff(Enum):
    ON = "On"
    OFF = "Off"


class NotePriority(Enum):
    LOW = "Low"
    LAST = "Last"
    HIGH = "High"


class VelocityResponse(Enum):
    LINEAR = "Linear"
    LOGARITHMIC = "Logarithmic"
    ANTI_LOGARITHMIC = "Anti-Logarithmic"


class SeqPlay(Enum):
    HOLD = "Hold"
    NOTE_ON = "Note On"


class SeqRetrigger(Enum):
    NONE = "None"
    LEGATO = "Legato"
    RESET = "Reset"


class NextSequence(Enum):
    END = "End"
    INSTANT_RESET = "Instant Reset"
    INSTANT_CONTINUATION = "Instant Continuation"


class StepMode(Enum):
    GATE = "Gate"
    CLOCK = "Clock"


class StepSize(Enum):
    QUARTER = "1⁄4"
    EIGHTH = "1⁄8"
    SIXTEENTH = "1⁄16"
    THIRTY_SECOND = "1⁄32"


class GateLength(Enum):
    SHORT = "Short"
    MEDIUM = "Medium"
    LONG = "Long"


class SyncSource(Enum):
    AUTO = "Auto"
    INTERNAL = "Internal"
    EXTERNAL = "External"


class ReceiveAll(Enum):
    """Receive on every channel (omni)."""
    ALL = "All"


# ---------------------------------------------------------------------------
# Command classes
# ---------------------------------------------------------------------------

class Command:
    """Base of every settable parameter value."""
    __slots__ = ()


class MidiCommand(Command):
    """Sent as a Control-Change message."""
    __slots__ = ()


class SysexCommand(Command):
    """Sent as a vendor SysEx frame."""
    __slots__ = ()


@dataclass(frozen=True)
class LocalControl(MidiCommand):
    value: OnOff


@dataclass(frozen=True)
class NotePriorityValue(SysexCommand):
    value: NotePriority


@dataclass(frozen=True)
class VelocityResponseValue(SysexCommand):
    value: VelocityResponse


@dataclass(frozen=True)
class SeqPlayValue(SysexCommand):
    value: SeqPlay


@dataclass(frozen=True)
class SeqRetriggerValue(SysexCommand):
    value: SeqRetrigger


@dataclass(frozen=True)
class NextSequenceValue(SysexCommand):
    value: NextSequence


@dataclass(frozen=True)
class StepModeValue(SysexCommand):
    value: StepMode


@dataclass(frozen=True)
class StepSizeValue(SysexCommand):
    value: StepSize


@dataclass(frozen=True)
class TransmitChannelValue(SysexCommand):
    value: MidiChannel


@dataclass(frozen=True)
class ReceiveChannelValue(SysexCommand):
    value: MidiChannel | ReceiveAll


@dataclass(frozen=True)
class LfoKeyRetriggerValue(SysexCommand):
    value: OnOff


@dataclass(frozen=True)
class EnvelopeLegatoValue(SysexCommand):
    value: OnOff


@dataclass(frozen=True)
class BendRangeValue(SysexCommand):
    value: BendRange


@dataclass(frozen=True)
class GateLengthValue(SysexCommand):
    value: GateLength


@dataclass(frozen=True)
class SyncSourceValue(SysexCommand):
    value: SyncSource


# Payloads each variant can carry, in display order.
_VALUES: dict[type[Command], list] = {
    LocalControl: list(OnOff),
    NotePriorityValue: list(NotePriority),
    VelocityResponseValue: list(VelocityResponse),
    SeqPlayValue: list(SeqPlay),
    SeqRetriggerValue: list(SeqRetrigger),
    NextSequenceValue: list(NextSequence),
    StepModeValue: list(StepMode),
    StepSizeValue: list(StepSize),
    TransmitChannelValue: MidiChannel.all(),
    ReceiveChannelValue: [*MidiChannel.all(), ReceiveAll.ALL],
    LfoKeyRetriggerValue: list(OnOff),
    EnvelopeLegatoValue: list(OnOff),
    BendRangeValue: BendRange.all(),
    GateLengthValue: list(GateLength),
    SyncSourceValue: list(SyncSource),
}


def command_types() -> list[type[Command]]:
    """Every concrete command variant, MIDI first then SysEx."""
    return list(_VALUES)


def sample_values(command_type: type[Command]) -> list:
    return list(_VALUES[command_type])


def all_commands(command_type: type[Command]) -> list[Command]:
    """Every constructible command of one variant, in display order."""
    return [command_type(v) for v in sample_values(command_type)]
