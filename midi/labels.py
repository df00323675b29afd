from __future__ import annotations
from enum import Enum
from midi.commands import (
    Command, LocalControl, NotePriorityValue, VelocityResponseValue,
    SeqPlayValue, SeqRetriggerValue, NextSequenceValue, StepModeValue,
    StepSizeValue, TransmitChannelValue, ReceiveChannelValue,
    LfoKeyRetriggerValue, EnvelopeLegatoValue, BendRangeValue,
    GateLengthValue, SyncSourceValue,
)

# Parameter names as printed on the MicroBrute Connection settings page
OPTION_NAMES: dict[type[Command], str] = {
    LocalControl: "Local Control",
    NotePriorityValue: "Note Priority",
    VelocityResponseValue: "Velocity Response",
    SeqPlayValue: "Play",
    SeqRetriggerValue: "Retrig",
    NextSequenceValue: "Next Seq",
    StepModeValue: "Step On",
    StepSizeValue: "Step",
    TransmitChannelValue: "Transmit Channel",
    ReceiveChannelValue: "Receive Channel",
    LfoKeyRetriggerValue: "LFO Key Retrig",
    EnvelopeLegatoValue: "Envelope Legato",
    BendRangeValue: "Bend Range",
    GateLengthValue: "Gate Length",
    SyncSourceValue: "Sync",
}


def option_name(command: Command) -> str:
    return OPTION_NAMES[type(command)]


def option_value(command: Command) -> str:
    value = command.value
    if isinstance(value, Enum):
        return value.value
    return str(value.to_int())
