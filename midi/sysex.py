from __future__ import annotations
from midi.commands import (
    Command, SysexCommand, MidiChannel, BendRange, ReceiveAll,
    OnOff, NotePriority, VelocityResponse, SeqPlay, SeqRetrigger,
    NextSequence, StepMode, StepSize, GateLength, SyncSource,
    LocalControl, NotePriorityValue, VelocityResponseValue, SeqPlayValue,
    SeqRetriggerValue, NextSequenceValue, StepModeValue, StepSizeValue,
    TransmitChannelValue, ReceiveChannelValue, LfoKeyRetriggerValue,
    EnvelopeLegatoValue, BendRangeValue, GateLengthValue, SyncSourceValue,
)

SYSEX_START = 0xF0
SYSEX_END = 0xF7
VENDOR_ID = [0x00, 0x20, 0x6B]  # Arturia
DEVICE_ID = 0x05                # MicroBrute
SUB_ID = 0x01

COUNTER_SET = 0x00
COUNTER_REQUEST_SETTINGS = 0x00  # reserved for the saved-settings request; not sent

CC_STATUS = 0xB0
CC_LOCAL_CONTROL = 0x7A
LOCAL_CONTROL_CHANNEL = 0  # always channel 1, whatever the transmit channel is

SETTING_BYTES: dict[type[SysexCommand], int] = {
    ReceiveChannelValue: 0x05,
    TransmitChannelValue: 0x07,
    NotePriorityValue: 0x0B,
    EnvelopeLegatoValue: 0x0D,
    LfoKeyRetriggerValue: 0x0F,
    VelocityResponseValue: 0x11,
    StepModeValue: 0x2A,
    BendRangeValue: 0x2C,
    SeqPlayValue: 0x2E,
    NextSequenceValue: 0x32,
    SeqRetriggerValue: 0x34,
    GateLengthValue: 0x36,
    StepSizeValue: 0x38,
    SyncSourceValue: 0x3C,
}

_ON_OFF = {OnOff.OFF: 0x00, OnOff.ON: 0x01}

VALUE_BYTES: dict[type, dict] = {
    OnOff: _ON_OFF,
    NotePriority: {
        NotePriority.LAST: 0x00,
        NotePriority.LOW: 0x01,
        NotePriority.HIGH: 0x02,
    },
    # Logarithmic and anti-logarithmic may be swapped on the device; kept as documented
    VelocityResponse: {
        VelocityResponse.LINEAR: 0x00,
        VelocityResponse.LOGARITHMIC: 0x01,
        VelocityResponse.ANTI_LOGARITHMIC: 0x02,
    },
    SeqPlay: {SeqPlay.HOLD: 0x00, SeqPlay.NOTE_ON: 0x01},
    SeqRetrigger: {
        SeqRetrigger.RESET: 0x00,
        SeqRetrigger.LEGATO: 0x01,
        SeqRetrigger.NONE: 0x02,
    },
    NextSequence: {
        NextSequence.END: 0x00,
        NextSequence.INSTANT_RESET: 0x01,
        NextSequence.INSTANT_CONTINUATION: 0x02,
    },
    StepMode: {StepMode.CLOCK: 0x00, StepMode.GATE: 0x01},
    StepSize: {
        StepSize.QUARTER: 0x04,
        StepSize.EIGHTH: 0x08,
        StepSize.SIXTEENTH: 0x10,
        StepSize.THIRTY_SECOND: 0x20,
    },
    GateLength: {
        GateLength.SHORT: 0x01,
        GateLength.MEDIUM: 0x02,
        GateLength.LONG: 0x03,
    },
    SyncSource: {
        SyncSource.AUTO: 0x00,
        SyncSource.INTERNAL: 0x01,
        SyncSource.EXTERNAL: 0x02,
    },
    ReceiveAll: {ReceiveAll.ALL: 0x10},
}


def _value_byte(value) -> int:
    if isinstance(value, MidiChannel):
        return value.to_int() - 1
    if isinstance(value, BendRange):
        return value.to_int()
    return VALUE_BYTES[type(value)][value]


def build_local_control(state: OnOff) -> list[int]:
    """Local Control channel-mode message (CC#122)."""
    return [CC_STATUS + LOCAL_CONTROL_CHANNEL, CC_LOCAL_CONTROL,
            127 if state is OnOff.ON else 0]


def build_setting_message(setting_byte: int, value_byte: int,
                          counter: int = COUNTER_SET) -> list[int]:
    # Format: F0 00 20 6B 05 01 <counter> <setting> <value> F7
    return [SYSEX_START, *VENDOR_ID, DEVICE_ID, SUB_ID,
            counter, setting_byte, value_byte, SYSEX_END]


def get_command_data(command: Command) -> list[int]:
    """Return the exact bytes that apply `command` on the device."""
    if isinstance(command, LocalControl):
        return build_local_control(command.value)
    if isinstance(command, SysexCommand):
        return build_setting_message(SETTING_BYTES[type(command)],
                                     _value_byte(command.value))
    raise TypeError(f"Not a MicroBrute command: {command!r}")
