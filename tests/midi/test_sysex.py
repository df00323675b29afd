import pytest
from midi.commands import (
    MidiChannel, BendRange, ReceiveAll, OnOff, NotePriority, VelocityResponse,
    SeqPlay, SeqRetrigger, NextSequence, StepMode, StepSize, GateLength,
    SyncSource, LocalControl, NotePriorityValue, VelocityResponseValue,
    SeqPlayValue, SeqRetriggerValue, NextSequenceValue, StepModeValue,
    StepSizeValue, TransmitChannelValue, ReceiveChannelValue,
    LfoKeyRetriggerValue, EnvelopeLegatoValue, BendRangeValue,
    GateLengthValue, SyncSourceValue, SysexCommand, command_types, all_commands,
)
from midi.sysex import (
    get_command_data, build_setting_message, SETTING_BYTES, VENDOR_ID,
    DEVICE_ID, COUNTER_SET, COUNTER_REQUEST_SETTINGS,
)

HEADER = [0xF0, 0x00, 0x20, 0x6B, 0x05, 0x01, 0x00]


def frame(setting: int, value: int) -> list[int]:
    return HEADER + [setting, value, 0xF7]


def test_vendor_and_device_ids():
    assert VENDOR_ID == [0x00, 0x20, 0x6B]
    assert DEVICE_ID == 0x05
    assert COUNTER_SET == 0x00
    assert COUNTER_REQUEST_SETTINGS == 0x00

def test_local_control_on():
    assert get_command_data(LocalControl(OnOff.ON)) == [176, 122, 127]

def test_local_control_off():
    assert get_command_data(LocalControl(OnOff.OFF)) == [176, 122, 0]

def test_note_priority_high():
    assert get_command_data(NotePriorityValue(NotePriority.HIGH)) == [
        0xF0, 0x00, 0x20, 0x6B, 0x05, 0x01, 0x00, 0x0B, 0x02, 0xF7]

def test_bend_range_sends_raw_value():
    assert get_command_data(BendRangeValue(BendRange.from_int(7))) == [
        0xF0, 0x00, 0x20, 0x6B, 0x05, 0x01, 0x00, 0x2C, 7, 0xF7]

def test_bend_range_clamped_value():
    assert get_command_data(BendRangeValue(BendRange.from_int(40)))[8] == 12


@pytest.mark.parametrize("command, expected", [
    (NotePriorityValue(NotePriority.LAST), frame(0x0B, 0x00)),
    (NotePriorityValue(NotePriority.LOW), frame(0x0B, 0x01)),
    (VelocityResponseValue(VelocityResponse.LINEAR), frame(0x11, 0x00)),
    (VelocityResponseValue(VelocityResponse.LOGARITHMIC), frame(0x11, 0x01)),
    (VelocityResponseValue(VelocityResponse.ANTI_LOGARITHMIC), frame(0x11, 0x02)),
    (SeqPlayValue(SeqPlay.HOLD), frame(0x2E, 0x00)),
    (SeqPlayValue(SeqPlay.NOTE_ON), frame(0x2E, 0x01)),
    (SeqRetriggerValue(SeqRetrigger.RESET), frame(0x34, 0x00)),
    (SeqRetriggerValue(SeqRetrigger.LEGATO), frame(0x34, 0x01)),
    (SeqRetriggerValue(SeqRetrigger.NONE), frame(0x34, 0x02)),
    (NextSequenceValue(NextSequence.END), frame(0x32, 0x00)),
    (NextSequenceValue(NextSequence.INSTANT_RESET), frame(0x32, 0x01)),
    (NextSequenceValue(NextSequence.INSTANT_CONTINUATION), frame(0x32, 0x02)),
    (StepModeValue(StepMode.CLOCK), frame(0x2A, 0x00)),
    (StepModeValue(StepMode.GATE), frame(0x2A, 0x01)),
    (StepSizeValue(StepSize.QUARTER), frame(0x38, 0x04)),
    (StepSizeValue(StepSize.EIGHTH), frame(0x38, 0x08)),
    (StepSizeValue(StepSize.SIXTEENTH), frame(0x38, 0x10)),
    (StepSizeValue(StepSize.THIRTY_SECOND), frame(0x38, 0x20)),
    (LfoKeyRetriggerValue(OnOff.OFF), frame(0x0F, 0x00)),
    (LfoKeyRetriggerValue(OnOff.ON), frame(0x0F, 0x01)),
    (EnvelopeLegatoValue(OnOff.OFF), frame(0x0D, 0x00)),
    (EnvelopeLegatoValue(OnOff.ON), frame(0x0D, 0x01)),
    (GateLengthValue(GateLength.SHORT), frame(0x36, 0x01)),
    (GateLengthValue(GateLength.MEDIUM), frame(0x36, 0x02)),
    (GateLengthValue(GateLength.LONG), frame(0x36, 0x03)),
    (SyncSourceValue(SyncSource.AUTO), frame(0x3C, 0x00)),
    (SyncSourceValue(SyncSource.INTERNAL), frame(0x3C, 0x01)),
    (SyncSourceValue(SyncSource.EXTERNAL), frame(0x3C, 0x02)),
])
def test_sysex_value_tables(command, expected):
    assert get_command_data(command) == expected


def test_transmit_channel_is_zero_based():
    assert get_command_data(TransmitChannelValue(MidiChannel.from_int(1))) == frame(0x07, 0x00)
    assert get_command_data(TransmitChannelValue(MidiChannel.from_int(16))) == frame(0x07, 0x0F)

def test_receive_channel_is_zero_based():
    assert get_command_data(ReceiveChannelValue(MidiChannel.from_int(10))) == frame(0x05, 0x09)

def test_receive_channel_all():
    assert get_command_data(ReceiveChannelValue(ReceiveAll.ALL)) == frame(0x05, 0x10)

def test_local_control_ignores_transmit_channel():
    # Channel byte is fixed regardless of any selected transmit channel
    assert get_command_data(LocalControl(OnOff.ON))[0] == 0xB0


def test_every_sysex_variant_has_setting_byte():
    sysex_types = [t for t in command_types() if issubclass(t, SysexCommand)]
    assert set(sysex_types) == set(SETTING_BYTES)
    assert len(set(SETTING_BYTES.values())) == len(SETTING_BYTES)

def test_every_command_encodes_to_valid_bytes():
    for command_type in command_types():
        for command in all_commands(command_type):
            data = get_command_data(command)
            assert all(0 <= b <= 255 for b in data), command
            if isinstance(command, SysexCommand):
                assert len(data) == 10
                assert data[0] == 0xF0 and data[-1] == 0xF7
                assert all(b <= 0x7F for b in data[1:-1]), command
            else:
                assert len(data) == 3

def test_build_setting_message_counter():
    msg = build_setting_message(0x0B, 0x01, counter=0x00)
    assert msg == frame(0x0B, 0x01)

def test_get_command_data_rejects_non_command():
    with pytest.raises(TypeError):
        get_command_data("note priority")

def test_directly_constructed_bounded_values_stay_in_range():
    assert get_command_data(TransmitChannelValue(MidiChannel(0))) == frame(0x07, 0x00)
    assert get_command_data(ReceiveChannelValue(MidiChannel(40))) == frame(0x05, 0x0F)
    assert get_command_data(BendRangeValue(BendRange(200))) == frame(0x2C, 12)
    assert get_command_data(BendRangeValue(BendRange(-1))) == frame(0x2C, 1)
