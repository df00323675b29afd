from __future__ import annotations
from dataclasses import dataclass, replace
from midi.commands import (
    Command, all_commands, LocalControl, NotePriorityValue,
    VelocityResponseValue, SeqPlayValue, SeqRetriggerValue, NextSequenceValue,
    StepModeValue, StepSizeValue, TransmitChannelValue, ReceiveChannelValue,
    LfoKeyRetriggerValue, EnvelopeLegatoValue, BendRangeValue,
    GateLengthValue, SyncSourceValue,
)


@dataclass(frozen=True)
class Setting:
    """One device parameter: the values it accepts and the one chosen, if any."""
    allowed_values: tuple[Command, ...]
    selected: Command | None = None

    def __post_init__(self) -> None:
        if self.selected is not None and self.selected not in self.allowed_values:
            raise ValueError(f"{self.selected!r} is not an allowed value of this setting")

    def allows(self, command: Command) -> bool:
        return command in self.allowed_values

    def select(self, command: Command) -> Setting:
        return replace(self, selected=command)


@dataclass(frozen=True)
class SettingsGroup:
    name: str
    settings: tuple[Setting, ...]


Registry = tuple[SettingsGroup, ...]


def _setting(command_type: type[Command]) -> Setting:
    return Setting(allowed_values=tuple(all_commands(command_type)))


# Group layout follows the MicroBrute Connection settings page
_LAYOUT: list[tuple[str, list[type[Command]]]] = [
    ("Keyboard Parameters", [NotePriorityValue, VelocityResponseValue]),
    ("Sequencer Control", [
        SeqPlayValue, SeqRetriggerValue, NextSequenceValue,
        StepModeValue, StepSizeValue, GateLengthValue, SyncSourceValue,
    ]),
    ("MIDI Channel Select", [
        TransmitChannelValue, ReceiveChannelValue, LocalControl,
    ]),
    ("Module Parameters", [
        LfoKeyRetriggerValue, EnvelopeLegatoValue, BendRangeValue,
    ]),
]


def check_registry(registry: Registry) -> None:
    """Raise ValueError if any command is offered by more than one setting."""
    seen: set[Command] = set()
    for group in registry:
        for setting in group.settings:
            for command in setting.allowed_values:
                if command in seen:
                    raise ValueError(
                        f"{command!r} is offered by more than one setting "
                        f"(found again in group '{group.name}')"
                    )
                seen.add(command)


def initial_registry() -> Registry:
    """The startup registry: every setting present, nothing selected."""
    registry = tuple(
        SettingsGroup(name=name, settings=tuple(_setting(t) for t in types))
        for name, types in _LAYOUT
    )
    check_registry(registry)
    return registry


def update_setting(registry: Registry, command: Command) -> Registry:
    """Return a registry where the setting that offers `command` has it selected.

    Nothing else changes.  A command no setting offers leaves the registry as
    it was.
    """
    return tuple(
        replace(group, settings=tuple(
            setting.select(command) if setting.allows(command) else setting
            for setting in group.settings
        ))
        for group in registry
    )


def owning_setting(registry: Registry, command: Command) -> Setting | None:
    for group in registry:
        for setting in group.settings:
            if setting.allows(command):
                return setting
    return None


def selected_commands(registry: Registry) -> list[Command]:
    """The current selections in registry order."""
    return [
        setting.selected
        for group in registry
        for setting in group.settings
        if setting.selected is not None
    ]
