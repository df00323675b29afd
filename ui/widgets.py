"""Selection widgets bound to one registry setting."""
from __future__ import annotations
from typing import Callable
from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QComboBox, QRadioButton, QButtonGroup,
)
from midi.commands import Command
from midi.labels import option_value
from model.settings import Setting

# Settings with more choices than this use a combo box
MAX_RADIO_CHOICES = 5


class SettingCombo(QComboBox):
    """A combo box listing every allowed value of a setting."""

    def __init__(
        self,
        setting: Setting,
        on_change: Callable[[Command], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._commands = list(setting.allowed_values)
        self._on_change = on_change
        # Blank entry until the user (or a loaded registry) picks a value
        self.addItem("", None)
        for command in self._commands:
            self.addItem(option_value(command), command)
        self.activated.connect(self._emit_change)
        self.set_selected(setting.selected)

    def _emit_change(self, idx: int) -> None:
        command = self.itemData(idx)
        if command is not None:
            self._on_change(command)

    def set_selected(self, command: Command | None) -> None:
        self.blockSignals(True)
        idx = self._commands.index(command) + 1 if command in self._commands else 0
        self.setCurrentIndex(idx)
        self.blockSignals(False)

    def selected(self) -> Command | None:
        return self.currentData()


class SettingRadioGroup(QWidget):
    """Horizontal radio-button group for settings with few choices."""

    def __init__(
        self,
        setting: Setting,
        on_change: Callable[[Command], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._commands = list(setting.allowed_values)
        self._on_change = on_change
        self._button_group = QButtonGroup(self)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        for i, command in enumerate(self._commands):
            btn = QRadioButton(option_value(command))
            self._button_group.addButton(btn, i)
            layout.addWidget(btn)
        layout.addStretch()
        self._button_group.idClicked.connect(self._on_clicked)
        self.set_selected(setting.selected)

    def _on_clicked(self, idx: int) -> None:
        self._on_change(self._commands[idx])

    def button(self, idx: int) -> QRadioButton:
        return self._button_group.button(idx)

    def set_selected(self, command: Command | None) -> None:
        if command not in self._commands:
            # No selection yet: clear without a checked button
            self._button_group.setExclusive(False)
            for btn in self._button_group.buttons():
                btn.setChecked(False)
            self._button_group.setExclusive(True)
            return
        btn = self._button_group.button(self._commands.index(command))
        btn.blockSignals(True)
        btn.setChecked(True)
        btn.blockSignals(False)

    def selected(self) -> Command | None:
        idx = self._button_group.checkedId()
        return self._commands[idx] if idx >= 0 else None


def make_setting_widget(
    setting: Setting, on_change: Callable[[Command], None],
) -> SettingCombo | SettingRadioGroup:
    if len(setting.allowed_values) <= MAX_RADIO_CHOICES:
        return SettingRadioGroup(setting, on_change)
    return SettingCombo(setting, on_change)
