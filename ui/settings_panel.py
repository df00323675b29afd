from __future__ import annotations
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QScrollArea,
)
from PyQt6.QtCore import pyqtSignal
from midi.commands import Command
from midi.labels import option_name
from model.settings import Registry
from ui.widgets import SettingCombo, SettingRadioGroup, make_setting_widget


class SettingsPanel(QWidget):
    """Renders a registry as one group box per settings group.

    User picks are reported through `command_selected`; the panel never
    changes the registry itself, the owner feeds the updated one back via
    `set_registry`.
    """

    command_selected = pyqtSignal(object)  # Command

    def __init__(self, registry: Registry, parent=None) -> None:
        super().__init__(parent)
        self._registry = registry
        self._widgets: list[SettingCombo | SettingRadioGroup] = []
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        layout = QVBoxLayout(content)

        for group in self._registry:
            box = QGroupBox(group.name)
            form = QFormLayout(box)
            for setting in group.settings:
                widget = make_setting_widget(setting, self.command_selected.emit)
                self._widgets.append(widget)
                form.addRow(option_name(setting.allowed_values[0]) + ":", widget)
            layout.addWidget(box)

        layout.addStretch()
        scroll.setWidget(content)
        outer.addWidget(scroll)

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def setting_widgets(self) -> list[SettingCombo | SettingRadioGroup]:
        return list(self._widgets)

    def set_registry(self, registry: Registry) -> None:
        """Show the selections of `registry` without emitting command_selected."""
        self._registry = registry
        settings = [s for group in registry for s in group.settings]
        for widget, setting in zip(self._widgets, settings):
            widget.set_selected(setting.selected)

    def widget_for(self, command: Command) -> SettingCombo | SettingRadioGroup | None:
        settings = [s for group in self._registry for s in group.settings]
        for widget, setting in zip(self._widgets, settings):
            if setting.allows(command):
                return widget
        return None
