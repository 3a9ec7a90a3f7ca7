from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from ...core.settings import SimulationSettings


class SimulationPanel(QtWidgets.QGroupBox):
    settings_changed = QtCore.Signal(object)

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Simulation", parent)
        layout = QtWidgets.QFormLayout(self)
        self._settings = SimulationSettings()

        self._body_count_spin = QtWidgets.QSpinBox()
        self._body_count_spin.setRange(0, 500)

        self._g_spin = QtWidgets.QDoubleSpinBox()
        self._g_spin.setRange(0.0, 100.0)
        self._g_spin.setDecimals(3)
        self._g_spin.setSingleStep(0.05)

        self._attractor_mass_spin = QtWidgets.QDoubleSpinBox()
        self._attractor_mass_spin.setRange(0.1, 1000.0)
        self._attractor_mass_spin.setDecimals(2)

        self._seed_check = QtWidgets.QCheckBox("Fixed seed")
        self._seed_spin = QtWidgets.QSpinBox()
        self._seed_spin.setRange(0, 2**31 - 1)
        self._seed_spin.setEnabled(False)
        self._seed_check.toggled.connect(self._seed_spin.setEnabled)

        self._apply_button = QtWidgets.QPushButton("Apply")
        self._apply_button.clicked.connect(self._emit_settings_changed)

        layout.addRow("Movers", self._body_count_spin)
        layout.addRow("G", self._g_spin)
        layout.addRow("Attractor mass", self._attractor_mass_spin)
        layout.addRow(self._seed_check, self._seed_spin)
        layout.addRow(self._apply_button)

        self.set_settings(self._settings)

    def set_settings(self, settings: SimulationSettings) -> None:
        self._settings = settings
        self._body_count_spin.setValue(int(settings.body_count))
        self._g_spin.setValue(float(settings.gravitational_constant))
        self._attractor_mass_spin.setValue(float(settings.attractor_mass))
        self._seed_check.setChecked(settings.seed is not None)
        self._seed_spin.setValue(int(settings.seed or 0))

    def settings(self) -> SimulationSettings:
        seed = int(self._seed_spin.value()) if self._seed_check.isChecked() else None
        return self._settings.replace(
            body_count=int(self._body_count_spin.value()),
            gravitational_constant=float(self._g_spin.value()),
            attractor_mass=float(self._attractor_mass_spin.value()),
            seed=seed,
        )

    def _emit_settings_changed(self) -> None:
        self.settings_changed.emit(self.settings())
