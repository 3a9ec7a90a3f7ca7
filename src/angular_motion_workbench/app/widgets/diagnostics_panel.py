from __future__ import annotations

from PySide6 import QtWidgets

from ...core.physics import kinetic_energy, max_angular_speed, total_mass
from ...core.sim import Simulation


class DiagnosticsPanel(QtWidgets.QGroupBox):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Diagnostics", parent)
        layout = QtWidgets.QFormLayout(self)

        self._tick = QtWidgets.QLabel("-")
        self._count = QtWidgets.QLabel("-")
        self._total_mass = QtWidgets.QLabel("-")
        self._kinetic = QtWidgets.QLabel("-")
        self._max_omega = QtWidgets.QLabel("-")

        layout.addRow("Tick", self._tick)
        layout.addRow("Movers", self._count)
        layout.addRow("Total Mass", self._total_mass)
        layout.addRow("Kinetic Energy", self._kinetic)
        layout.addRow("max |omega|", self._max_omega)

    def update_values(self, sim: Simulation | None) -> None:
        if sim is None:
            for label in (self._tick, self._count, self._total_mass, self._kinetic, self._max_omega):
                label.setText("-")
            return
        self._tick.setText(str(sim.tick_count))
        self._count.setText(str(len(sim.movers)))
        self._total_mass.setText(f"{total_mass(sim.movers):.3f}")
        self._kinetic.setText(f"{kinetic_energy(sim.movers):.4f}")
        self._max_omega.setText(f"{max_angular_speed(sim.movers):.4f}")
