from __future__ import annotations

import numpy as np
from PySide6 import QtWidgets

from ...core.model import Mover


class InspectorPanel(QtWidgets.QGroupBox):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Inspector", parent)
        layout = QtWidgets.QFormLayout(self)

        self._id_field = self._make_field()
        self._mass_field = self._make_field()
        self._position_field = self._make_field()
        self._velocity_field = self._make_field()
        self._speed_field = self._make_field()
        self._angle_field = self._make_field()
        self._angular_velocity_field = self._make_field()

        layout.addRow("ID", self._id_field)
        layout.addRow("Mass", self._mass_field)
        layout.addRow("Position", self._position_field)
        layout.addRow("Velocity", self._velocity_field)
        layout.addRow("Speed", self._speed_field)
        layout.addRow("Angle (rad)", self._angle_field)
        layout.addRow("Angular velocity", self._angular_velocity_field)

        self.set_mover(None)

    def set_mover(self, mover: Mover | None) -> None:
        if mover is None:
            for field in self._fields():
                field.setText("-")
            self.setEnabled(False)
            return
        self.setEnabled(True)
        self._id_field.setText(mover.entity_id)
        self._mass_field.setText(f"{mover.mass:.3f}")
        self._position_field.setText(self._format_vector(mover.position))
        self._velocity_field.setText(self._format_vector(mover.velocity))
        self._speed_field.setText(f"{mover.speed:.3f}")
        self._angle_field.setText(f"{mover.angle:.4f}")
        self._angular_velocity_field.setText(f"{mover.angular_velocity:+.4f}")

    def _fields(self) -> list[QtWidgets.QLineEdit]:
        return [
            self._id_field,
            self._mass_field,
            self._position_field,
            self._velocity_field,
            self._speed_field,
            self._angle_field,
            self._angular_velocity_field,
        ]

    @staticmethod
    def _make_field() -> QtWidgets.QLineEdit:
        field = QtWidgets.QLineEdit()
        field.setReadOnly(True)
        return field

    @staticmethod
    def _format_vector(vec: np.ndarray) -> str:
        return f"[{vec[0]:.3f}, {vec[1]:.3f}]"
