from __future__ import annotations

from dataclasses import dataclass

from PySide6 import QtCore, QtWidgets

from ...core.sim import SimulationSnapshot


@dataclass
class DisplayOptions:
    show_attractor: bool = True
    show_grid: bool = False
    mover_opacity: float = 0.78


class Renderer(QtWidgets.QWidget):
    entity_selected = QtCore.Signal(str)

    def draw(self, snapshot: SimulationSnapshot) -> None:
        raise NotImplementedError

    def set_display_options(self, display: DisplayOptions) -> None:
        _ = display

    def set_selected(self, entity_id: str | None) -> None:
        _ = entity_id

    def set_view_range(self, view_range: tuple[float, float, float, float]) -> None:
        _ = view_range

    def clear(self) -> None:
        raise NotImplementedError
