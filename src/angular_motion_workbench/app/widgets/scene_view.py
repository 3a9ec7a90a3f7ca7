from __future__ import annotations

from typing import List, Optional

import numpy as np
import pyqtgraph as pg
from PySide6 import QtCore, QtGui, QtWidgets

from ...core.sim import MoverSnapshot, SimulationSnapshot
from ..rendering.base import DisplayOptions, Renderer

_ATTRACTOR_BRUSH = (128, 128, 128)
_MOVER_GREY = (153, 153, 153)
_SELECTED_COLOR = "#ff8f00"


class SceneView(Renderer):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._plot = pg.PlotWidget(background="w")
        self._plot.setAspectLocked(True)
        self._plot.showGrid(x=False, y=False)
        self._plot.setLabel("bottom", "X")
        self._plot.setLabel("left", "Y")
        self._plot.setMouseTracking(True)
        # pxMode=False sizes the attractor in scene units, like the movers.
        self._attractor_item = pg.ScatterPlotItem(pxMode=False, symbol="o")
        self._plot.addItem(self._attractor_item)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._plot)

        self._mover_items: List[QtWidgets.QGraphicsPolygonItem] = []
        self._movers: tuple[MoverSnapshot, ...] = ()
        self._display = DisplayOptions()
        self._selected_id: Optional[str] = None

        self._plot.scene().sigMouseClicked.connect(self._on_mouse_clicked)

    def set_view_range(self, view_range: tuple[float, float, float, float]) -> None:
        x_min, x_max, y_min, y_max = view_range
        self._plot.setXRange(x_min, x_max, padding=0.0)
        self._plot.setYRange(y_min, y_max, padding=0.0)

    def set_display_options(self, display: DisplayOptions) -> None:
        self._display = display
        self._plot.showGrid(x=display.show_grid, y=display.show_grid, alpha=0.2)
        self._attractor_item.setVisible(display.show_attractor)
        self._refresh_movers()

    def set_selected(self, entity_id: str | None) -> None:
        self._selected_id = entity_id
        self._refresh_movers()

    def draw(self, snapshot: SimulationSnapshot) -> None:
        attractor = snapshot.attractor
        self._attractor_item.setData(
            pos=np.asarray(attractor.position, dtype=float).reshape(1, 2),
            size=attractor.visual_size,
            brush=pg.mkBrush(*_ATTRACTOR_BRUSH),
            pen=pg.mkPen("k", width=1.0),
        )
        self._movers = snapshot.movers
        self._ensure_mover_items(len(self._movers))
        self._refresh_movers()

    def clear(self) -> None:
        self._attractor_item.setData(pos=np.empty((0, 2), dtype=float))
        self._movers = ()
        self._ensure_mover_items(0)

    def _ensure_mover_items(self, count: int) -> None:
        while len(self._mover_items) < count:
            item = QtWidgets.QGraphicsPolygonItem()
            self._plot.addItem(item)
            self._mover_items.append(item)
        while len(self._mover_items) > count:
            item = self._mover_items.pop()
            self._plot.removeItem(item)

    def _refresh_movers(self) -> None:
        alpha = int(round(255 * min(max(self._display.mover_opacity, 0.0), 1.0)))
        for item, mover in zip(self._mover_items, self._movers):
            polygon = QtGui.QPolygonF([QtCore.QPointF(float(x), float(y)) for x, y in mover.corners()])
            item.setPolygon(polygon)
            if mover.entity_id == self._selected_id:
                item.setBrush(pg.mkBrush(_SELECTED_COLOR))
                item.setPen(pg.mkPen("#e65100", width=2.0))
            else:
                item.setBrush(pg.mkBrush(*_MOVER_GREY, alpha))
                item.setPen(pg.mkPen("k", width=1.0))

    def _pick_mover(self, view_pos: np.ndarray) -> Optional[str]:
        # Topmost mover wins, matching draw order.
        for mover in reversed(self._movers):
            if np.linalg.norm(view_pos - mover.position) <= 0.5 * mover.size * np.sqrt(2.0):
                return mover.entity_id
        return None

    def _on_mouse_clicked(self, event) -> None:
        if event.button() != QtCore.Qt.LeftButton:
            return
        view_pos = self._plot.getViewBox().mapSceneToView(event.scenePos())
        picked = self._pick_mover(np.array([view_pos.x(), view_pos.y()], dtype=float))
        if picked is not None:
            self.entity_selected.emit(picked)
