from __future__ import annotations

import logging

from PySide6 import QtCore, QtGui, QtWidgets

from ..core.errors import ConfigurationError
from ..core.scenarios import ScenarioUIDefaults, load_builtin_scenarios, scenario_registry
from ..core.settings import SimulationSettings, simulation_from_settings
from ..core.sim import Simulation
from .rendering import DisplayOptions
from .widgets import DiagnosticsPanel, InspectorPanel, SceneView, SimulationPanel

_LOG = logging.getLogger(__name__)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Angular Motion Workbench")
        self.resize(1100, 520)

        load_builtin_scenarios()

        self._simulation: Simulation | None = None
        self._settings: SimulationSettings | None = None
        self._scenario_id: str | None = None
        self._selected_id: str | None = None
        self._display_options = DisplayOptions()
        self._frame_interval_ms = ScenarioUIDefaults().frame_interval_ms

        self._renderer = SceneView()
        self._renderer.entity_selected.connect(self._on_entity_selected)
        self.setCentralWidget(self._renderer)

        self._simulation_panel = SimulationPanel()
        self._simulation_panel.settings_changed.connect(self._on_settings_changed)
        self._simulation_dock = self._add_dock("Simulation", self._simulation_panel, QtCore.Qt.RightDockWidgetArea)

        self._inspector = InspectorPanel()
        self._inspector.setTitle("")
        self._inspector_dock = self._add_dock("Inspector", self._inspector, QtCore.Qt.LeftDockWidgetArea)

        self._diagnostics = DiagnosticsPanel()
        self._diagnostics.setTitle("")
        self._diagnostics_dock = self._add_dock("Diagnostics", self._diagnostics, QtCore.Qt.LeftDockWidgetArea)

        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self._on_tick)

        self._play_action = QtGui.QAction("Play", self)
        self._play_action.setCheckable(True)
        self._play_action.setShortcut(QtGui.QKeySequence(QtCore.Qt.Key_Space))
        self._play_action.triggered.connect(self._toggle_play)

        self._step_action = QtGui.QAction("Step", self)
        self._step_action.setShortcut(QtGui.QKeySequence(QtCore.Qt.Key_Right))
        self._step_action.triggered.connect(self._single_step)

        self._reset_action = QtGui.QAction("Reset", self)
        self._reset_action.setShortcut(QtGui.QKeySequence("Ctrl+R"))
        self._reset_action.triggered.connect(self._reset_scene)

        self._show_attractor_action = QtGui.QAction("Show Attractor", self)
        self._show_attractor_action.setCheckable(True)
        self._show_attractor_action.setChecked(self._display_options.show_attractor)
        self._show_attractor_action.toggled.connect(self._on_display_action)

        self._show_grid_action = QtGui.QAction("Show Grid", self)
        self._show_grid_action.setCheckable(True)
        self._show_grid_action.setChecked(self._display_options.show_grid)
        self._show_grid_action.toggled.connect(self._on_display_action)

        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")
        self._scenario_menu = file_menu.addMenu("Scenario")
        self._scenario_group = QtGui.QActionGroup(self)
        self._scenario_group.setExclusive(True)
        self._scenario_actions: dict[str, QtGui.QAction] = {}
        for scenario in scenario_registry.all():
            action = QtGui.QAction(scenario.name, self)
            action.setCheckable(True)
            action.setData(scenario.scenario_id)
            action.triggered.connect(self._on_scenario_action)
            self._scenario_group.addAction(action)
            self._scenario_menu.addAction(action)
            self._scenario_actions[scenario.scenario_id] = action
        file_menu.addSeparator()
        quit_action = file_menu.addAction("Quit")
        quit_action.triggered.connect(self.close)

        sim_menu = menu_bar.addMenu("Simulation")
        sim_menu.addAction(self._play_action)
        sim_menu.addAction(self._step_action)
        sim_menu.addAction(self._reset_action)

        view_menu = menu_bar.addMenu("View")
        view_menu.addAction(self._show_attractor_action)
        view_menu.addAction(self._show_grid_action)
        view_menu.addSeparator()
        for dock in (self._simulation_dock, self._inspector_dock, self._diagnostics_dock):
            view_menu.addAction(dock.toggleViewAction())

        toolbar = self.addToolBar("Simulation")
        toolbar.addAction(self._play_action)
        toolbar.addAction(self._step_action)
        toolbar.addAction(self._reset_action)

        scenario_ids = [scenario.scenario_id for scenario in scenario_registry.all()]
        if scenario_ids:
            self._select_scenario_in_menu(scenario_ids[0])
            self._set_scenario(scenario_ids[0])

    def _add_dock(
        self, title: str, widget: QtWidgets.QWidget, area: QtCore.Qt.DockWidgetArea
    ) -> QtWidgets.QDockWidget:
        dock = QtWidgets.QDockWidget(title, self)
        dock.setWidget(widget)
        dock.setAllowedAreas(QtCore.Qt.LeftDockWidgetArea | QtCore.Qt.RightDockWidgetArea)
        self.addDockWidget(area, dock)
        return dock

    def _on_scenario_action(self) -> None:
        action = self.sender()
        if not isinstance(action, QtGui.QAction):
            return
        scenario_id = action.data()
        if scenario_id is None:
            return
        self._set_scenario(str(scenario_id))

    def _set_scenario(self, scenario_id: str) -> None:
        scenario = scenario_registry.get(scenario_id)
        _LOG.info("Switching to scenario %s", scenario_id)
        settings = scenario.settings()
        self._simulation_panel.set_settings(settings)
        self._set_simulation(scenario.create_simulation(), settings, scenario_id)
        defaults = scenario.ui_defaults()
        if defaults:
            self._frame_interval_ms = defaults.frame_interval_ms
            if defaults.view_range:
                self._renderer.set_view_range(defaults.view_range)
        if self._timer.isActive():
            self._timer.start(max(self._frame_interval_ms, 1))

    def _set_simulation(self, sim: Simulation, settings: SimulationSettings, scenario_id: str | None) -> None:
        self._simulation = sim
        self._settings = settings
        self._scenario_id = scenario_id
        self._selected_id = None
        self._renderer.set_selected(None)
        self._update_ui()

    def _update_ui(self) -> None:
        if self._simulation is None:
            self._renderer.clear()
            self._diagnostics.update_values(None)
            self._inspector.set_mover(None)
            return
        self._renderer.draw(self._simulation.snapshot())
        self._diagnostics.update_values(self._simulation)
        mover = None if self._selected_id is None else self._simulation.get_mover(self._selected_id)
        self._inspector.set_mover(mover)

    def _toggle_play(self, checked: bool) -> None:
        if self._simulation is None:
            return
        if checked:
            self._play_action.setText("Pause")
            self._timer.start(max(self._frame_interval_ms, 1))
        else:
            self._play_action.setText("Play")
            self._timer.stop()

    def _single_step(self) -> None:
        if self._simulation is None:
            return
        if self._timer.isActive():
            return
        self._simulation.tick()
        self._update_ui()

    def _on_tick(self) -> None:
        if self._simulation is None:
            return
        self._simulation.tick()
        self._update_ui()

    def _reset_scene(self) -> None:
        if self._settings is None:
            return
        self._set_simulation(simulation_from_settings(self._settings), self._settings, self._scenario_id)

    def _on_settings_changed(self, settings: SimulationSettings) -> None:
        try:
            sim = simulation_from_settings(settings)
        except ConfigurationError as exc:
            _LOG.warning("Rejected simulation settings: %s", exc)
            QtWidgets.QMessageBox.warning(self, "Invalid Settings", str(exc))
            return
        self._set_simulation(sim, settings, self._scenario_id)

    def _on_entity_selected(self, entity_id: str) -> None:
        self._selected_id = entity_id
        self._renderer.set_selected(entity_id)
        self._update_ui()

    def _on_display_action(self) -> None:
        self._display_options = DisplayOptions(
            show_attractor=self._show_attractor_action.isChecked(),
            show_grid=self._show_grid_action.isChecked(),
            mover_opacity=self._display_options.mover_opacity,
        )
        self._renderer.set_display_options(self._display_options)

    def _select_scenario_in_menu(self, scenario_id: str | None) -> None:
        self._scenario_group.blockSignals(True)
        if scenario_id is None or scenario_id not in self._scenario_actions:
            for action in self._scenario_group.actions():
                action.setChecked(False)
        else:
            self._scenario_actions[scenario_id].setChecked(True)
        self._scenario_group.blockSignals(False)
