import subprocess
import sys

import pytest

pytest.importorskip("PySide6")
pytest.importorskip("pyqtgraph")


@pytest.mark.parametrize(
    "modules",
    [
        ["angular_motion_workbench.app.widgets", "angular_motion_workbench.app.rendering"],
        ["angular_motion_workbench.app.rendering", "angular_motion_workbench.app.widgets"],
        ["angular_motion_workbench.app.widgets.scene_view"],
    ],
)
def test_app_packages_import_in_any_order(modules) -> None:
    # Fresh interpreter so earlier imports in this session cannot hide a cycle.
    code = "import importlib\n" + "".join(f"importlib.import_module({name!r})\n" for name in modules)
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
