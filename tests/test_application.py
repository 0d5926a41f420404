import pytest
from PySide6.QtNetwork import QLocalServer, QLocalSocket

from textdisplay import main as main_module
from textdisplay.app.application import ApplicationController, create_app
from textdisplay.app.ui.main_window import MainWindow
from textdisplay.config import APP_ID, VISIBLE_APP_NAME


@pytest.fixture
def make_controller(qapp, app_id):
    created = []

    def factory():
        ctrl = ApplicationController(qapp, app_id=app_id)
        created.append(ctrl)
        return ctrl

    yield factory

    for ctrl in created:
        if ctrl.window is not None:
            ctrl.window.close()
        ctrl.shutdown()


def test_create_app_reuses_instance_and_sets_names(qapp):
    app = create_app(["textdisplay"])
    assert app is qapp
    assert app.applicationName() == APP_ID
    assert app.applicationDisplayName() == VISIBLE_APP_NAME


def test_no_window_before_activation(make_controller):
    assert make_controller().window is None


def test_activate_creates_window_once(make_controller):
    ctrl = make_controller()
    first = ctrl.activate()
    second = ctrl.activate()
    assert isinstance(first, MainWindow)
    assert first is second
    assert ctrl.window is first
    assert first.isVisible()


def test_activate_restores_minimized_window(make_controller):
    ctrl = make_controller()
    window = ctrl.activate()
    window.showMinimized()
    assert ctrl.activate() is window
    assert not window.isMinimized()


def test_window_reference_cleared_on_close(make_controller, qtbot):
    ctrl = make_controller()
    window = ctrl.activate()
    window.close()
    qtbot.waitUntil(lambda: ctrl.window is None, timeout=2000)


def test_activate_after_close_builds_fresh_window(make_controller, qtbot):
    ctrl = make_controller()
    window = ctrl.activate()
    window.set_input_text("Hello")
    window.action_button.click()
    window.close()
    qtbot.waitUntil(lambda: ctrl.window is None, timeout=2000)

    fresh = ctrl.activate()
    assert fresh.input_text() == ""
    assert fresh.display_content().text != "Hello"


def test_first_register_is_primary(make_controller):
    ctrl = make_controller()
    assert ctrl.register() is True
    assert ctrl.is_primary


def test_second_register_forwards_activation(make_controller, qtbot):
    primary = make_controller()
    assert primary.register()
    assert primary.window is None

    secondary = make_controller()
    assert secondary.register() is False
    assert not secondary.is_primary
    assert secondary.window is None

    qtbot.waitUntil(lambda: primary.window is not None, timeout=3000)


def test_forwarded_activation_reuses_window(make_controller, qtbot):
    primary = make_controller()
    primary.register()
    window = primary.activate()

    make_controller().register()
    qtbot.wait(200)
    assert primary.window is window


def test_secondary_run_returns_zero(make_controller):
    primary = make_controller()
    primary.register()

    secondary = make_controller()
    assert secondary.run() == 0
    assert secondary.window is None


def test_register_after_shutdown(make_controller):
    first = make_controller()
    first.register()
    first.shutdown()
    assert not first.is_primary

    assert make_controller().register() is True


def test_listen_failure_is_fatal(make_controller, monkeypatch):
    monkeypatch.setattr(QLocalServer, "listen", lambda self, name: False)
    ctrl = make_controller()
    with pytest.raises(RuntimeError, match="Could not register"):
        ctrl.register()
    assert not ctrl.is_primary


def test_main_forwards_argv_and_returns_exit_code(monkeypatch, qapp):
    calls = {}

    def fake_create_app(argv):
        calls["argv"] = argv
        return qapp

    class FakeController:
        def __init__(self, app):
            calls["app"] = app

        def run(self):
            return 7

    monkeypatch.setattr(main_module, "create_app", fake_create_app)
    monkeypatch.setattr(main_module, "ApplicationController", FakeController)
    monkeypatch.setattr(main_module, "setup_logging", lambda level: None)

    assert main_module.main(["textdisplay", "--passthrough"]) == 7
    assert calls["argv"] == ["textdisplay", "--passthrough"]
    assert calls["app"] is qapp


def test_unresponsive_primary_keeps_its_server(make_controller, monkeypatch):
    primary = make_controller()
    assert primary.register()

    monkeypatch.setattr(QLocalSocket, "waitForConnected", lambda self, msecs=30000: False)
    secondary = make_controller()
    assert secondary.register() is False
    assert not secondary.is_primary

    assert primary.is_primary
    monkeypatch.undo()
    listener = QLocalSocket()
    listener.connectToServer(primary.app_id)
    assert listener.waitForConnected(1000)
    listener.disconnectFromServer()


def test_two_launches_yield_one_primary(make_controller):
    results = [make_controller().register(), make_controller().register()]
    assert results == [True, False]


def test_listen_failure_releases_the_id(make_controller, monkeypatch):
    monkeypatch.setattr(QLocalServer, "listen", lambda self, name: False)
    with pytest.raises(RuntimeError):
        make_controller().register()
    monkeypatch.undo()

    assert make_controller().register() is True
