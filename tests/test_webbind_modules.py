import webbind
from webbind.infra.config_store import Config
from webbind.native import NativeHandleKind, WindowSizeHint


def test_package_exports():
    assert webbind.Webview is webbind.webview.Webview
    assert issubclass(webbind.DuplicateError, webbind.WebviewError)
    assert WindowSizeHint.FIXED == 3
    assert NativeHandleKind.BROWSER_CONTROLLER == 2


def test_config_defaults(tmp_path, monkeypatch):
    from webbind.infra import config_store

    monkeypatch.setattr(config_store, "CONFIG_FILE", str(tmp_path / "missing.json"))
    config = Config()
    assert config.get("library_path") == ""
    assert config.get("debug") is False
    assert config.get("window_title") == "webbind"
