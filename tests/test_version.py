from importlib import metadata

import chartdraw
from chartdraw import _version


def test_version_is_a_string() -> None:
    assert isinstance(chartdraw.__version__, str)
    assert chartdraw.__version__


def test_version_falls_back_when_not_installed(monkeypatch) -> None:
    def missing(name: str) -> str:
        raise metadata.PackageNotFoundError(name)

    monkeypatch.setattr(_version.metadata, "version", missing)
    assert _version.get_version() == "0.0.0"
