"""Shared fixtures; Qt runs on the offscreen platform so no display is needed."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Return a process-wide :class:`QGuiApplication` for painter tests."""
    from PySide6 import QtGui

    app = QtGui.QGuiApplication.instance()
    if app is None:
        app = QtGui.QGuiApplication([])
    yield app
