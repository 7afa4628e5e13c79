# ruff: noqa: S105

import pytest

import rtlite.rest1
from . import FakeGet

# blank setup defaults
RT_URL = 'http://localhost:8080/REST/1.0/'
RT_USER = 'root'
RT_PASSWORD = 'password'


@pytest.fixture()
def fake_get() -> FakeGet:
    return FakeGet()


@pytest.fixture()
def rt_connection(monkeypatch: pytest.MonkeyPatch, fake_get: FakeGet) -> rtlite.rest1.Rt:
    """Setup a connection whose HTTP GETs are answered by ``fake_get``."""
    tracker = rtlite.rest1.Rt(RT_URL, RT_USER, RT_PASSWORD)
    monkeypatch.setattr(tracker.session, 'get', fake_get)
    return tracker
