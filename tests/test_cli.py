"""Tests for the ``rtlite`` command line."""
# ruff: noqa: S105

import datetime
import logging

import pytest
import requests

import rtlite.rest1
from rtlite import __main__ as cli
from rtlite.exceptions import NotFoundError
from rtlite.records import Ticket

ARGS = ['--url', 'http://localhost:8080/REST/1.0/', '--user', 'root', '--password', 'password']


def test_format_ticket():
    ticket = Ticket(id='ticket/1', subject='Printer on fire', priority=3,
                    created=datetime.datetime(2022, 3, 14, 10, 12, 45, tzinfo=datetime.timezone.utc))
    lines = cli.format_ticket(ticket)
    assert 'id: ticket/1' in lines
    assert 'subject: Printer on fire' in lines
    assert 'priority: 3' in lines
    assert 'created: Mon Mar 14 10:12:45 2022' in lines
    assert 'due: Not set' in lines


def test_main_prints_ticket(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    requested = []

    def get_ticket(self: rtlite.rest1.Rt, ticket_id: int) -> Ticket:
        requested.append((self.url, self.default_login, ticket_id))
        return Ticket(id=f'ticket/{ticket_id}', subject='Printer on fire')

    monkeypatch.setattr(rtlite.rest1.Rt, 'get_ticket', get_ticket)

    assert cli.main(ARGS + ['42']) == 0
    assert requested == [('http://localhost:8080/REST/1.0/', 'root', 42)]
    out = capsys.readouterr().out
    assert 'id: ticket/42\n' in out
    assert 'subject: Printer on fire\n' in out


def test_main_reads_environment(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    monkeypatch.setenv('RT_URL', 'https://rt.example.com/REST/1.0')
    monkeypatch.setenv('RT_USER', 'alice')
    monkeypatch.setenv('RT_PASSWORD', 'secret')
    monkeypatch.setattr(rtlite.rest1.Rt, 'get_ticket', lambda self, ticket_id: Ticket(owner=self.default_login))

    assert cli.main(['7']) == 0
    assert 'owner: alice\n' in capsys.readouterr().out


def test_main_reports_errors(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    def get_ticket(self: rtlite.rest1.Rt, ticket_id: int) -> Ticket:
        raise NotFoundError(f'Ticket {ticket_id} does not exist.')

    monkeypatch.setattr(rtlite.rest1.Rt, 'get_ticket', get_ticket)

    assert cli.main(ARGS + ['99']) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'error: Ticket 99 does not exist.' in captured.err


def test_main_verbose_error_hides_password(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture,
                                           caplog: pytest.LogCaptureFixture):
    def get(self: requests.Session, url: str, **kwargs: object) -> requests.Response:
        raise requests.exceptions.ConnectionError(f'Max retries exceeded with url: {url}?user=root&pass=S3cretPw')

    monkeypatch.setattr(requests.Session, 'get', get)
    monkeypatch.setattr(logging.getLogger('urllib3'), 'level', logging.NOTSET)
    args = ['--url', 'http://localhost:8080/REST/1.0/', '--user', 'root', '--password', 'S3cretPw']

    with caplog.at_level(logging.DEBUG):
        assert cli.main(args + ['-v', '3']) == 1

    err = capsys.readouterr().err
    assert 'error: Error performing HTTP request to http://localhost:8080/REST/1.0/ticket/3/show' in err
    assert 'S3cretPw' not in err
    assert 'S3cretPw' not in caplog.text
    assert logging.getLogger('urllib3').level == logging.INFO


def test_main_requires_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ('RT_URL', 'RT_USER', 'RT_PASSWORD'):
        monkeypatch.delenv(name, raising=False)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(['1'])
    assert exc_info.value.code == 2
