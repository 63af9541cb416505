"""Tests for the command line interface"""

import json

import pytest
from click.testing import CliRunner

from app.cli import session_cli
from app.models.notification import Notification
from app.services.api_client import APIError


@pytest.fixture
def session_file(tmp_path):
    return str(tmp_path / "session.json")

@pytest.fixture
def invoke(session_file):
    cli_runner = CliRunner()

    def _invoke(*args):
        return cli_runner.invoke(
            session_cli,
            ["--api-url", "http://api.test", "--session-file", session_file, *args]
        )
    return _invoke


def test_login_writes_session_file(invoke, session_file, mocker):
    mocker.patch("app.cli.APIClient.post", return_value={"token": "abc123", "userId": "42", "username": "alice"})

    result = invoke("login", "--email", "alice@example.com", "--password", "secret")

    assert result.exit_code == 0
    assert "Logged in as alice" in result.output
    with open(session_file) as f:
        assert json.load(f) == {"token": "abc123", "userId": "42", "username": "alice"}

def test_login_failure_exits_non_zero(invoke, mocker):
    mocker.patch("app.cli.APIClient.post", side_effect=APIError("HTTP error", status_code=401))

    result = invoke("login", "--email", "alice@example.com", "--password", "wrong")

    assert result.exit_code == 1
    assert "Login Failed" in result.output

def test_status_and_logout(invoke, mocker):
    mocker.patch("app.cli.APIClient.post", return_value={"token": "abc123", "userId": "42"})
    invoke("login", "--email", "a@example.com", "--password", "pw")

    status = invoke("status")
    assert status.exit_code == 0
    assert "user id 42" in status.output

    assert invoke("logout").exit_code == 0
    assert invoke("status").exit_code == 1

def test_register_does_not_log_in(invoke, mocker):
    mocker.patch("app.cli.APIClient.post", return_value={"message": "created"})

    result = invoke("register", "--username", "carol", "--email", "c@example.com",
                    "--password", "pw")

    assert result.exit_code == 0
    assert invoke("status").exit_code == 1


def test_init_db_command(runner, app):
    result = runner.invoke(args=["init-db"])

    assert result.exit_code == 0
    assert "Database initialized" in result.output

def test_notify_command_dedups(runner, db):
    args = ["notify", "--user-id", "1", "--actor-id", "2", "--post-id", "5", "--type", "like"]

    first = runner.invoke(args=args)
    second = runner.invoke(args=args)

    assert "Created like notification for user 1" in first.output
    assert "No notification created" in second.output
    assert Notification.query.count() == 1

def test_notify_command_rejects_unknown_type(runner, db):
    result = runner.invoke(args=["notify", "--user-id", "1", "--actor-id", "2",
                                 "--post-id", "5", "--type", "follow"])

    assert result.exit_code != 0

def test_notify_command_ignores_other_writers(runner, db, repository, mocker):
    """A row written for another tuple meanwhile is not reported as created"""
    mocker.patch(
        "app.services.notification_service.NotificationService.create_notification",
        side_effect=lambda *args: repository.insert(1, 3, 9, "comment")
    )

    result = runner.invoke(args=["notify", "--user-id", "1", "--actor-id", "2",
                                 "--post-id", "5", "--type", "like"])

    assert "No notification created" in result.output
    assert Notification.query.count() == 1
