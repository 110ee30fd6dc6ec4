"""
Tests for CLI mode: argument parsing and end-to-end operations against
a fake API.
"""

from unittest.mock import patch

import pytest

from categorydesk import cli
from categorydesk.client import build_parser
from categorydesk.exceptions import CategoryDeskAuthError
from categorydesk.managers import ConfigManager

from conftest import FakeCategoryAPI, THREE_CATEGORIES


@pytest.fixture
def config(tmp_path, monkeypatch, restore_root_logging):
    monkeypatch.chdir(tmp_path)
    manager = ConfigManager(tmp_path)
    manager.load_config()
    return manager


@pytest.fixture
def fake_api():
    api = FakeCategoryAPI(THREE_CATEGORIES)
    with patch.object(cli.CategoryDeskAPI, "from_config", return_value=api):
        yield api


def run(argv, config, password="secret"):
    return cli.run_cli_operation(build_parser().parse_args(argv), password=password, config_manager=config)


def test_list_logs_in_and_loads(config, fake_api, tmp_path):
    assert run(["list", "--email", "jane@example.com"], config) == cli.EXIT_SUCCESS

    assert fake_api.calls_to("login") == [("login", "jane@example.com", "secret")]
    assert fake_api.calls_to("list_categories")
    assert fake_api.closed
    assert list((tmp_path / "logs").glob("categorydesk-*.log"))


def test_add_creates_category(config, fake_api):
    code = run(["add", "--email", "jane@example.com", "--name", "Toys", "--description", "Kids"], config)

    assert code == cli.EXIT_SUCCESS
    assert fake_api.calls_to("create_category") == [("create_category", "Toys", "Kids")]


def test_update_keeps_unspecified_fields(config, fake_api):
    code = run(["update", "--email", "jane@example.com", "--id", "2", "--name", "Records"], config)

    assert code == cli.EXIT_SUCCESS
    assert fake_api.calls_to("update_category") == [("update_category", 2, "Records", "Vinyl and CDs")]


def test_update_unknown_id_fails(config, fake_api):
    assert run(["update", "--email", "jane@example.com", "--id", "99"], config) == cli.EXIT_FAILURE
    assert fake_api.calls_to("update_category") == []


def test_delete_requires_id(config, fake_api):
    assert run(["delete", "--email", "jane@example.com"], config) == cli.EXIT_CONFIG_ERROR
    assert fake_api.calls == []


def test_delete_by_id(config, fake_api):
    assert run(["delete", "--email", "jane@example.com", "--id", "1"], config) == cli.EXIT_SUCCESS
    assert fake_api.calls_to("delete_category") == [("delete_category", 1)]


def test_rejected_login_returns_auth_error(config, fake_api):
    fake_api.failures["login"] = CategoryDeskAuthError("Invalid credentials", 401, "Invalid credentials")

    assert run(["list", "--email", "jane@example.com"], config) == cli.EXIT_AUTH_ERROR
    assert fake_api.calls_to("list_categories") == []


def test_invalid_email_returns_validation_error(config, fake_api):
    assert run(["list", "--email", "jane"], config) == cli.EXIT_VALIDATION_ERROR
    assert fake_api.calls == []


def test_register_with_weak_password_never_calls_server(config, fake_api):
    argv = ["register", "--email", "jane@example.com", "--full-name", "Jane Doe",
            "--date-of-birth", "1990-04-12", "--street", "1 Main St", "--city", "Springfield",
            "--state", "IL", "--zip-code", "62701"]

    assert run(argv, config, password="abc") == cli.EXIT_VALIDATION_ERROR
    assert fake_api.calls == []

    assert run(argv, config, password="Str0ng!Pass") == cli.EXIT_SUCCESS
    assert fake_api.calls_to("register")
    assert fake_api.calls_to("login") == []


def test_parser_defaults_to_gui_mode():
    assert build_parser().parse_args([]).operation is None
