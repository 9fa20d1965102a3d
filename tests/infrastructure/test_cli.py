"""Tests for the click CLI, wired to an in-memory repository."""

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli import product_commands
from catalog.infrastructure.cli.main import cli
from tests.fakes import FakeProductRepository, make_product


@pytest.fixture
def repo(monkeypatch):
    fake = FakeProductRepository([make_product(id=1, name="Widget", price=9.99, stock=5)])
    monkeypatch.setattr(product_commands, "_repository", lambda: fake)
    return fake


@pytest.fixture
def runner():
    return CliRunner()


def test_list(runner, repo):
    result = runner.invoke(cli, ["product", "list"])
    assert result.exit_code == 0
    assert "Widget" in result.output
    assert "$9.99" in result.output


def test_list_empty(runner, monkeypatch):
    monkeypatch.setattr(product_commands, "_repository", FakeProductRepository)
    result = runner.invoke(cli, ["product", "list"])
    assert "No products found." in result.output


def test_add(runner, repo):
    result = runner.invoke(cli, ["product", "add", "--name", "Gadget", "--price", "25"])
    assert result.exit_code == 0
    assert "Product #2 'Gadget' added at $25.00" in result.output


def test_add_invalid_price(runner, repo):
    result = runner.invoke(cli, ["product", "add", "--name", "Gadget", "--price=-1"])
    assert result.exit_code != 0
    assert "Price cannot be negative" in result.output


def test_show(runner, repo):
    result = runner.invoke(cli, ["product", "show", "--id", "1"])
    assert result.exit_code == 0
    assert "Stock: 5" in result.output


def test_update_only_given_fields(runner, repo):
    result = runner.invoke(cli, ["product", "update", "--id", "1", "--stock", "3"])
    assert result.exit_code == 0
    assert "Stock: 3" in result.output
    assert "Price: $9.99" in result.output


def test_update_missing(runner, repo):
    result = runner.invoke(cli, ["product", "update", "--id", "9", "--stock", "3"])
    assert result.exit_code != 0
    assert "not found" in result.output


def test_delete(runner, repo):
    result = runner.invoke(cli, ["product", "delete", "--id", "1"])
    assert result.exit_code == 0
    assert repo.list_all() == []


class _RecordingApp:

    def __init__(self):
        self.run_kwargs = None

    def run(self, **kwargs):
        self.run_kwargs = kwargs


@pytest.fixture
def served_app(monkeypatch):
    from catalog.infrastructure.http import app as http_app

    recording = _RecordingApp()
    monkeypatch.setattr(http_app, "create_app", lambda: recording)
    monkeypatch.delenv("PRODUCTS_HOST", raising=False)
    monkeypatch.delenv("PRODUCTS_PORT", raising=False)
    return recording


def test_serve_defaults(runner, served_app):
    result = runner.invoke(cli, ["serve"])
    assert result.exit_code == 0
    assert served_app.run_kwargs == {"host": "127.0.0.1", "port": 3000, "threaded": True}
    assert "Server running on http://127.0.0.1:3000" in result.output


def test_serve_reads_environment(runner, served_app, monkeypatch):
    monkeypatch.setenv("PRODUCTS_HOST", "0.0.0.0")
    monkeypatch.setenv("PRODUCTS_PORT", "8080")
    runner.invoke(cli, ["serve"])
    assert served_app.run_kwargs["host"] == "0.0.0.0"
    assert served_app.run_kwargs["port"] == 8080


def test_serve_explicit_port_zero(runner, served_app, monkeypatch):
    monkeypatch.setenv("PRODUCTS_PORT", "8080")
    result = runner.invoke(cli, ["serve", "--port", "0", "--host", "localhost"])
    assert result.exit_code == 0
    assert served_app.run_kwargs["port"] == 0
    assert served_app.run_kwargs["host"] == "localhost"
