"""Smoke tests for the administration CLI against an in-memory database."""

import uuid

from typer.testing import CliRunner

from src.cli import app

runner = CliRunner()


def test_products_list_empty():
    result = runner.invoke(app, ["products", "list"])

    assert result.exit_code == 0
    assert "No products found" in result.output


def test_set_stock_unknown_product():
    result = runner.invoke(app, ["products", "set-stock", str(uuid.uuid4()), "3"])

    assert result.exit_code == 1
    assert "Product not found" in result.output


def test_admin_create():
    result = runner.invoke(
        app, ["admin", "create", "root@example.com", "--password", "s3cret"]
    )

    assert result.exit_code == 0
    assert "root@example.com" in result.output


def test_db_init():
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0
    assert "Database initialized" in result.output


def test_db_reset_aborts_without_confirmation():
    result = runner.invoke(app, ["db", "reset"], input="n\n")

    assert result.exit_code == 1
    assert "Aborted" in result.output
