"""Unit tests for the CLI log level parser."""

import logging
import types

import click
import pytest

from voxels.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

CTX = types.SimpleNamespace()  # unused by the callback


def test_empty_uses_defaults():
    assert parse_log_level(CTX, None, ()) == DEFAULT_LIB_LEVELS
    assert DEFAULT_LIB_LEVELS["dbus_fast"] == logging.WARNING


def test_later_entries_win():
    out = parse_log_level(CTX, None, ("dbus_fast=INFO", "voxels=ERROR", "dbus_fast=DEBUG"))
    assert out["dbus_fast"] == logging.DEBUG
    assert out["voxels"] == logging.ERROR


def test_envvar_string_with_commas_and_spaces():
    out = parse_log_level(CTX, None, "dbus_fast=INFO,  voxels=WARNING asyncio=ERROR")
    assert out == {
        "dbus_fast": logging.INFO,
        "voxels": logging.WARNING,
        "asyncio": logging.ERROR,
    }


def test_case_insensitive_levels():
    out = parse_log_level(CTX, None, ("dbus_fast=info", "voxels=WaRnInG"))
    assert out["dbus_fast"] == logging.INFO
    assert out["voxels"] == logging.WARNING


@pytest.mark.parametrize("item", ["not-a-pair", "=INFO", "dbus_fast=LOUD", "x=Formatter"])
def test_invalid_items_raise(item):
    with pytest.raises(click.BadParameter):
        parse_log_level(CTX, None, (item,))
