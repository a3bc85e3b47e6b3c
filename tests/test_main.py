"""Tests for the command-line argument handling."""

import pytest

import main


def test_verbose_flag_before_command():
    """-v ahead of the command still finds the command."""
    verbose, args = main._split_argv(["-v", "game", "spinner"])
    assert verbose is True
    assert args == ["game", "spinner"]
    assert args[0] in main.COMMANDS


def test_verbose_flag_after_command():
    """--verbose after the style is stripped the same way."""
    verbose, args = main._split_argv(["play", "casual", "--verbose"])
    assert verbose is True
    assert args == ["play", "casual"]


def test_no_flags():
    """Without flags the arguments pass through untouched."""
    verbose, args = main._split_argv(["analyze"])
    assert verbose is False
    assert args == ["analyze"]


def test_command_args_skip_flags(monkeypatch):
    """Style arguments are read past a leading -v."""
    monkeypatch.setattr(main.sys, "argv", ["main.py", "-v", "game", "beginner"])
    assert main._args() == ["beginner"]
