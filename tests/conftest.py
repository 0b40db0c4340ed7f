"""Pytest configuration and shared fixtures for goatfetch tests."""

import os
import platform
import socket
import subprocess

import pytest

AMBIENT_VARS = ("USER", "LOGNAME", "USERNAME", "SHELL", "ComSpec", "TERM", "WSL_DISTRO_NAME")


@pytest.fixture
def fake_commands(monkeypatch):
    """
    Replace subprocess.run with a lookup table.

    Tests register ``outputs[("uname", "-rs")] = "Linux 6.1.0\\n"``; any
    command not in the table behaves as if the binary is missing.
    """
    outputs = {}

    def mock_run(command, **kwargs):
        key = tuple(command)
        if key not in outputs:
            raise FileNotFoundError(f"{command[0]} not found")
        return subprocess.CompletedProcess(command, 0, stdout=outputs[key], stderr="")

    monkeypatch.setattr(subprocess, "run", mock_run)
    return outputs


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable a collector reads."""
    for var in AMBIENT_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def no_sources(clean_env, fake_commands, monkeypatch):
    """Make every environment, runtime and subprocess source fail."""

    def broken_gethostname():
        raise OSError("no hostname")

    monkeypatch.setattr(socket, "gethostname", broken_gethostname)
    monkeypatch.setattr(platform, "machine", lambda: "")
    monkeypatch.setattr(platform, "system", lambda: "")
    monkeypatch.setattr(os, "cpu_count", lambda: None)
    return fake_commands


@pytest.fixture
def isolate_paths(tmp_path):
    """
    Return a function pointing a collector's file sources into tmp_path.

    Nothing is created, so every path is missing until a test writes it.
    """

    def apply(collector):
        collector.OS_RELEASE_FILES = (str(tmp_path / "os-release"),)
        collector.ANDROID_MARKER = str(tmp_path / "adb")
        collector.PROC_DIR = str(tmp_path / "proc")
        collector.UPTIME_PATH = str(tmp_path / "uptime")
        collector.MEMINFO_PATH = str(tmp_path / "meminfo")
        return collector

    return apply
