import socket

import pytest

from dtail.color import Attribute, BgColor, FgColor
from dtail.config import (
    DEFAULT_SSH_PORT,
    ClientConfig,
    CommonConfig,
    Continuous,
    Permissions,
    Scheduled,
    ServerConfig,
    env,
    hostname,
)


def test_common_defaults():
    common = CommonConfig()
    assert common.ssh_port == DEFAULT_SSH_PORT == 2222
    assert common.log_level == "info"
    assert common.logger == "stdout"
    assert common.log_rotation == "daily"
    assert common.cache_dir == "cache"


def test_server_defaults():
    server = ServerConfig()
    assert server.host_key_bits == 4096
    assert server.host_key_file == "./cache/ssh_host_key"
    assert server.max_line_length == 1024 * 1024
    assert server.ssh_bind_address == "0.0.0.0"
    assert server.permissions.default == ["^/.*"]


def test_client_default_colors():
    client = ClientConfig()
    assert client.term_colors_enable is True
    assert client.term_colors.remote.hostname_attr is Attribute.BOLD
    assert client.term_colors.common.severity_fatal_bg is BgColor.MAGENTA
    assert client.term_colors.mapr_table.raw_query_fg is FgColor.CYAN


def test_mutable_defaults_are_independent():
    a = ServerConfig()
    b = ServerConfig()
    a.permissions.default.append("^/tmp")
    assert b.permissions.default == ["^/.*"]
    c1, c2 = ClientConfig(), ClientConfig()
    c1.term_colors.remote.text_fg = FgColor.RED
    assert c2.term_colors.remote.text_fg is FgColor.WHITE


def test_user_permissions_default_and_override():
    server = ServerConfig(
        permissions=Permissions(users={"alice": ["^/var/log/.*"]})
    )
    assert server.user_permissions("bob") == ["^/.*"]
    assert server.user_permissions("alice") == ["^/var/log/.*"]


def test_user_permissions_empty_raises():
    server = ServerConfig(permissions=Permissions(default=[], users={"x": []}))
    with pytest.raises(PermissionError):
        server.user_permissions("nobody")
    with pytest.raises(PermissionError):
        server.user_permissions("x")


def test_jobs_carry_common_fields():
    job = Scheduled(name="job", files="/a.log", time_range=(1, 5))
    assert (job.name, job.files, job.time_range) == ("job", "/a.log", (1, 5))
    cont = Continuous(name="c", restart_on_day_change=True)
    assert cont.restart_on_day_change is True
    assert cont.servers == []


def test_env(monkeypatch):
    monkeypatch.setenv("DTAIL_TEST_FLAG", "yes")
    assert env("DTAIL_TEST_FLAG") is True
    monkeypatch.setenv("DTAIL_TEST_FLAG", "no")
    assert env("DTAIL_TEST_FLAG") is False
    monkeypatch.delenv("DTAIL_TEST_FLAG")
    assert env("DTAIL_TEST_FLAG") is False


def test_hostname_override(monkeypatch):
    monkeypatch.setenv("DTAIL_HOSTNAME_OVERRIDE", "integrationtest")
    assert hostname() == "integrationtest"


def test_hostname_without_override(monkeypatch):
    monkeypatch.delenv("DTAIL_HOSTNAME_OVERRIDE", raising=False)
    assert hostname() == socket.gethostname()