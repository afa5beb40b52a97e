"""Command line arguments shared by the clients and the server options wire format."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field
from typing import Any

from .lcontext import LContext

_INT = re.compile(r"[+-]?\d+")


def _go_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_go_value(v) for v in value) + "]"
    if value is None:
        return "<nil>"
    return str(value)


@dataclass
class Args:
    """Common client and server arguments."""

    lcontext: LContext = field(default_factory=LContext)
    arguments: list[str] = field(default_factory=list)
    config_file: str = ""
    connections_per_cpu: int = 0
    discovery: str = ""
    log_dir: str = ""
    logger: str = ""
    log_level: str = ""
    mode: str = ""
    no_color: bool = False
    query_str: str = ""
    quiet: bool = False
    regex_invert: bool = False
    regex_str: str = ""
    ssh_auth_methods: list[Any] = field(default_factory=list)
    ssh_bind_address: str = ""
    ssh_host_key_callback: Any = None
    ssh_port: int = 0
    ssh_private_key_file_path: str = ""
    serverless: bool = False
    servers_str: str = ""
    plain: bool = False
    timeout: int = 0
    trust_all_hosts: bool = False
    user_name: str = ""
    what: str = ""

    def __str__(self) -> str:
        pairs = (
            ("Arguments", self.arguments),
            ("ConfigFile", self.config_file),
            ("ConnectionsPerCPU", self.connections_per_cpu),
            ("Discovery", self.discovery),
            ("LogDir", self.log_dir),
            ("LogLevel", self.log_level),
            ("Logger", self.logger),
            ("Mode", self.mode),
            ("NoColor", self.no_color),
            ("QueryStr", self.query_str),
            ("Quiet", self.quiet),
            ("RegexInvert", self.regex_invert),
            ("RegexStr", self.regex_str),
            ("SSHAuthMethods", self.ssh_auth_methods),
            ("SSHBindAddress", self.ssh_bind_address),
            ("SSHHostKeyCallback", self.ssh_host_key_callback),
            ("SSHPrivateKeyFilePath", self.ssh_private_key_file_path),
            ("SSHPort", self.ssh_port),
            ("Serverless", self.serverless),
            ("ServersStr", self.servers_str),
            ("Plain", self.plain),
            ("Timeout", self.timeout),
            ("TrustAllHosts", self.trust_all_hosts),
            ("UserName", self.user_name),
            ("What", self.what),
        )
        body = ",".join(f"{name}:{_go_value(value)}" for name, value in pairs)
        return f"Args({body})"

    def serialize_options(self) -> str:
        """Return the options as ``key=value`` pairs joined by ':' for the wire."""
        options: dict[str, str] = {}
        if self.quiet:
            options["quiet"] = "true"
        if self.plain:
            options["plain"] = "true"
        if self.serverless:
            options["serverless"] = "true"
        if self.lcontext.max_count != 0:
            options["max"] = str(self.lcontext.max_count)
        if self.lcontext.before_context != 0:
            options["before"] = str(self.lcontext.before_context)
        if self.lcontext.after_context != 0:
            options["after"] = str(self.lcontext.after_context)
        return ":".join(f"{key}={value}" for key, value in options.items())


def _parse_int(value: str) -> int:
    if not _INT.fullmatch(value):
        raise ValueError(f"invalid integer option value '{value}'")
    return int(value)


def deserialize_options(opts) -> tuple[dict[str, str], LContext]:
    """Parse ``key=value`` options into a dict and the line context settings.

    Values prefixed with ``base64%`` are decoded. Raises ValueError on
    malformed input.
    """
    options: dict[str, str] = {}
    ltx = LContext()
    for opt in opts:
        key, sep, val = opt.partition("=")
        if not sep:
            raise ValueError(f"Unable to parse options: [{opt}]")
        if val.startswith("base64%"):
            encoded = val.split("%", 1)[1]
            try:
                val = base64.b64decode(encoded, validate=True).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as err:
                raise ValueError(f"Unable to decode option {key}: {err}") from err
        if key == "before":
            ltx.before_context = _parse_int(val)
        elif key == "after":
            ltx.after_context = _parse_int(val)
        elif key == "max":
            ltx.max_count = _parse_int(val)
        else:
            options[key] = val
    return options, ltx