"""Default client, server and common configuration."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass, field

from .color import Attribute, BgColor, FgColor

HEALTH_USER = "DTAIL-HEALTH"
"""User name used for the health check."""
SCHEDULE_USER = "DTAIL-SCHEDULE"
"""User name used for non-interactive scheduled mapreduce queries."""
CONTINUOUS_USER = "DTAIL-CONTINUOUS"
"""User name used for non-interactive continuous mapreduce queries."""
INTERRUPT_TIMEOUT_S = 3
"""Seconds logging stays paused after Ctrl+C."""
DEFAULT_CONNECTIONS_PER_CPU = 10
"""How many connections are established concurrently per CPU."""
DEFAULT_SSH_PORT = 2222
"""Default server port."""
DEFAULT_LOG_LEVEL = "info"
DEFAULT_CLIENT_LOGGER = "fout"
DEFAULT_SERVER_LOGGER = "file"
DEFAULT_HEALTH_CHECK_LOGGER = "none"

HOSTNAME_OVERRIDE_ENV = "DTAIL_HOSTNAME_OVERRIDE"


@dataclass
class RemoteTermColors:
    """Colors for lines received from a remote server."""

    delimiter_attr: Attribute = Attribute.DIM
    delimiter_bg: BgColor = BgColor.BLUE
    delimiter_fg: FgColor = FgColor.CYAN
    remote_attr: Attribute = Attribute.DIM
    remote_bg: BgColor = BgColor.BLUE
    remote_fg: FgColor = FgColor.WHITE
    count_attr: Attribute = Attribute.DIM
    count_bg: BgColor = BgColor.BLUE
    count_fg: FgColor = FgColor.WHITE
    hostname_attr: Attribute = Attribute.BOLD
    hostname_bg: BgColor = BgColor.BLUE
    hostname_fg: FgColor = FgColor.WHITE
    id_attr: Attribute = Attribute.DIM
    id_bg: BgColor = BgColor.BLUE
    id_fg: FgColor = FgColor.WHITE
    stats_ok_attr: Attribute = Attribute.NONE
    stats_ok_bg: BgColor = BgColor.GREEN
    stats_ok_fg: FgColor = FgColor.BLACK
    stats_warn_attr: Attribute = Attribute.NONE
    stats_warn_bg: BgColor = BgColor.RED
    stats_warn_fg: FgColor = FgColor.WHITE
    text_attr: Attribute = Attribute.NONE
    text_bg: BgColor = BgColor.BLACK
    text_fg: FgColor = FgColor.WHITE


@dataclass
class ClientTermColors:
    """Colors for messages the client reports about itself."""

    delimiter_attr: Attribute = Attribute.DIM
    delimiter_bg: BgColor = BgColor.YELLOW
    delimiter_fg: FgColor = FgColor.BLACK
    client_attr: Attribute = Attribute.DIM
    client_bg: BgColor = BgColor.YELLOW
    client_fg: FgColor = FgColor.BLACK
    hostname_attr: Attribute = Attribute.DIM
    hostname_bg: BgColor = BgColor.YELLOW
    hostname_fg: FgColor = FgColor.BLACK
    text_attr: Attribute = Attribute.NONE
    text_bg: BgColor = BgColor.BLACK
    text_fg: FgColor = FgColor.WHITE


@dataclass
class ServerTermColors:
    """Colors for server messages."""

    delimiter_attr: Attribute = Attribute.DIM
    delimiter_bg: BgColor = BgColor.CYAN
    delimiter_fg: FgColor = FgColor.BLACK
    server_attr: Attribute = Attribute.DIM
    server_bg: BgColor = BgColor.CYAN
    server_fg: FgColor = FgColor.BLACK
    hostname_attr: Attribute = Attribute.BOLD
    hostname_bg: BgColor = BgColor.CYAN
    hostname_fg: FgColor = FgColor.BLACK
    text_attr: Attribute = Attribute.NONE
    text_bg: BgColor = BgColor.BLACK
    text_fg: FgColor = FgColor.WHITE


@dataclass
class CommonTermColors:
    """Colors for severity markers."""

    severity_error_attr: Attribute = Attribute.BOLD
    severity_error_bg: BgColor = BgColor.RED
    severity_error_fg: FgColor = FgColor.WHITE
    severity_fatal_attr: Attribute = Attribute.BOLD
    severity_fatal_bg: BgColor = BgColor.MAGENTA
    severity_fatal_fg: FgColor = FgColor.WHITE
    severity_warn_attr: Attribute = Attribute.BOLD
    severity_warn_bg: BgColor = BgColor.BLACK
    severity_warn_fg: FgColor = FgColor.WHITE


@dataclass
class MaprTableTermColors:
    """Colors for mapreduce result tables."""

    data_attr: Attribute = Attribute.NONE
    data_bg: BgColor = BgColor.BLUE
    data_fg: FgColor = FgColor.WHITE
    delimiter_attr: Attribute = Attribute.DIM
    delimiter_bg: BgColor = BgColor.BLUE
    delimiter_fg: FgColor = FgColor.WHITE
    header_attr: Attribute = Attribute.BOLD
    header_bg: BgColor = BgColor.BLUE
    header_fg: FgColor = FgColor.WHITE
    header_delimiter_attr: Attribute = Attribute.DIM
    header_delimiter_bg: BgColor = BgColor.BLUE
    header_delimiter_fg: FgColor = FgColor.WHITE
    header_sort_key_attr: Attribute = Attribute.UNDERLINE
    header_group_key_attr: Attribute = Attribute.REVERSE
    raw_query_attr: Attribute = Attribute.DIM
    raw_query_bg: BgColor = BgColor.BLACK
    raw_query_fg: FgColor = FgColor.CYAN


@dataclass
class TermColors:
    """All terminal color settings."""

    remote: RemoteTermColors = field(default_factory=RemoteTermColors)
    client: ClientTermColors = field(default_factory=ClientTermColors)
    server: ServerTermColors = field(default_factory=ServerTermColors)
    common: CommonTermColors = field(default_factory=CommonTermColors)
    mapr_table: MaprTableTermColors = field(default_factory=MaprTableTermColors)


@dataclass
class ClientConfig:
    """Client configuration."""

    term_colors_enable: bool = True
    term_colors: TermColors = field(default_factory=TermColors)


@dataclass
class CommonConfig:
    """Configuration shared by server and client."""

    ssh_port: int = DEFAULT_SSH_PORT
    experimental_features_enable: bool = False
    log_dir: str = "log"
    logger: str = "stdout"
    log_level: str = DEFAULT_LOG_LEVEL
    log_rotation: str = "daily"
    cache_dir: str = "cache"


@dataclass
class Permissions:
    """Per-user lists of file path patterns a user may read."""

    default: list[str] = field(default_factory=lambda: ["^/.*"])
    users: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class _JobCommons:
    name: str = ""
    enable: bool = False
    files: str = ""
    query: str = ""
    outfile: str = ""
    discovery: str = ""
    servers: list[str] = field(default_factory=list)
    allow_from: list[str] = field(default_factory=list)


@dataclass
class Scheduled(_JobCommons):
    """A scheduled mapreduce job running within an hour range."""

    time_range: tuple[int, int] = (0, 0)


@dataclass
class Continuous(_JobCommons):
    """A continuously running mapreduce job."""

    restart_on_day_change: bool = False


@dataclass
class ServerConfig:
    """Server configuration."""

    ssh_bind_address: str = "0.0.0.0"
    max_connections: int = 10
    max_concurrent_cats: int = 2
    max_concurrent_tails: int = 50
    max_line_length: int = 1024 * 1024
    permissions: Permissions = field(default_factory=Permissions)
    mapreduce_log_format: str = "default"
    host_key_file: str = "./cache/ssh_host_key"
    host_key_bits: int = 4096
    schedule: list[Scheduled] = field(default_factory=list)
    continuous: list[Continuous] = field(default_factory=list)
    key_exchanges: list[str] = field(default_factory=list)
    ciphers: list[str] = field(default_factory=list)
    macs: list[str] = field(default_factory=list)

    def user_permissions(self, user_name: str) -> list[str]:
        """Return the permission patterns of a user; raise if there are none."""
        permissions = self.permissions.users.get(user_name, self.permissions.default)
        if not permissions:
            raise PermissionError(
                "Empty set of permission, user won't be able to open any files"
            )
        return permissions


def env(name: str) -> bool:
    """Return True when the environment variable is set to "yes"."""
    return os.environ.get(name) == "yes"


def hostname() -> str:
    """Return the host name, overridable through DTAIL_HOSTNAME_OVERRIDE."""
    override = os.environ.get(HOSTNAME_OVERRIDE_ENV, "")
    if override:
        return override
    return socket.gethostname()