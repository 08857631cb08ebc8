"""NETCONF over SSH: the ``netconf`` subsystem on an authenticated
paramiko connection.
"""

from __future__ import annotations

import logging
from typing import Optional

import paramiko

from .. import config
from .base import BasicTransport, SubsystemError, TransportConnectionError


logger = logging.getLogger(__name__)


class SSHTransport(BasicTransport):
    """Frame messages over a paramiko channel running the netconf subsystem.

    If the owning *client* is provided it is closed along with the
    channel; the transport then owns the whole SSH connection.
    """

    def __init__(self, channel: paramiko.Channel, client: Optional[paramiko.SSHClient] = None, chunked: bool = False):
        BasicTransport.__init__(self, chunked)
        self.channel = channel
        self.client = client

    def _read(self, size: int) -> bytes:
        return self.channel.recv(size)

    def _write(self, data: bytes) -> None:
        self.channel.sendall(data)

    def close(self) -> None:
        self.channel.close()
        if self.client is not None:
            self.client.close()


def connect(host: str, port: Optional[int] = None, username: Optional[str] = None,
            password: Optional[str] = None, key_filename: Optional[str] = None,
            timeout: Optional[float] = None) -> paramiko.SSHClient:
    """Establish an authenticated SSH connection.

    System host keys are loaded; an unknown host key is accepted, and
    paramiko logs a warning about it. Key-based authentication via the
    agent or default key files is attempted only when no *password* is
    given.
    """

    if port is None:
        port = config.default_port()

    client = paramiko.SSHClient()
    client.load_system_host_keys()
    client.set_missing_host_key_policy(paramiko.WarningPolicy())

    logger.debug("connecting to %s:%d as %s", host, port, username)

    try:
        client.connect(
            host,
            port=port,
            username=username,
            password=password,
            key_filename=key_filename,
            timeout=timeout,
            allow_agent=password is None,
            look_for_keys=password is None,
        )
    except (paramiko.SSHException, OSError) as e:
        client.close()
        raise TransportConnectionError(f"{host}:{port}: {e}") from e

    return client


def open_subsystem(client: paramiko.SSHClient, name: str = config.subsystem) -> paramiko.Channel:
    """Open a session channel on *client* and start subsystem *name*."""

    ssh_transport = client.get_transport()
    if ssh_transport is None or not ssh_transport.is_active():
        raise TransportConnectionError("SSH connection is not active")

    try:
        channel = ssh_transport.open_session()
    except paramiko.SSHException as e:
        raise SubsystemError(f"cannot open session channel: {e}") from e

    try:
        channel.invoke_subsystem(name)
    except paramiko.SSHException as e:
        channel.close()
        raise SubsystemError(f"subsystem {name!r} refused: {e}") from e

    logger.debug("subsystem %r started", name)
    return channel
