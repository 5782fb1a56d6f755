"""IPv4 sockets with the option, wait and scatter-send operations the protocol needs."""

from __future__ import annotations

import errno
import select
import socket
import struct
import sys
import time
from collections.abc import Iterable
from enum import Enum, IntFlag, auto

from protonkit.address import Address

_WINDOWS = sys.platform == "win32"
_MSG_NOSIGNAL = getattr(socket, "MSG_NOSIGNAL", 0)
_MSG_TRUNC = getattr(socket, "MSG_TRUNC", 0)
_CONNECT_PENDING = {errno.EINPROGRESS, errno.EWOULDBLOCK, errno.EALREADY}


class SocketType(Enum):
    """Transport of a socket."""

    STREAM = auto()
    DATAGRAM = auto()


class SocketOption(Enum):
    """Options that can be set on, or read from, a socket."""

    NONBLOCK = auto()
    BROADCAST = auto()
    RCVBUF = auto()
    SNDBUF = auto()
    REUSEADDR = auto()
    RCVTIMEO = auto()
    SNDTIMEO = auto()
    ERROR = auto()
    NODELAY = auto()


class WaitCondition(IntFlag):
    """What to wait for on a socket, and what became ready."""

    NONE = 0
    SEND = 1
    RECEIVE = 2
    INTERRUPT = 4


_INT_OPTIONS = {
    SocketOption.BROADCAST: (socket.SOL_SOCKET, socket.SO_BROADCAST),
    SocketOption.REUSEADDR: (socket.SOL_SOCKET, socket.SO_REUSEADDR),
    SocketOption.RCVBUF: (socket.SOL_SOCKET, socket.SO_RCVBUF),
    SocketOption.SNDBUF: (socket.SOL_SOCKET, socket.SO_SNDBUF),
    SocketOption.NODELAY: (socket.IPPROTO_TCP, socket.TCP_NODELAY),
}

_TIMEOUT_OPTIONS = {
    SocketOption.RCVTIMEO: socket.SO_RCVTIMEO,
    SocketOption.SNDTIMEO: socket.SO_SNDTIMEO,
}


def _timeout_value(millis: int) -> bytes:
    """Encode a millisecond timeout the way the platform's setsockopt expects."""
    if _WINDOWS:
        return struct.pack("i", millis)
    return struct.pack("ll", millis // 1000, (millis % 1000) * 1000)


def _peer(sockaddr: object) -> Address | None:
    if isinstance(sockaddr, tuple) and sockaddr:
        return Address.from_sockaddr(sockaddr)
    return None


class NetSocket:
    """An IPv4 stream or datagram socket."""

    def __init__(self, kind: SocketType = SocketType.DATAGRAM, *, sock: socket.socket | None = None) -> None:
        if sock is None:
            sock_type = socket.SOCK_DGRAM if kind is SocketType.DATAGRAM else socket.SOCK_STREAM
            sock = socket.socket(socket.AF_INET, sock_type)
        self.kind = kind
        self._sock = sock
        self._closed = False

    def fileno(self) -> int:
        return self._sock.fileno()

    @property
    def closed(self) -> bool:
        return self._closed

    def bind(self, address: Address | None = None) -> None:
        """Bind to address, or to any interface and an ephemeral port."""
        target = address.sockaddr if address is not None else ("0.0.0.0", 0)
        self._sock.bind(target)

    def local_address(self) -> Address:
        """The address the socket is bound to."""
        return Address.from_sockaddr(self._sock.getsockname())

    def listen(self, backlog: int = -1) -> None:
        """Listen for connections; a negative backlog means the system maximum."""
        self._sock.listen(socket.SOMAXCONN if backlog < 0 else backlog)

    def set_option(self, option: SocketOption, value: int) -> None:
        """Set a socket option; raises ValueError for options that cannot be set."""
        if option is SocketOption.NONBLOCK:
            self._sock.setblocking(not value)
        elif option in _INT_OPTIONS:
            level, name = _INT_OPTIONS[option]
            self._sock.setsockopt(level, name, int(value))
        elif option in _TIMEOUT_OPTIONS:
            self._sock.setsockopt(socket.SOL_SOCKET, _TIMEOUT_OPTIONS[option], _timeout_value(int(value)))
        else:
            raise ValueError(f"option {option.name} cannot be set")

    def get_option(self, option: SocketOption) -> int:
        """Read a socket option; only ERROR can be read."""
        if option is SocketOption.ERROR:
            return self._sock.getsockopt(socket.SOL_SOCKET, socket.SO_ERROR)
        raise ValueError(f"option {option.name} cannot be read")

    def connect(self, address: Address) -> None:
        """Connect to address; a connection still in progress is not an error."""
        result = self._sock.connect_ex(address.sockaddr)
        if result == 0:
            return
        if result in _CONNECT_PENDING or (_WINDOWS and result == 10035):
            return
        raise OSError(result, f"cannot connect to {address}")

    def accept(self) -> tuple[NetSocket, Address | None]:
        """Accept a pending connection and return it with the peer's address."""
        conn, sockaddr = self._sock.accept()
        return NetSocket(SocketType.STREAM, sock=conn), _peer(sockaddr)

    def shutdown(self, how: int) -> None:
        self._sock.shutdown(how)

    def close(self) -> None:
        """Close the socket; closing twice does nothing."""
        if not self._closed:
            self._closed = True
            self._sock.close()

    def send(self, address: Address | None, buffers: Iterable[bytes]) -> int:
        """Send buffers as one message; returns bytes sent, or 0 if it would block."""
        chunks = [bytes(buffer) for buffer in buffers]
        try:
            if hasattr(self._sock, "sendmsg"):
                if address is None:
                    return self._sock.sendmsg(chunks, [], _MSG_NOSIGNAL)
                return self._sock.sendmsg(chunks, [], _MSG_NOSIGNAL, address.sockaddr)
            data = b"".join(chunks)
            if address is None:
                return self._sock.send(data)
            return self._sock.sendto(data, address.sockaddr)
        except BlockingIOError:
            return 0

    def receive(self, size: int) -> tuple[bytes, Address | None] | None:
        """Receive one message of at most size bytes with its sender.

        Returns None when nothing is available; raises OSError when the
        message did not fit in size bytes.
        """
        try:
            if hasattr(self._sock, "recvmsg"):
                data, _ancillary, flags, sockaddr = self._sock.recvmsg(size, 0, _MSG_NOSIGNAL)
                if flags & _MSG_TRUNC:
                    raise OSError(errno.EMSGSIZE, "message truncated")
            else:
                data, sockaddr = self._sock.recvfrom(size)
        except BlockingIOError:
            return None
        except ConnectionResetError:
            if _WINDOWS:
                return None
            raise
        return data, _peer(sockaddr)

    def wait(self, condition: WaitCondition, timeout: int) -> WaitCondition:
        """Wait up to timeout milliseconds; returns which of SEND and RECEIVE became ready."""
        readers = [self._sock] if condition & WaitCondition.RECEIVE else []
        writers = [self._sock] if condition & WaitCondition.SEND else []
        seconds = timeout / 1000
        if not readers and not writers:
            time.sleep(seconds)
            return WaitCondition.NONE
        try:
            readable, writable, _ = select.select(readers, writers, [], seconds)
        except InterruptedError:
            if condition & WaitCondition.INTERRUPT:
                return WaitCondition.INTERRUPT
            raise
        ready = WaitCondition.NONE
        if writable:
            ready |= WaitCondition.SEND
        if readable:
            ready |= WaitCondition.RECEIVE
        return ready

    def __enter__(self) -> NetSocket:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"fd={self._sock.fileno()}"
        return f"NetSocket({self.kind.name}, {state})"