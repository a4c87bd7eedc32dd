from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FakeConnection:
    """In-memory stand-in for an accepted client socket."""

    request: bytes = b""
    fail_recv: bool = False
    fail_send_after: int | None = None
    sent: list[bytes] = field(default_factory=list)
    recv_calls: int = 0
    closed: bool = False

    def recv(self, bufsize: int, /) -> bytes:
        self.recv_calls += 1
        if self.fail_recv:
            raise ConnectionResetError("reset by peer")
        data, self.request = self.request[:bufsize], self.request[bufsize:]
        return data

    def sendall(self, data: bytes, /) -> None:
        if self.fail_send_after is not None and len(self.sent) >= self.fail_send_after:
            raise BrokenPipeError("peer closed")
        self.sent.append(bytes(data))

    def close(self) -> None:
        self.closed = True

    @property
    def output(self) -> bytes:
        return b"".join(self.sent)


@dataclass(frozen=True)
class ParsedResponse:
    status: int
    reason: str
    headers: dict[str, str]
    body: bytes


def parse_response(data: bytes) -> ParsedResponse:
    head, sep, body = data.partition(b"\r\n\r\n")
    assert sep, "response has no header terminator"
    lines = head.decode("latin-1").split("\r\n")
    version, status, reason = lines[0].split(" ", 2)
    assert version == "HTTP/1.1"
    headers = dict(line.split(": ", 1) for line in lines[1:])
    return ParsedResponse(status=int(status), reason=reason, headers=headers, body=body)
