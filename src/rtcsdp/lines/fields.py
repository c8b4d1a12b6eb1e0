"""
Non-attribute SDP fields, see https://datatracker.ietf.org/doc/html/rfc4566#section-5.
"""

from typing import List, Optional

import attr

from ..grammar import ANY, FIELD, REST, TOKEN, line_regex, parse_int
from .base import Line


@attr.s
class VersionLine(Line):
    """
    Ex: v=0
    """

    line_type = "v"
    regex = line_regex("v=", f"({FIELD})")

    version = attr.ib(type=int, default=0)

    @classmethod
    def from_match(cls, m, raw):
        return cls(version=parse_int(m.group(1), raw))

    def render(self) -> str:
        return "v=%d" % self.version


@attr.s
class OriginLine(Line):
    """
    Ex: o=- 863426017819471768 2 IN IP4 127.0.0.1
    """

    line_type = "o"
    regex = line_regex(
        "o=", f"({FIELD}) ({FIELD}) ({FIELD}) ({FIELD}) ({FIELD}) ({FIELD})"
    )

    username = attr.ib(type=str)
    session_id = attr.ib(type=int)
    session_version = attr.ib(type=int)
    net_type = attr.ib(type=str)
    addr_type = attr.ib(type=str)
    address = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(
            username=m.group(1),
            session_id=parse_int(m.group(2), raw),
            session_version=parse_int(m.group(3), raw),
            net_type=m.group(4),
            addr_type=m.group(5),
            address=m.group(6),
        )

    def render(self) -> str:
        return "o=%s %d %d %s %s %s" % (
            self.username,
            self.session_id,
            self.session_version,
            self.net_type,
            self.addr_type,
            self.address,
        )


@attr.s
class SessionNameLine(Line):
    """
    Ex: s=-
    """

    line_type = "s"
    regex = line_regex("s=", f"({ANY})")

    name = attr.ib(type=str, default="-")

    @classmethod
    def from_match(cls, m, raw):
        return cls(name=m.group(1))

    def render(self) -> str:
        return f"s={self.name}"


@attr.s
class SessionInformationLine(Line):
    line_type = "i"
    regex = line_regex("i=", f"({ANY})")

    info = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(info=m.group(1))

    def render(self) -> str:
        return f"i={self.info}"


@attr.s
class ConnectionLine(Line):
    """
    Ex: c=IN IP4 192.168.99.58
    """

    line_type = "c"
    regex = line_regex("c=", f"({FIELD}) ({FIELD}) ({FIELD})")

    net_type = attr.ib(type=str)
    addr_type = attr.ib(type=str)
    address = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(net_type=m.group(1), addr_type=m.group(2), address=m.group(3))

    def render(self) -> str:
        return f"c={self.net_type} {self.addr_type} {self.address}"


@attr.s
class BandwidthLine(Line):
    """
    Ex: b=AS:30
    """

    line_type = "b"
    regex = line_regex("b=", f"({TOKEN}):({FIELD})")

    bandwidth_type = attr.ib(type=str)
    bandwidth = attr.ib(type=int)

    @classmethod
    def from_match(cls, m, raw):
        return cls(bandwidth_type=m.group(1), bandwidth=parse_int(m.group(2), raw))

    def render(self) -> str:
        return "b=%s:%d" % (self.bandwidth_type, self.bandwidth)


@attr.s
class TimingLine(Line):
    """
    Timing as defined by https://datatracker.ietf.org/doc/html/rfc4566#section-5.9.

    Ex: t=0 0
    """

    line_type = "t"
    regex = line_regex("t=", f"({FIELD}) ({FIELD})")

    start_time = attr.ib(type=int, default=0)
    stop_time = attr.ib(type=int, default=0)

    @classmethod
    def from_match(cls, m, raw):
        return cls(
            start_time=parse_int(m.group(1), raw), stop_time=parse_int(m.group(2), raw)
        )

    def render(self) -> str:
        return "t=%d %d" % (self.start_time, self.stop_time)


@attr.s
class MediaLine(Line):
    """
    Ex: m=video 9 UDP/TLS/RTP/SAVPF 96 97

    The port may carry a count of ports, e.g. m=audio 49170/2 RTP/AVP 0
    """

    line_type = "m"
    regex = line_regex(
        "m=", f"({FIELD}) ([^ /]+)(?:/({FIELD}))? ({FIELD})(?: ({REST}))?"
    )

    type = attr.ib(type=str)
    port = attr.ib(type=int)
    protocol = attr.ib(type=str)
    formats = attr.ib(type=List[str], factory=list)
    port_count = attr.ib(type=Optional[int], default=None)

    @classmethod
    def from_match(cls, m, raw):
        return cls(
            type=m.group(1),
            port=parse_int(m.group(2), raw),
            port_count=(
                parse_int(m.group(3), raw) if m.group(3) is not None else None
            ),
            protocol=m.group(4),
            formats=(m.group(5) or "").split(),
        )

    def render(self) -> str:
        port = "%d" % self.port
        if self.port_count is not None:
            port += "/%d" % self.port_count
        return " ".join(
            ["m=%s %s %s" % (self.type, port, self.protocol)] + self.formats
        )
