"""
Attribute lines (``a=``) which are not addressed to a payload type.
"""

import enum
from typing import List, Optional

import attr

from ..grammar import ANY, FIELD, REST, TOKEN, line_regex, parse_int
from .base import Line


class MediaDirection(enum.Enum):
    """
    The direction attribute of a media description.

    See https://datatracker.ietf.org/doc/html/rfc4566#section-6
    """

    SENDRECV = "sendrecv"
    SENDONLY = "sendonly"
    RECVONLY = "recvonly"
    INACTIVE = "inactive"


DIRECTIONS = [d.value for d in MediaDirection]


@attr.s
class DirectionLine(Line):
    """
    Ex: a=sendrecv
    """

    line_type = "a"
    regex = line_regex("a=", "(" + "|".join(DIRECTIONS) + ")")

    direction = attr.ib(type=MediaDirection)

    @classmethod
    def from_match(cls, m, raw):
        return cls(direction=MediaDirection(m.group(1)))

    def render(self) -> str:
        return "a=" + self.direction.value


@attr.s
class MidLine(Line):
    line_type = "a"
    regex = line_regex("a=mid:", f"({REST})")

    mid = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(mid=m.group(1))

    def render(self) -> str:
        return "a=mid:" + self.mid


@attr.s
class MsidLine(Line):
    line_type = "a"
    regex = line_regex("a=msid:", f"({REST})")

    msid = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(msid=m.group(1))

    def render(self) -> str:
        return "a=msid:" + self.msid


@attr.s
class MsidSemanticLine(Line):
    """
    Ex: a=msid-semantic: WMS stream-id
    """

    line_type = "a"
    regex = line_regex("a=msid-semantic:", f"({ANY})")

    value = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(value=m.group(1))

    def render(self) -> str:
        return "a=msid-semantic:" + self.value


@attr.s
class GroupLine(Line):
    """
    Ex: a=group:BUNDLE 0 1
    """

    line_type = "a"
    regex = line_regex("a=group:", f"({TOKEN})((?: {FIELD})*)")

    semantics = attr.ib(type=str)
    identifiers = attr.ib(type=List[str], factory=list)

    @classmethod
    def from_match(cls, m, raw):
        return cls(semantics=m.group(1), identifiers=m.group(2).split())

    def render(self) -> str:
        return "a=group:" + " ".join([self.semantics] + self.identifiers)


@attr.s
class ExtMapLine(Line):
    """
    Ex: a=extmap:1/sendonly urn:ietf:params:rtp-hdrext:ssrc-audio-level
    """

    line_type = "a"
    regex = line_regex(
        "a=extmap:", f"([^ /]+)(?:/({TOKEN}))? ({FIELD})(?: ({REST}))?"
    )

    id = attr.ib(type=int)
    uri = attr.ib(type=str)
    direction = attr.ib(type=Optional[str], default=None)
    extension_attributes = attr.ib(type=Optional[str], default=None)

    @classmethod
    def from_match(cls, m, raw):
        return cls(
            id=parse_int(m.group(1), raw),
            direction=m.group(2),
            uri=m.group(3),
            extension_attributes=m.group(4),
        )

    def render(self) -> str:
        line = "a=extmap:%d" % self.id
        if self.direction is not None:
            line += "/" + self.direction
        line += " " + self.uri
        if self.extension_attributes is not None:
            line += " " + self.extension_attributes
        return line


@attr.s
class IceUfragLine(Line):
    line_type = "a"
    regex = line_regex("a=ice-ufrag:", f"({FIELD})")

    username_fragment = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(username_fragment=m.group(1))

    def render(self) -> str:
        return "a=ice-ufrag:" + self.username_fragment


@attr.s
class IcePwdLine(Line):
    line_type = "a"
    regex = line_regex("a=ice-pwd:", f"({FIELD})")

    password = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(password=m.group(1))

    def render(self) -> str:
        return "a=ice-pwd:" + self.password


@attr.s
class IceOptionsLine(Line):
    line_type = "a"
    regex = line_regex("a=ice-options:", f"({REST})")

    options = attr.ib(type=List[str], factory=list)

    @classmethod
    def from_match(cls, m, raw):
        return cls(options=m.group(1).split())

    def render(self) -> str:
        return "a=ice-options:" + " ".join(self.options)


@attr.s
class FingerprintLine(Line):
    """
    Ex: a=fingerprint:sha-256 6B:8B:5D:EA:...
    """

    line_type = "a"
    regex = line_regex("a=fingerprint:", f"({FIELD}) ({FIELD})")

    algorithm = attr.ib(type=str)
    value = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(algorithm=m.group(1), value=m.group(2))

    def render(self) -> str:
        return f"a=fingerprint:{self.algorithm} {self.value}"


@attr.s
class SetupLine(Line):
    """
    Ex: a=setup:actpass
    """

    line_type = "a"
    regex = line_regex("a=setup:", f"({TOKEN})")

    role = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(role=m.group(1))

    def render(self) -> str:
        return "a=setup:" + self.role


@attr.s
class RtcpMuxLine(Line):
    line_type = "a"
    regex = line_regex("a=", "rtcp-mux")

    @classmethod
    def from_match(cls, m, raw):
        return cls()

    def render(self) -> str:
        return "a=rtcp-mux"


@attr.s
class SsrcLine(Line):
    """
    Ex: a=ssrc:1944796561 cname:/vC4ULAr8vHNjXmq
    """

    line_type = "a"
    regex = line_regex("a=ssrc:", f"({FIELD}) ({REST})")

    ssrc = attr.ib(type=int)
    attribute = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(ssrc=parse_int(m.group(1), raw), attribute=m.group(2))

    def render(self) -> str:
        return "a=ssrc:%d %s" % (self.ssrc, self.attribute)


@attr.s
class SsrcGroupLine(Line):
    """
    Ex: a=ssrc-group:FID 2231627014 632943048
    """

    line_type = "a"
    regex = line_regex("a=ssrc-group:", f"({TOKEN})((?: {FIELD})+)")

    semantics = attr.ib(type=str)
    ssrcs = attr.ib(type=List[int], factory=list)

    @classmethod
    def from_match(cls, m, raw):
        return cls(
            semantics=m.group(1),
            ssrcs=[parse_int(x, raw) for x in m.group(2).split()],
        )

    def render(self) -> str:
        return "a=ssrc-group:%s %s" % (
            self.semantics,
            " ".join(map(str, self.ssrcs)),
        )


@attr.s
class CandidateLine(Line):
    """
    Ex: a=candidate:1039001212 1 udp 2122194687 192.168.99.58 45076 typ host
    """

    line_type = "a"
    regex = line_regex(
        "a=candidate:",
        f"({FIELD}) ({FIELD}) ({FIELD}) ({FIELD}) ({FIELD}) ({FIELD}) "
        f"typ ({FIELD})(?: ({REST}))?",
    )

    foundation = attr.ib(type=str)
    component = attr.ib(type=int)
    transport = attr.ib(type=str)
    priority = attr.ib(type=int)
    address = attr.ib(type=str)
    port = attr.ib(type=int)
    type = attr.ib(type=str)
    extensions = attr.ib(type=Optional[str], default=None)

    @classmethod
    def from_match(cls, m, raw):
        return cls(
            foundation=m.group(1),
            component=parse_int(m.group(2), raw),
            transport=m.group(3),
            priority=parse_int(m.group(4), raw),
            address=m.group(5),
            port=parse_int(m.group(6), raw),
            type=m.group(7),
            extensions=m.group(8),
        )

    def _extension(self, name: str) -> Optional[str]:
        if self.extensions is None:
            return None
        bits = self.extensions.split()
        for i in range(0, len(bits) - 1, 2):
            if bits[i] == name:
                return bits[i + 1]
        return None

    @property
    def related_address(self) -> Optional[str]:
        return self._extension("raddr")

    @property
    def related_port(self) -> Optional[int]:
        value = self._extension("rport")
        return int(value) if value is not None else None

    @property
    def tcp_type(self) -> Optional[str]:
        return self._extension("tcptype")

    def render(self) -> str:
        line = "a=candidate:%s %d %s %d %s %d typ %s" % (
            self.foundation,
            self.component,
            self.transport,
            self.priority,
            self.address,
            self.port,
            self.type,
        )
        if self.extensions is not None:
            line += " " + self.extensions
        return line


@attr.s
class EndOfCandidatesLine(Line):
    line_type = "a"
    regex = line_regex("a=", "end-of-candidates")

    @classmethod
    def from_match(cls, m, raw):
        return cls()

    def render(self) -> str:
        return "a=end-of-candidates"


@attr.s
class WildcardRtcpFbLine(Line):
    """
    Feedback applying to every payload type of a media description.

    Ex: a=rtcp-fb:* nack
    """

    line_type = "a"
    regex = line_regex("a=rtcp-fb:*", f" ({REST})")

    feedback = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(feedback=m.group(1))

    def render(self) -> str:
        return "a=rtcp-fb:* " + self.feedback
