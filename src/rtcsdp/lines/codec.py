"""
Attribute lines addressed to a single payload type.
"""

from typing import Optional

import attr

from ..grammar import (
    REST,
    ParametersDict,
    line_regex,
    parameters_from_sdp,
    parse_int,
)
from .base import Line

# A wildcard payload type (a=rtcp-fb:* ...) does not address a single codec.
PAYLOAD_TYPE = r"[^ *][^ ]*"


@attr.s
class RtpMapLine(Line):
    """
    Ex: a=rtpmap:111 opus/48000/2
    """

    line_type = "a"
    regex = line_regex(
        "a=rtpmap:", f"({PAYLOAD_TYPE}) ([^ /]+)/([^ /]+)(?:/({REST}))?"
    )

    payload_type = attr.ib(type=int)
    encoding_name = attr.ib(type=str)
    clock_rate = attr.ib(type=int)
    encoding_params = attr.ib(type=Optional[str], default=None)

    @classmethod
    def from_match(cls, m, raw):
        return cls(
            payload_type=parse_int(m.group(1), raw),
            encoding_name=m.group(2),
            clock_rate=parse_int(m.group(3), raw),
            encoding_params=m.group(4),
        )

    def render(self) -> str:
        line = "a=rtpmap:%d %s/%d" % (
            self.payload_type,
            self.encoding_name,
            self.clock_rate,
        )
        if self.encoding_params is not None:
            line += "/" + self.encoding_params
        return line


@attr.s
class FmtpLine(Line):
    """
    Ex: a=fmtp:97 apt=96
    """

    line_type = "a"
    regex = line_regex("a=fmtp:", f"({PAYLOAD_TYPE}) ({REST})")

    payload_type = attr.ib(type=int)
    params = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(payload_type=parse_int(m.group(1), raw), params=m.group(2))

    @property
    def parameters(self) -> ParametersDict:
        """
        The format parameters decoded to a mapping, integer parameters such
        as ``apt`` converted to :class:`int` when they hold digits only.
        """
        return parameters_from_sdp(self.params)

    def render(self) -> str:
        return "a=fmtp:%d %s" % (self.payload_type, self.params)


@attr.s
class RtcpFbLine(Line):
    """
    Ex: a=rtcp-fb:96 nack pli
    """

    line_type = "a"
    regex = line_regex("a=rtcp-fb:", f"({PAYLOAD_TYPE}) ({REST})")

    payload_type = attr.ib(type=int)
    feedback = attr.ib(type=str)

    @classmethod
    def from_match(cls, m, raw):
        return cls(payload_type=parse_int(m.group(1), raw), feedback=m.group(2))

    def render(self) -> str:
        return "a=rtcp-fb:%d %s" % (self.payload_type, self.feedback)


CODEC_LINE_TYPES = (RtpMapLine, FmtpLine, RtcpFbLine)
