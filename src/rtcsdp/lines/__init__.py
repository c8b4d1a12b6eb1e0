import logging
from typing import Optional, Tuple, Type

from .attributes import (
    DIRECTIONS,
    CandidateLine,
    DirectionLine,
    EndOfCandidatesLine,
    ExtMapLine,
    FingerprintLine,
    GroupLine,
    IceOptionsLine,
    IcePwdLine,
    IceUfragLine,
    MediaDirection,
    MidLine,
    MsidLine,
    MsidSemanticLine,
    RtcpMuxLine,
    SetupLine,
    SsrcGroupLine,
    SsrcLine,
    WildcardRtcpFbLine,
)
from .base import Line
from .codec import CODEC_LINE_TYPES, FmtpLine, RtcpFbLine, RtpMapLine
from .fields import (
    BandwidthLine,
    ConnectionLine,
    MediaLine,
    OriginLine,
    SessionInformationLine,
    SessionNameLine,
    TimingLine,
    VersionLine,
)

logger = logging.getLogger("sdp")

# Raw lines are tested against these kinds in order, the first match wins.
# No raw line matches more than one of them.
LINE_TYPES: Tuple[Type[Line], ...] = (
    VersionLine,
    OriginLine,
    SessionNameLine,
    SessionInformationLine,
    ConnectionLine,
    BandwidthLine,
    TimingLine,
    MediaLine,
    RtpMapLine,
    FmtpLine,
    RtcpFbLine,
    WildcardRtcpFbLine,
    DirectionLine,
    MidLine,
    MsidLine,
    MsidSemanticLine,
    GroupLine,
    ExtMapLine,
    IceUfragLine,
    IcePwdLine,
    IceOptionsLine,
    FingerprintLine,
    SetupLine,
    RtcpMuxLine,
    SsrcLine,
    SsrcGroupLine,
    CandidateLine,
    EndOfCandidatesLine,
)


def parse_line(raw: str) -> Optional[Line]:
    """
    Parse one raw SDP line into the first line kind which recognizes it.

    Returns `None` if no line kind recognizes the line. Raises
    :class:`~rtcsdp.exceptions.SdpParseError` if the line is recognized
    but one of its fields is malformed.
    """
    raw = raw.rstrip("\r\n")
    for line_type in LINE_TYPES:
        if line_type.recognize(raw):
            return line_type.parse(raw)
    logger.debug("Ignoring unrecognized line %r", raw)
    return None


__all__ = [
    "CODEC_LINE_TYPES",
    "DIRECTIONS",
    "LINE_TYPES",
    "BandwidthLine",
    "CandidateLine",
    "ConnectionLine",
    "DirectionLine",
    "EndOfCandidatesLine",
    "ExtMapLine",
    "FingerprintLine",
    "FmtpLine",
    "GroupLine",
    "IceOptionsLine",
    "IcePwdLine",
    "IceUfragLine",
    "Line",
    "MediaDirection",
    "MediaLine",
    "MidLine",
    "MsidLine",
    "MsidSemanticLine",
    "OriginLine",
    "RtcpFbLine",
    "RtcpMuxLine",
    "RtpMapLine",
    "SessionInformationLine",
    "SessionNameLine",
    "SetupLine",
    "SsrcGroupLine",
    "SsrcLine",
    "TimingLine",
    "VersionLine",
    "WildcardRtcpFbLine",
    "parse_line",
]
