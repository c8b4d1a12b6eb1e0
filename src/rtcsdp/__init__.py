# flake8: noqa

from .configuration import SdpConfiguration
from .exceptions import SdpError, SdpParseError, SdpStructureError
from .lines import (
    DirectionLine,
    FmtpLine,
    Line,
    MediaDirection,
    MediaLine,
    RtcpFbLine,
    RtpMapLine,
    TimingLine,
    parse_line,
)
from .model import CodecInfo, MediaInfo, Sdp, SdpBlock, SessionInfo

__version__ = "1.0.0"
