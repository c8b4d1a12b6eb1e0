import logging
from collections import OrderedDict
from typing import Dict, List, Optional

from .configuration import SdpConfiguration
from .exceptions import SdpParseError, SdpStructureError
from .grammar import ParametersDict, parameters_from_sdp
from .lines import (
    CODEC_LINE_TYPES,
    DirectionLine,
    FmtpLine,
    Line,
    MediaDirection,
    MediaLine,
    RtcpFbLine,
    RtpMapLine,
    parse_line,
)

logger = logging.getLogger("sdp")


class SdpBlock:
    """
    A grouping of multiple related lines within an SDP.
    """

    strict = False

    def add_line(self, line: Line) -> None:
        """
        Add a parsed line to this block.
        """
        raise NotImplementedError

    def to_lines(self) -> List[Line]:
        """
        Return all the lines of this block, in the order they are emitted.
        """
        raise NotImplementedError

    def _structure_error(self, msg: str, *args) -> None:
        if self.strict:
            raise SdpStructureError(msg % args)
        logger.warning(msg, *args)


class SessionInfo(SdpBlock):
    """
    The lines in the session section of an SDP, kept in arrival order.
    """

    def __init__(self) -> None:
        self.lines: List[Line] = []

    def add_line(self, line: Line) -> None:
        self.lines.append(line)

    def to_lines(self) -> List[Line]:
        return self.lines


class CodecInfo(SdpBlock):
    """
    All the lines describing the codec behind one payload type.
    """

    def __init__(self, pt: int, strict: bool = False) -> None:
        self.__pt = pt
        self.name: Optional[str] = None
        self.clock_rate: Optional[int] = None
        self.encoding_params: Optional[str] = None
        self.fmt_params: List[str] = []
        self.feedback: List[str] = []
        # payload type of the 'primary' codec if this is a 'secondary' codec
        self.primary_codec_pt: Optional[int] = None
        self.strict = strict

    @property
    def pt(self) -> int:
        return self.__pt

    @property
    def fmtp_parameters(self) -> ParametersDict:
        """
        The parameters of all the fmtp lines merged, later lines winning.
        """
        parameters: ParametersDict = OrderedDict()
        for params in self.fmt_params:
            parameters.update(parameters_from_sdp(params))
        return parameters

    def add_line(self, line: Line) -> None:
        if (
            not isinstance(line, CODEC_LINE_TYPES)
            or line.payload_type != self.pt
        ):
            self._structure_error("Codec %d cannot accept line %s", self.pt, line)
            return

        if isinstance(line, RtpMapLine):
            self.name = line.encoding_name
            self.clock_rate = line.clock_rate
            self.encoding_params = line.encoding_params
        elif isinstance(line, FmtpLine):
            self.fmt_params.append(line.params)
            apt = line.parameters.get("apt")
            if isinstance(apt, int):
                self.primary_codec_pt = apt
        elif isinstance(line, RtcpFbLine):
            self.feedback.append(line.feedback)

    def to_lines(self) -> List[Line]:
        lines: List[Line] = []
        if self.name is None or self.clock_rate is None:
            self._structure_error("Codec %d has no rtpmap", self.pt)
        else:
            lines.append(
                RtpMapLine(
                    payload_type=self.pt,
                    encoding_name=self.name,
                    clock_rate=self.clock_rate,
                    encoding_params=self.encoding_params,
                )
            )
        for fb in self.feedback:
            lines.append(RtcpFbLine(payload_type=self.pt, feedback=fb))
        for fmt in self.fmt_params:
            lines.append(FmtpLine(payload_type=self.pt, params=fmt))
        return lines

    def __repr__(self) -> str:
        return "CodecInfo(pt=%d, name=%r, clock_rate=%r)" % (
            self.pt,
            self.name,
            self.clock_rate,
        )


class MediaInfo(SdpBlock):
    """
    All the information present within a media description block.
    """

    def __init__(self, media_line: MediaLine, strict: bool = False) -> None:
        self.type = media_line.type
        self.port = media_line.port
        self.port_count = media_line.port_count
        self.protocol = media_line.protocol
        self.strict = strict

        self.pts: List[int] = []
        self.codecs: Dict[int, CodecInfo] = {}
        # formats which are not payload types, e.g. webrtc-datachannel
        self.formats: List[str] = []

        self.direction: Optional[MediaDirection] = None
        self.other_lines: List[Line] = []

        for fmt in media_line.formats:
            if not (fmt.isascii() and fmt.isdigit()):
                self.formats.append(fmt)
                continue
            pt = int(fmt)
            if pt in self.codecs:
                self._structure_error("Duplicate payload type %d in media line", pt)
                continue
            self.pts.append(pt)
            self.codecs[pt] = CodecInfo(pt, strict=strict)

    def add_line(self, line: Line) -> None:
        if isinstance(line, MediaLine):
            self._structure_error(
                "Tried passing a media line to an existing media block: %s", line
            )
            return

        if isinstance(line, DirectionLine):
            self.direction = line.direction
        elif isinstance(line, CODEC_LINE_TYPES):
            codec = self.codecs.get(line.payload_type)
            if codec is None:
                self._structure_error("Got line for unknown codec: %s", line)
                return
            codec.add_line(line)
        else:
            self.other_lines.append(line)

    def get_codec_by_pt(self, pt: int) -> Optional[CodecInfo]:
        """
        Get the codec associated with the given payload type, if one exists.
        """
        return self.codecs.get(pt)

    def get_codecs_by_name(self, name: str) -> List[CodecInfo]:
        """
        Get the codecs whose encoding name matches `name`, ignoring case.
        """
        return [
            self.codecs[pt]
            for pt in self.pts
            if (self.codecs[pt].name or "").lower() == name.lower()
        ]

    def remove_pt(self, pt: int) -> None:
        """
        Remove all references to the given payload type, including any
        secondary codecs whose primary codec it is.

        Only codecs which directly reference `pt` are removed alongside it.
        """
        pts_to_remove = {pt}
        pts_to_remove.update(
            codec.pt
            for codec in self.codecs.values()
            if codec.primary_codec_pt == pt
        )
        for pt_to_remove in pts_to_remove:
            self.codecs.pop(pt_to_remove, None)
        self.pts = [x for x in self.pts if x not in pts_to_remove]

    def remove_codec(self, name: str) -> None:
        """
        Remove every codec with the given encoding name, and their secondary
        codecs.
        """
        for codec in self.get_codecs_by_name(name):
            self.remove_pt(codec.pt)

    def to_lines(self) -> List[Line]:
        lines: List[Line] = [
            MediaLine(
                type=self.type,
                port=self.port,
                port_count=self.port_count,
                protocol=self.protocol,
                formats=[str(pt) for pt in self.pts] + self.formats,
            )
        ]
        lines += [line for line in self.other_lines if not line.is_attribute]
        if self.direction is None:
            self._structure_error("Media block %s has no direction", self.type)
        else:
            lines.append(DirectionLine(direction=self.direction))
        for pt in self.pts:
            lines += self.codecs[pt].to_lines()
        lines += [line for line in self.other_lines if line.is_attribute]
        return lines


class Sdp:
    """
    An entire SDP: a session block and zero or more media blocks.
    """

    def __init__(self, configuration: Optional[SdpConfiguration] = None) -> None:
        self.configuration = configuration or SdpConfiguration()
        self.session = SessionInfo()
        self.media: List[MediaInfo] = []

    @classmethod
    def parse(
        cls, sdp: str, configuration: Optional[SdpConfiguration] = None
    ) -> "Sdp":
        """
        Build an :class:`Sdp` from its text, lines separated by CRLF or LF.
        """
        session = cls(configuration=configuration)
        for raw in sdp.splitlines():
            if not raw.strip():
                continue
            try:
                line = parse_line(raw)
            except SdpParseError as exc:
                if not session.configuration.skip_malformed_lines:
                    raise
                logger.warning("Skipping malformed line: %s", exc)
                continue
            if line is not None:
                session.add_line(line)
        return session

    def add_line(self, line: Line) -> None:
        """
        Add a line to the block currently being built: a media line opens a
        new media block, other lines go to the last media block or to the
        session block if there is none yet.
        """
        if isinstance(line, MediaLine):
            self.media.append(MediaInfo(line, strict=self.configuration.strict))
        elif self.media:
            self.media[-1].add_line(line)
        else:
            self.session.add_line(line)

    def remove_codec(self, name: str) -> None:
        for media in self.media:
            media.remove_codec(name)

    def to_lines(self) -> List[Line]:
        lines: List[Line] = []
        lines += self.session.to_lines()
        for media in self.media:
            lines += media.to_lines()
        return lines

    def to_sdp(self) -> str:
        return "\r\n".join(line.render() for line in self.to_lines())

    def __str__(self) -> str:
        return self.to_sdp()
