import attr


@attr.s
class SdpConfiguration:
    """
    The :class:`SdpConfiguration` dictionary controls how an
    :class:`~rtcsdp.model.Sdp` is built from text.
    """

    strict = attr.ib(type=bool, default=False)
    """
    Raise :class:`~rtcsdp.exceptions.SdpStructureError` when a line does not
    fit its block (e.g. an unknown payload type) instead of logging a warning
    and dropping the line.
    """

    skip_malformed_lines = attr.ib(type=bool, default=False)
    """
    Log and skip lines whose fields cannot be decoded instead of raising
    :class:`~rtcsdp.exceptions.SdpParseError`.
    """
