class SdpError(Exception):
    pass


class SdpParseError(SdpError, ValueError):
    """
    A line was recognized but one of its fields could not be decoded.
    """

    def __init__(self, message: str, line: str) -> None:
        super().__init__(f"{message} (line {line!r})")
        self.line = line


class SdpStructureError(SdpError):
    """
    A line or operation does not fit the block it was applied to.
    """
