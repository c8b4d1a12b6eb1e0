import re
from typing import ClassVar, Type, TypeVar

from ..exceptions import SdpParseError

LineT = TypeVar("LineT", bound="Line")


class Line:
    """
    One line of an SDP document.

    Every concrete line kind declares the ``line_type`` letter it starts with
    and the ``regex`` its raw text must match, decodes the capture groups in
    :meth:`from_match` and renders itself back with :meth:`render`.
    """

    line_type: ClassVar[str]
    regex: ClassVar["re.Pattern[str]"]

    @classmethod
    def recognize(cls, raw: str) -> bool:
        return cls.regex.match(raw) is not None

    @classmethod
    def parse(cls: Type[LineT], raw: str) -> LineT:
        m = cls.regex.match(raw)
        if m is None:
            raise SdpParseError(f"Not a valid {cls.__name__}", raw)
        return cls.from_match(m, raw)

    @classmethod
    def from_match(cls: Type[LineT], m: "re.Match[str]", raw: str) -> LineT:
        raise NotImplementedError

    @property
    def is_attribute(self) -> bool:
        return self.line_type == "a"

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()
