import re
from collections import OrderedDict
from typing import Dict, Union

from .exceptions import SdpParseError

ParametersDict = Dict[str, Union[int, str, None]]

# Shape-only building blocks. Numeric slots are matched loosely so that a
# field-shaped line is recognized and its parser reports the bad value.
FIELD = r"[^ ]+"
TOKEN = r"[!#$%&'*+\-.0-9A-Z^_`a-z{|}~]+"
ANY = r".*"
REST = r".+"

FMTP_INT_PARAMETERS = [
    "apt",
    "max-fr",
    "max-fs",
    "maxplaybackrate",
    "minptime",
    "stereo",
    "useinbandfec",
]


def line_regex(prefix: str, body: str) -> "re.Pattern[str]":
    return re.compile("^" + re.escape(prefix) + body + "$")


def parse_int(value: str, line: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise SdpParseError(f"Expected an integer, got {value!r}", line)


def parameters_from_sdp(sdp: str) -> ParametersDict:
    parameters: ParametersDict = OrderedDict()
    for param in sdp.split(";"):
        param = param.strip()
        if not param:
            continue
        if "=" in param:
            k, v = param.split("=", 1)
            if k in FMTP_INT_PARAMETERS and v.isascii() and v.isdigit():
                parameters[k] = int(v)
            else:
                parameters[k] = v
        else:
            parameters[param] = None
    return parameters

