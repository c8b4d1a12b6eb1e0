import logging
import os
import unittest
from typing import TypeVar, cast

T = TypeVar("T")


def lf2crlf(x: str) -> str:
    return x.replace("\n", "\r\n")


class TestCase(unittest.TestCase):
    def ensureIsInstance(self, obj: object, cls: type[T]) -> T:
        self.assertIsInstance(obj, cls)
        return cast(T, obj)


def load(name: str) -> str:
    path = os.path.join(os.path.dirname(__file__), name)
    with open(path, "r", newline="") as fp:
        return fp.read()


if os.environ.get("RTCSDP_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
