from highflow.core.errors import (
    ChecksumMismatchError,
    DecodeError,
    InvalidValueError,
    RangeError,
    ReadError,
)
from highflow.protocol import Frame, OpCode, Settings, decode_frame
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "ChecksumMismatchError",
    "DecodeError",
    "Frame",
    "InvalidValueError",
    "OpCode",
    "RangeError",
    "ReadError",
    "Settings",
    "decode_frame",
]

try:
    __version__ = version("highflow-next")
except PackageNotFoundError:
    __version__ = "0.0.0"
