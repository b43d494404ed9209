"""
Wire protocol of the high flow NEXT.

- ``frame``: the checksummed frame envelope and op code dispatch.
- ``settings``: the settings payload.
"""
from highflow.protocol.frame import Frame, OpCode, decode_frame
from highflow.protocol.settings import Settings

__all__ = ["Frame", "OpCode", "Settings", "decode_frame"]
