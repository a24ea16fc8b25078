"""ASP State Maintenance messages: Heartbeat and Heartbeat Ack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from m3ua.header import ASPSMType, Message, MessageClass
from m3ua.param import Param, Tag


@dataclass
class Heartbeat(Message):
    """Heartbeat message (RFC 4666, 3.5.5)."""

    heartbeat_data: Optional[Param] = None

    MESSAGE_CLASS: ClassVar[int] = MessageClass.ASPSM
    MESSAGE_TYPE: ClassVar[int] = ASPSMType.HEARTBEAT
    CLASS_NAME: ClassVar[str] = "ASPSM"
    TYPE_NAME: ClassVar[str] = "Heartbeat"
    _PARAMS: ClassVar[tuple[tuple[Tag, str], ...]] = (
        (Tag.HEARTBEAT_DATA, "heartbeat_data"),
    )


@dataclass
class HeartbeatAck(Message):
    """Heartbeat Ack message (RFC 4666, 3.5.6)."""

    heartbeat_data: Optional[Param] = None

    MESSAGE_CLASS: ClassVar[int] = MessageClass.ASPSM
    MESSAGE_TYPE: ClassVar[int] = ASPSMType.HEARTBEAT_ACK
    CLASS_NAME: ClassVar[str] = "ASPSM"
    TYPE_NAME: ClassVar[str] = "Heartbeat Ack"
    _PARAMS: ClassVar[tuple[tuple[Tag, str], ...]] = (
        (Tag.HEARTBEAT_DATA, "heartbeat_data"),
    )


def new_heartbeat(hb_data: Optional[Param]) -> Heartbeat:
    """Create a Heartbeat carrying ``hb_data``."""
    message = Heartbeat(heartbeat_data=hb_data)
    message.set_length()
    return message


def new_heartbeat_ack(hb_data: Optional[Param]) -> HeartbeatAck:
    """Create a Heartbeat Ack carrying ``hb_data``."""
    message = HeartbeatAck(heartbeat_data=hb_data)
    message.set_length()
    return message


def parse_heartbeat(data: bytes) -> Heartbeat:
    """Decode ``data`` as a Heartbeat."""
    return Heartbeat._from_bytes(data)


def parse_heartbeat_ack(data: bytes) -> HeartbeatAck:
    """Decode ``data`` as a Heartbeat Ack."""
    return HeartbeatAck._from_bytes(data)