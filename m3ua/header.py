"""M3UA common message header, message codes and the typed-message base."""

from __future__ import annotations

import dataclasses
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional

from m3ua.param import Param, Tag, marshal_multi_params, parse_multi_params

_HEADER = struct.Struct(">BBBBI")
HEADER_LEN = _HEADER.size


class MessageClass(IntEnum):
    """Message classes."""

    MANAGEMENT = 0
    TRANSFER = 1
    SSNM = 2
    ASPSM = 3
    ASPTM = 4
    RKM = 9


class ManagementType(IntEnum):
    """Message types of the Management class."""

    ERROR = 0
    NOTIFY = 1


class TransferType(IntEnum):
    """Message types of the Transfer class."""

    PAYLOAD_DATA = 1


class SSNMType(IntEnum):
    """Message types of the SS7 Signalling Network Management class."""

    DESTINATION_UNAVAILABLE = 1
    DESTINATION_AVAILABLE = 2
    DESTINATION_STATE_AUDIT = 3
    SIGNALLING_CONGESTION = 4
    DESTINATION_USER_PART_UNAVAILABLE = 5
    DESTINATION_RESTRICTED = 6


class ASPSMType(IntEnum):
    """Message types of the ASP State Maintenance class."""

    ASP_UP = 1
    ASP_DOWN = 2
    HEARTBEAT = 3
    ASP_UP_ACK = 4
    ASP_DOWN_ACK = 5
    HEARTBEAT_ACK = 6


class ASPTMType(IntEnum):
    """Message types of the ASP Traffic Maintenance class."""

    ASP_ACTIVE = 1
    ASP_INACTIVE = 2
    ASP_ACTIVE_ACK = 3
    ASP_INACTIVE_ACK = 4


class RKMType(IntEnum):
    """Message types of the Routing Key Management class."""

    REGISTRATION_REQUEST = 1
    REGISTRATION_RESPONSE = 2
    DEREGISTRATION_REQUEST = 3
    DEREGISTRATION_RESPONSE = 4


class MessageError(ValueError):
    """Base class for message encoding and decoding errors."""


class MessageTooShortError(MessageError):
    """The input is too short to be decoded as an M3UA message."""

    def __init__(self, message: str = "too short to decode as M3UA") -> None:
        super().__init__(message)


class MessageBufferTooShortError(MessageError):
    """The target buffer is too small to hold the encoded message."""

    def __init__(
        self, message: str = "insufficient buffer to serialize M3UA to"
    ) -> None:
        super().__init__(message)


class InvalidParameterError(MessageError):
    """A message carries a parameter it does not allow."""

    def __init__(
        self, message: str = "got invalid parameter inside a message"
    ) -> None:
        super().__init__(message)


@dataclass
class Header:
    """The M3UA common header followed by the raw message payload."""

    version: int = 0
    reserved: int = 0
    msg_class: int = 0
    msg_type: int = 0
    length: int = 0
    payload: bytes = b""

    def __post_init__(self) -> None:
        self.payload = bytes(self.payload)

    def __str__(self) -> str:
        return (
            f"{{Version: {self.version}, Reserved: {hex(self.reserved)}, "
            f"Class: {int(self.msg_class)}, Type: {int(self.msg_type)}, "
            f"Length: {self.length}, Payload: {self.payload.hex()}}}"
        )

    def marshal(self) -> bytes:
        """Encode the header and its payload."""
        try:
            head = _HEADER.pack(
                self.version, self.reserved, self.msg_class, self.msg_type, self.length
            )
        except struct.error as exc:
            raise ValueError(f"header field out of range: {exc}") from exc
        return head + self.payload

    def marshal_len(self) -> int:
        """Length of the encoded header plus payload."""
        return HEADER_LEN + len(self.payload)

    def set_length(self) -> None:
        """Set the Length field from the payload size."""
        self.length = HEADER_LEN + len(self.payload)


def new_header(version: int, msg_class: int, msg_type: int, payload: bytes) -> Header:
    """Create a header carrying ``payload`` with its Length field set."""
    header = Header(
        version=version, msg_class=msg_class, msg_type=msg_type, payload=payload
    )
    header.set_length()
    return header


def parse_header(data: bytes) -> Header:
    """Decode the common header; everything after it becomes the payload."""
    if len(data) < HEADER_LEN:
        raise MessageTooShortError()
    version, reserved, msg_class, msg_type, length = _HEADER.unpack_from(data)
    return Header(version, reserved, msg_class, msg_type, length, bytes(data[HEADER_LEN:]))


def _label(name: str) -> str:
    return "".join(word.capitalize() for word in name.split("_"))


@dataclass
class Message:
    """Base of the typed M3UA messages: a header plus optional parameters.

    Subclasses list the parameters they carry, in wire order, in ``_PARAMS``.
    """

    header: Header = field(default=None)  # type: ignore[assignment]

    MESSAGE_CLASS: ClassVar[int] = 0
    MESSAGE_TYPE: ClassVar[int] = 0
    CLASS_NAME: ClassVar[str] = "Unknown"
    TYPE_NAME: ClassVar[str] = "Unknown"
    _PARAMS: ClassVar[tuple[tuple[Tag, str], ...]] = ()

    def __post_init__(self) -> None:
        if self.header is None:
            self.header = self._default_header()

    def _default_header(self) -> Header:
        return Header(version=1, msg_class=self.MESSAGE_CLASS, msg_type=self.MESSAGE_TYPE)

    def _params(self) -> list[Param]:
        values = (getattr(self, name) for _, name in self._PARAMS)
        return [param for param in values if param is not None]

    @classmethod
    def _from_bytes(cls, data: bytes) -> "Message":
        header = parse_header(data)
        names = dict(cls._PARAMS)
        values: dict[str, Optional[Param]] = {}
        for param in parse_multi_params(header.payload):
            name = names.get(param.tag)
            if name is None:
                raise InvalidParameterError()
            values[name] = param
        return cls(header=header, **values)

    def __str__(self) -> str:
        parts = [f"Header: {self.header}"]
        for _, name in self._PARAMS:
            param = getattr(self, name)
            parts.append(f"{_label(name)}: {'' if param is None else param}")
        return "{" + ", ".join(parts) + "}"

    @property
    def version(self) -> int:
        return self.header.version

    @property
    def message_class(self) -> int:
        return self.MESSAGE_CLASS

    @property
    def message_type(self) -> int:
        return self.MESSAGE_TYPE

    @property
    def message_class_name(self) -> str:
        return self.CLASS_NAME

    @property
    def message_type_name(self) -> str:
        return self.TYPE_NAME

    def marshal(self) -> bytes:
        """Encode the message; the Length field is taken from the header as is."""
        payload = marshal_multi_params(self._params())
        return dataclasses.replace(self.header, payload=payload).marshal()

    def marshal_len(self) -> int:
        """Length of the encoded message."""
        return HEADER_LEN + sum(param.marshal_len() for param in self._params())

    def set_length(self) -> None:
        """Set the Length fields of every parameter and of the header."""
        for param in self._params():
            param.set_length()
        self.header.length = self.marshal_len()