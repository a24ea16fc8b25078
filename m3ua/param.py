"""M3UA common and M3UA-specific parameters (RFC 4666, section 3.2).

Every parameter is represented by the same :class:`Param` type, a
tag-length-value triple whose value is padded to a four-byte boundary
on the wire.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

_HEADER = struct.Struct(">HH")
_HEADER_LEN = _HEADER.size


class Tag(IntEnum):
    """Parameter tags."""

    # Common parameters.
    INFO_STRING = 0x0004
    ROUTING_CONTEXT = 0x0006
    DIAGNOSTIC_INFORMATION = 0x0007
    HEARTBEAT_DATA = 0x0009
    TRAFFIC_MODE_TYPE = 0x000B
    ERROR_CODE = 0x000C
    STATUS = 0x000D
    ASP_IDENTIFIER = 0x0011
    AFFECTED_POINT_CODE = 0x0012
    CORRELATION_ID = 0x0013

    # M3UA-specific parameters.
    NETWORK_APPEARANCE = 0x0200
    USER_CAUSE = 0x0204
    CONGESTION_INDICATIONS = 0x0205
    CONCERNED_DESTINATION = 0x0206
    ROUTING_KEY = 0x0207
    REGISTRATION_RESULT = 0x0208
    DEREGISTRATION_RESULT = 0x0209
    LOCAL_ROUTING_KEY_IDENTIFIER = 0x020A
    DESTINATION_POINT_CODE = 0x020B
    SERVICE_INDICATORS = 0x020C
    ORIGINATING_POINT_CODE_LIST = 0x020E
    PROTOCOL_DATA = 0x0210
    REGISTRATION_STATUS = 0x0212
    DEREGISTRATION_STATUS = 0x0213


class ParamError(ValueError):
    """Base class for parameter encoding and decoding errors."""


class TooShortToParseError(ParamError):
    """The input is too short to be decoded as a parameter."""

    def __init__(self, message: str = "too short to decode as parameter") -> None:
        super().__init__(message)


class InvalidLengthError(ParamError):
    """The parameter carries an invalid length value."""

    def __init__(self, message: str = "parameter has invalid length value") -> None:
        super().__init__(message)


class InvalidTypeError(ParamError):
    """The parameter has a tag other than the one expected."""

    def __init__(self, message: str = "got invalid type in parameter") -> None:
        super().__init__(message)


class TooShortToMarshalError(ParamError):
    """The target buffer is too small to hold the encoded value."""

    def __init__(
        self, message: str = "insufficient buffer to serialize parameter to"
    ) -> None:
        super().__init__(message)


@dataclass
class Param:
    """A single M3UA parameter."""

    tag: int
    length: int = 0
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    def __str__(self) -> str:
        return f"{{Tag: {int(self.tag)}, Length: {self.length}, Data: {self.data.hex()}}}"

    # --- encoding -------------------------------------------------------

    def marshal(self) -> bytes:
        """Encode the parameter, including the trailing padding."""
        return (
            _HEADER.pack(self.tag, self.length)
            + self.data
            + b"\x00" * self.padding()
        )

    def marshal_len(self) -> int:
        """Length of the encoded parameter, padding included."""
        return _HEADER_LEN + len(self.data) + self.padding()

    def padding(self) -> int:
        """Number of zero bytes needed to align the value to four bytes."""
        return -len(self.data) % 4

    def set_length(self) -> None:
        """Set the Length field from the value (padding excluded)."""
        self.length = _HEADER_LEN + len(self.data)

    # --- value helpers --------------------------------------------------

    def _uint32(self, tag: Tag) -> int:
        if self.tag != tag or len(self.data) != 4:
            return 0
        return int.from_bytes(self.data, "big")

    def _uint32_list(self, tag: Tag) -> list[int]:
        if self.tag != tag or len(self.data) % 4:
            return []
        return [v for (v,) in struct.iter_unpack(">I", self.data)]

    def _first_of(self, tag: Tag) -> int:
        if self.tag != tag:
            return 0
        values = self._uint32_list(tag)
        if not values:
            raise InvalidLengthError()
        return values[0]

    # --- typed accessors ------------------------------------------------

    def asp_identifier(self) -> int:
        """ASP Identifier, or 0 for another parameter."""
        return self._uint32(Tag.ASP_IDENTIFIER)

    def affected_point_code(self) -> int:
        """First Affected Point Code, or 0 for another parameter."""
        return self._first_of(Tag.AFFECTED_POINT_CODE)

    def affected_point_codes(self) -> list[int]:
        """All Affected Point Codes carried by the parameter."""
        return self._uint32_list(Tag.AFFECTED_POINT_CODE)

    def concerned_destination(self) -> int:
        """Concerned Destination point code (24 bits)."""
        return self._uint32(Tag.CONCERNED_DESTINATION) & 0xFFFFFF

    def congestion_level(self) -> int:
        """Congestion level from Congestion Indications."""
        return self._uint32(Tag.CONGESTION_INDICATIONS) & 0xFF

    def correlation_id(self) -> int:
        """Correlation Id, or 0 for another parameter."""
        return self._uint32(Tag.CORRELATION_ID)

    def deregistration_status(self) -> int:
        """Deregistration Status, or 0 for another parameter."""
        return self._uint32(Tag.DEREGISTRATION_STATUS)

    def destination_point_code(self) -> int:
        """Destination Point Code (24 bits)."""
        return self._uint32(Tag.DESTINATION_POINT_CODE) & 0xFFFFFF

    def diagnostic_information(self) -> bytes:
        """Diagnostic Information bytes, empty for another parameter."""
        return self.data if self.tag == Tag.DIAGNOSTIC_INFORMATION else b""

    def error_code(self) -> int:
        """Error Code, or 0 for another parameter."""
        return self._uint32(Tag.ERROR_CODE)

    def heartbeat_data(self) -> bytes:
        """Heartbeat Data bytes, empty for another parameter."""
        return self.data if self.tag == Tag.HEARTBEAT_DATA else b""

    def info_string(self) -> str:
        """INFO String text, empty for another parameter."""
        if self.tag != Tag.INFO_STRING:
            return ""
        return self.data.decode("utf-8", errors="surrogateescape")

    def local_routing_key_identifier(self) -> int:
        """Local-RK-Identifier, or 0 for another parameter."""
        return self._uint32(Tag.LOCAL_ROUTING_KEY_IDENTIFIER)

    def network_appearance(self) -> int:
        """Network Appearance, or 0 for another parameter."""
        return self._uint32(Tag.NETWORK_APPEARANCE)

    def originating_point_code_list(self) -> list[int]:
        """All Originating Point Codes carried by the parameter."""
        return self._uint32_list(Tag.ORIGINATING_POINT_CODE_LIST)

    def registration_status(self) -> int:
        """Registration Status, or 0 for another parameter."""
        return self._uint32(Tag.REGISTRATION_STATUS)

    def routing_context(self) -> int:
        """First Routing Context, or 0 for another parameter."""
        return self._first_of(Tag.ROUTING_CONTEXT)

    def routing_contexts(self) -> list[int]:
        """All Routing Contexts carried by the parameter."""
        return self._uint32_list(Tag.ROUTING_CONTEXT)

    def service_indicators(self) -> bytes:
        """Service Indicator octets, empty for another parameter."""
        return self.data if self.tag == Tag.SERVICE_INDICATORS else b""

    def status(self) -> int:
        """Whole Status value: type in the upper and info in the lower 16 bits."""
        return self._uint32(Tag.STATUS)

    def status_type(self) -> int:
        """Status Type (upper 16 bits of Status)."""
        return self._uint32(Tag.STATUS) >> 16

    def status_info(self) -> int:
        """Status Information (lower 16 bits of Status)."""
        return self._uint32(Tag.STATUS) & 0xFFFF

    def traffic_mode_type(self) -> int:
        """Traffic Mode Type, or 0 for another parameter."""
        return self._uint32(Tag.TRAFFIC_MODE_TYPE)

    def user_cause(self) -> int:
        """Whole User/Cause value."""
        return self._uint32(Tag.USER_CAUSE)

    def user_identity(self) -> int:
        """User identity (lower 16 bits of User/Cause)."""
        return self._uint32(Tag.USER_CAUSE) & 0xFFFF

    def unavailability_cause(self) -> int:
        """Unavailability cause (upper 16 bits of User/Cause)."""
        return self._uint32(Tag.USER_CAUSE) >> 16


def new_param(tag: int, data: bytes) -> Param:
    """Create a parameter with any tag, setting its Length field."""
    param = Param(tag=int(tag) & 0xFFFF, data=bytes(data))
    param.set_length()
    return param


def parse_param(data: bytes) -> Param:
    """Decode one parameter from the start of ``data``."""
    if len(data) < _HEADER_LEN:
        raise TooShortToParseError()
    tag, length = _HEADER.unpack_from(data)
    if length > len(data) or length < _HEADER_LEN:
        raise InvalidLengthError()
    return Param(tag=tag, length=length, data=bytes(data[_HEADER_LEN:length]))


def parse_multi_params(data: bytes) -> list[Param]:
    """Decode consecutive parameters until the input is used up."""
    params: list[Param] = []
    rest = bytes(data)
    while rest:
        param = parse_param(rest)
        params.append(param)
        step = param.length + param.padding()
        if len(rest) < step:
            break
        rest = rest[step:]
    return params


def marshal_multi_params(params: Iterable[Param]) -> bytes:
    """Encode several parameters back to back."""
    return b"".join(param.marshal() for param in params)