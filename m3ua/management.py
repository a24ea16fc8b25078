"""Management messages: Error and Notify."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from m3ua.header import ManagementType, Message, MessageClass
from m3ua.param import Param, Tag


@dataclass
class ErrorMessage(Message):
    """Error message (RFC 4666, 3.8.1)."""

    error_code: Optional[Param] = None
    routing_context: Optional[Param] = None
    network_appearance: Optional[Param] = None
    affected_point_code: Optional[Param] = None
    diagnostic_information: Optional[Param] = None

    MESSAGE_CLASS: ClassVar[int] = MessageClass.MANAGEMENT
    MESSAGE_TYPE: ClassVar[int] = ManagementType.ERROR
    CLASS_NAME: ClassVar[str] = "Management"
    TYPE_NAME: ClassVar[str] = "Error"
    _PARAMS: ClassVar[tuple[tuple[Tag, str], ...]] = (
        (Tag.ERROR_CODE, "error_code"),
        (Tag.ROUTING_CONTEXT, "routing_context"),
        (Tag.NETWORK_APPEARANCE, "network_appearance"),
        (Tag.AFFECTED_POINT_CODE, "affected_point_code"),
        (Tag.DIAGNOSTIC_INFORMATION, "diagnostic_information"),
    )


@dataclass
class Notify(Message):
    """Notify message (RFC 4666, 3.8.2).

    The Status parameter is mandatory by the specification, but its
    presence is not enforced here.
    """

    status: Optional[Param] = None
    asp_identifier: Optional[Param] = None
    routing_context: Optional[Param] = None
    info_string: Optional[Param] = None

    MESSAGE_CLASS: ClassVar[int] = MessageClass.MANAGEMENT
    MESSAGE_TYPE: ClassVar[int] = ManagementType.NOTIFY
    CLASS_NAME: ClassVar[str] = "Management"
    TYPE_NAME: ClassVar[str] = "Notify"
    _PARAMS: ClassVar[tuple[tuple[Tag, str], ...]] = (
        (Tag.STATUS, "status"),
        (Tag.ASP_IDENTIFIER, "asp_identifier"),
        (Tag.ROUTING_CONTEXT, "routing_context"),
        (Tag.INFO_STRING, "info_string"),
    )


def new_error(
    code: Optional[Param],
    routing_context: Optional[Param],
    network_appearance: Optional[Param],
    affected_point_code: Optional[Param],
    diagnostic_information: Optional[Param],
) -> ErrorMessage:
    """Create an Error message; any parameter may be ``None``."""
    message = ErrorMessage(
        error_code=code,
        routing_context=routing_context,
        network_appearance=network_appearance,
        affected_point_code=affected_point_code,
        diagnostic_information=diagnostic_information,
    )
    message.set_length()
    return message


def new_notify(
    status: Optional[Param],
    asp_identifier: Optional[Param],
    routing_context: Optional[Param],
    info_string: Optional[Param],
) -> Notify:
    """Create a Notify message; any parameter may be ``None``."""
    message = Notify(
        status=status,
        asp_identifier=asp_identifier,
        routing_context=routing_context,
        info_string=info_string,
    )
    message.set_length()
    return message


def parse_error(data: bytes) -> ErrorMessage:
    """Decode ``data`` as an Error message."""
    return ErrorMessage._from_bytes(data)


def parse_notify(data: bytes) -> Notify:
    """Decode ``data`` as a Notify message."""
    return Notify._from_bytes(data)