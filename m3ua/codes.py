"""Code points carried inside M3UA parameters (RFC 4666)."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Values of the Error Code parameter."""

    INVALID_VERSION = 0x01
    UNSUPPORTED_MESSAGE_CLASS = 0x03
    UNSUPPORTED_MESSAGE_TYPE = 0x04
    UNSUPPORTED_TRAFFIC_MODE_TYPE = 0x05
    UNEXPECTED_MESSAGE = 0x06
    PROTOCOL_ERROR = 0x07
    INVALID_STREAM_IDENTIFIER = 0x09
    REFUSED_MANAGEMENT_BLOCKING = 0x0D
    ASP_IDENTIFIER_REQUIRED = 0x0E
    INVALID_ASP_IDENTIFIER = 0x0F
    INVALID_PARAMETER_VALUE = 0x11
    PARAMETER_FIELD_ERROR = 0x12
    UNEXPECTED_PARAMETER = 0x13
    DESTINATION_STATUS_UNKNOWN = 0x14
    INVALID_NETWORK_APPEARANCE = 0x15
    MISSING_PARAMETER = 0x16
    INVALID_ROUTING_CONTEXT = 0x19
    NO_CONFIGURED_AS_FOR_ASP = 0x1A


class StatusType(IntEnum):
    """Status Type, the upper 16 bits of the Status parameter."""

    AS_STATE_CHANGE = 1
    OTHER = 2


class StatusInfo(IntEnum):
    """Complete Status values: the Status Type shifted left 16 bits, plus the information."""

    AS_STATE_INACTIVE = 0x00010002
    AS_STATE_ACTIVE = 0x00010003
    AS_STATE_PENDING = 0x00010004
    INSUFFICIENT_ASP_RESOURCES = 0x00020001
    ALTERNATE_ASP_ACTIVE = 0x00020002
    ASP_FAILURE = 0x00020003


class TrafficMode(IntEnum):
    """Values of the Traffic Mode Type parameter."""

    OVERRIDE = 1
    LOADSHARE = 2
    BROADCAST = 3


class UserIdentity(IntEnum):
    """User identity half of the User/Cause parameter."""

    UNKNOWN = 0
    UNEQUIPPED = 1
    INACCESSIBLE = 2


class UnavailabilityCause(IntEnum):
    """Unavailability cause half of the User/Cause parameter."""

    SCCP = 1
    TUP = 2
    ISUP = 3
    BROADBAND_ISUP = 5
    SATELLITE_ISUP = 6
    AAL2_SIGNALLING = 8
    BICC = 9
    GATEWAY_CONTROL_PROTOCOL = 10


class RegistrationStatusCode(IntEnum):
    """Values of the Registration Status parameter."""

    SUCCESSFULLY_REGISTERED = 0
    UNKNOWN = 1
    INVALID_DPC = 2
    INVALID_NETWORK_APPEARANCE = 3
    INVALID_ROUTING_KEY = 4
    PERMISSION_DENIED = 5
    CANNOT_SUPPORT_UNIQUE_ROUTING = 6
    ROUTING_KEY_NOT_CURRENTLY_PROVISIONED = 7
    INSUFFICIENT_RESOURCES = 8
    UNSUPPORTED_RK_PARAMETER_FIELD = 9
    UNSUPPORTED_TRAFFIC_HANDLING_MODE = 10
    ROUTING_KEY_CHANGE_REFUSED = 11
    ROUTING_KEY_ALREADY_REGISTERED = 12


class DeregistrationStatusCode(IntEnum):
    """Values of the Deregistration Status parameter."""

    SUCCESSFULLY_DEREGISTERED = 0
    UNKNOWN = 1
    INVALID_ROUTING_CONTEXT = 2
    PERMISSION_DENIED = 3
    NOT_REGISTERED = 4
    ASP_ACTIVE_FOR_ROUTING_CONTEXT = 5


class ServiceIndicator(IntEnum):
    """Service Indicator octets used in Protocol Data and Service Indicators."""

    UNUSED = 0
    SCCP = 3
    TUP = 4
    ISUP = 5
    BROADBAND_ISUP = 7
    SATELLITE_ISUP = 8
    AAL_TYPE2_SIGNALLING = 10
    BICC = 11
    GATEWAY_CONTROL_PROTOCOL = 12