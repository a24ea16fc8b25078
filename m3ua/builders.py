"""Constructors for the individual M3UA parameters."""

from __future__ import annotations

import struct

from m3ua.param import Param, Tag

_UINT32_MAX = 0xFFFFFFFF


def _check_range(value: int, limit: int, what: str) -> int:
    value = int(value)
    if not 0 <= value <= limit:
        raise ValueError(f"{what} out of range: {value}")
    return value


def _uint32_param(tag: Tag, value: int) -> Param:
    value = _check_range(value, _UINT32_MAX, "uint32 value")
    return Param(tag=tag, length=8, data=value.to_bytes(4, "big"))


def _uint24_param(tag: Tag, value: int) -> Param:
    value = _check_range(value, _UINT32_MAX, "uint32 value") & 0xFFFFFF
    return Param(tag=tag, length=8, data=b"\x00" + value.to_bytes(3, "big"))


def _uint8_param(tag: Tag, value: int) -> Param:
    value = _check_range(value, 0xFF, "uint8 value")
    return Param(tag=tag, length=8, data=bytes((0, 0, 0, value)))


def _multi_uint32_param(tag: Tag, values: tuple[int, ...]) -> Param:
    checked = [_check_range(v, _UINT32_MAX, "uint32 value") for v in values]
    param = Param(tag=tag, data=struct.pack(f">{len(checked)}I", *checked))
    param.set_length()
    return param


def _multi_uint8_param(tag: Tag, values: tuple[int, ...]) -> Param:
    octets = bytes(_check_range(v, 0xFF, "uint8 value") for v in values)
    # Always extends to the next multiple of four, adding a full zero word
    # when the count is already aligned.
    size = len(octets) + (4 - len(octets) % 4)
    param = Param(tag=tag, data=octets.ljust(size, b"\x00"))
    param.set_length()
    return param


def _variable_param(tag: Tag, data: bytes) -> Param:
    param = Param(tag=tag, data=bytes(data))
    param.set_length()
    return param


def new_asp_identifier(asp_id: int) -> Param:
    """ASP Identifier parameter."""
    return _uint32_param(Tag.ASP_IDENTIFIER, asp_id)


def new_affected_point_code(*args: int) -> Param:
    """Affected Point Code parameter; each value includes its mask octet."""
    return _multi_uint32_param(Tag.AFFECTED_POINT_CODE, args)


def new_concerned_destination(destination: int) -> Param:
    """Concerned Destination parameter (24-bit point code)."""
    return _uint24_param(Tag.CONCERNED_DESTINATION, destination)


def new_congestion_indications(level: int) -> Param:
    """Congestion Indications parameter."""
    return _uint8_param(Tag.CONGESTION_INDICATIONS, level)


def new_correlation_id(correlation_id: int) -> Param:
    """Correlation Id parameter."""
    return _uint32_param(Tag.CORRELATION_ID, correlation_id)


def new_deregistration_status(status: int) -> Param:
    """Deregistration Status parameter."""
    return _uint32_param(Tag.DEREGISTRATION_STATUS, status)


def new_destination_point_code(dpc: int) -> Param:
    """Destination Point Code parameter (24-bit point code)."""
    return _uint24_param(Tag.DESTINATION_POINT_CODE, dpc)


def new_diagnostic_information(info: bytes) -> Param:
    """Diagnostic Information parameter."""
    return _variable_param(Tag.DIAGNOSTIC_INFORMATION, info)


def new_error_code(code: int) -> Param:
    """Error Code parameter."""
    return _uint32_param(Tag.ERROR_CODE, code)


def new_heartbeat_data(data: bytes) -> Param:
    """Heartbeat Data parameter."""
    return _variable_param(Tag.HEARTBEAT_DATA, data)


def new_info_string(info: str) -> Param:
    """INFO String parameter."""
    return _variable_param(
        Tag.INFO_STRING, info.encode("utf-8", errors="surrogateescape")
    )


def new_local_routing_key_identifier(rk_id: int) -> Param:
    """Local-RK-Identifier parameter."""
    return _uint32_param(Tag.LOCAL_ROUTING_KEY_IDENTIFIER, rk_id)


def new_network_appearance(network_appearance: int) -> Param:
    """Network Appearance parameter."""
    return _uint32_param(Tag.NETWORK_APPEARANCE, network_appearance)


def new_originating_point_code_list(*args: int) -> Param:
    """Originating Point Code List parameter; each value includes its mask octet."""
    return _multi_uint32_param(Tag.ORIGINATING_POINT_CODE_LIST, args)


def new_registration_status(status: int) -> Param:
    """Registration Status parameter."""
    return _uint32_param(Tag.REGISTRATION_STATUS, status)


def new_routing_context(*args: int) -> Param:
    """Routing Context parameter holding one or more contexts."""
    return _multi_uint32_param(Tag.ROUTING_CONTEXT, args)


def new_service_indicators(*args: int) -> Param:
    """Service Indicators parameter."""
    return _multi_uint8_param(Tag.SERVICE_INDICATORS, args)


def new_status(type_info: int) -> Param:
    """Status parameter; ``type_info`` holds the type in its upper 16 bits."""
    return _uint32_param(Tag.STATUS, type_info)


def new_traffic_mode_type(mode: int) -> Param:
    """Traffic Mode Type parameter."""
    return _uint32_param(Tag.TRAFFIC_MODE_TYPE, mode)


def new_user_cause(user: int, cause: int) -> Param:
    """User/Cause parameter: cause in the upper and user in the lower 16 bits."""
    user = _check_range(user, 0xFFFF, "user identity")
    cause = _check_range(cause, 0xFFFF, "unavailability cause")
    return _uint32_param(Tag.USER_CAUSE, cause << 16 | user)