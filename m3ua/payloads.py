"""Structured payloads of the nested and compound M3UA parameters.

Protocol Data carries an MTP3 user message with its routing label, and
Registration Result, Deregistration Result and Routing Key each carry a
sequence of other parameters.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Optional

from m3ua.param import (
    InvalidLengthError,
    InvalidTypeError,
    Param,
    Tag,
    TooShortToParseError,
    parse_multi_params,
)

_LABEL = struct.Struct(">IIBBBB")


def _nested_param(tag: Tag, *params: Optional[Param]) -> Param:
    """Build a parameter whose value is the encoding of ``params``."""
    param = Param(
        tag=tag, data=b"".join(p.marshal() for p in params if p is not None)
    )
    param.set_length()
    return param


def _expect_tag(param: Param, tag: Tag) -> None:
    if param.tag != tag:
        raise InvalidTypeError()


# --- Protocol Data -------------------------------------------------------


@dataclass
class ProtocolDataPayload:
    """Value of the Protocol Data parameter: routing label plus user data."""

    originating_point_code: int
    destination_point_code: int
    service_indicator: int
    network_indicator: int
    message_priority: int
    signaling_link_selection: int
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    def __str__(self) -> str:
        return (
            f"{{OriginatingPointCode: {self.originating_point_code}, "
            f"DestinationPointCode: {self.destination_point_code}, "
            f"ServiceIndicator: {self.service_indicator}, "
            f"NetworkIndicator: {self.network_indicator}, "
            f"MessagePriority: {self.message_priority}, "
            f"SignalingLinkSelection: {self.signaling_link_selection}, "
            f"Data: {self.data.hex()}}}"
        )

    def marshal(self) -> bytes:
        """Encode the payload (without any parameter header)."""
        try:
            label = _LABEL.pack(
                self.originating_point_code,
                self.destination_point_code,
                self.service_indicator,
                self.network_indicator,
                self.message_priority,
                self.signaling_link_selection,
            )
        except struct.error as exc:
            raise ValueError(f"protocol data field out of range: {exc}") from exc
        return label + self.data

    def marshal_len(self) -> int:
        """Length of the encoded payload."""
        return _LABEL.size + len(self.data)


def parse_protocol_data_payload(data: bytes) -> ProtocolDataPayload:
    """Decode the value of a Protocol Data parameter."""
    if len(data) < _LABEL.size:
        raise TooShortToParseError()
    opc, dpc, si, ni, mp, sls = _LABEL.unpack_from(data)
    return ProtocolDataPayload(opc, dpc, si, ni, mp, sls, bytes(data[_LABEL.size:]))


def new_protocol_data(
    opc: int, dpc: int, si: int, ni: int, mp: int, sls: int, data: bytes
) -> Param:
    """Protocol Data parameter built from its fields."""
    payload = ProtocolDataPayload(opc, dpc, si, ni, mp, sls, data)
    param = Param(tag=Tag.PROTOCOL_DATA, data=payload.marshal())
    param.set_length()
    return param


def protocol_data_from(param: Param) -> ProtocolDataPayload:
    """Decode the payload of a Protocol Data parameter."""
    _expect_tag(param, Tag.PROTOCOL_DATA)
    return parse_protocol_data_payload(param.data)


# --- Registration Result -------------------------------------------------


@dataclass
class RegistrationResultPayload:
    """Value of the Registration Result parameter."""

    local_routing_key_identifier: Optional[Param] = None
    registration_status: Optional[Param] = None
    routing_context: Optional[Param] = None


def new_registration_result(payload: RegistrationResultPayload) -> Param:
    """Registration Result parameter holding ``payload``."""
    return _nested_param(
        Tag.REGISTRATION_RESULT,
        payload.local_routing_key_identifier,
        payload.registration_status,
        payload.routing_context,
    )


def parse_registration_result_payload(data: bytes) -> RegistrationResultPayload:
    """Decode exactly three parameters, taken in order."""
    params = parse_multi_params(data)
    if len(params) != 3:
        raise InvalidLengthError()
    rk_id, status, context = params
    return RegistrationResultPayload(rk_id, status, context)


def registration_result_from(param: Param) -> RegistrationResultPayload:
    """Decode the payload of a Registration Result parameter."""
    _expect_tag(param, Tag.REGISTRATION_RESULT)
    return parse_registration_result_payload(param.data)


# --- Deregistration Result -----------------------------------------------


@dataclass
class DeregResultPayload:
    """Value of the Deregistration Result parameter."""

    routing_context: Optional[Param] = None
    deregistration_status: Optional[Param] = None


def new_deregistration_result(payload: DeregResultPayload) -> Param:
    """Deregistration Result parameter holding ``payload``."""
    return _nested_param(
        Tag.DEREGISTRATION_RESULT,
        payload.routing_context,
        payload.deregistration_status,
    )


def parse_dereg_result_payload(data: bytes) -> DeregResultPayload:
    """Decode exactly two parameters; unknown tags are ignored."""
    params = parse_multi_params(data)
    if len(params) != 2:
        raise InvalidLengthError()
    payload = DeregResultPayload()
    for param in params:
        if param.tag == Tag.ROUTING_CONTEXT:
            payload.routing_context = param
        elif param.tag == Tag.DEREGISTRATION_STATUS:
            payload.deregistration_status = param
    return payload


def deregistration_result_from(param: Param) -> DeregResultPayload:
    """Decode the payload of a Deregistration Result parameter."""
    _expect_tag(param, Tag.DEREGISTRATION_RESULT)
    return parse_dereg_result_payload(param.data)


# --- Routing Key ---------------------------------------------------------


@dataclass
class RoutingKeyPayload:
    """Value of the Routing Key parameter; most members are optional."""

    local_routing_key_identifier: Optional[Param] = None
    routing_context: Optional[Param] = None
    traffic_mode_type: Optional[Param] = None
    destination_point_code: Optional[Param] = None
    network_appearance: Optional[Param] = None
    service_indicators: Optional[Param] = None
    originating_point_code_list: Optional[Param] = None


_ROUTING_KEY_FIELDS = {
    Tag.LOCAL_ROUTING_KEY_IDENTIFIER: "local_routing_key_identifier",
    Tag.ROUTING_CONTEXT: "routing_context",
    Tag.TRAFFIC_MODE_TYPE: "traffic_mode_type",
    Tag.DESTINATION_POINT_CODE: "destination_point_code",
    Tag.NETWORK_APPEARANCE: "network_appearance",
    Tag.SERVICE_INDICATORS: "service_indicators",
    Tag.ORIGINATING_POINT_CODE_LIST: "originating_point_code_list",
}


def new_routing_key(payload: RoutingKeyPayload) -> Param:
    """Routing Key parameter holding the members present in ``payload``."""
    return _nested_param(
        Tag.ROUTING_KEY,
        payload.local_routing_key_identifier,
        payload.routing_context,
        payload.traffic_mode_type,
        payload.destination_point_code,
        payload.network_appearance,
        payload.service_indicators,
        payload.originating_point_code_list,
    )


def parse_routing_key_payload(data: bytes) -> RoutingKeyPayload:
    """Decode at least three parameters, each with a Routing Key member tag."""
    params = parse_multi_params(data)
    if len(params) < 3:
        raise InvalidLengthError()
    payload = RoutingKeyPayload()
    for param in params:
        try:
            name = _ROUTING_KEY_FIELDS[Tag(param.tag)]
        except (ValueError, KeyError):
            raise InvalidTypeError() from None
        setattr(payload, name, param)
    return payload


def routing_key_from(param: Param) -> RoutingKeyPayload:
    """Decode the payload of a Routing Key parameter."""
    _expect_tag(param, Tag.ROUTING_KEY)
    return parse_routing_key_payload(param.data)