import pytest

from m3ua.param import (
    InvalidLengthError,
    Param,
    Tag,
    TooShortToParseError,
    marshal_multi_params,
    new_param,
    parse_multi_params,
    parse_param,
)

CASES = [
    ("AspIdentifier", Tag.ASP_IDENTIFIER, bytes([0, 0, 0, 1]),
     bytes([0x00, 0x11, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("TrafficModeType", Tag.TRAFFIC_MODE_TYPE, bytes([0, 0, 0, 1]),
     bytes([0x00, 0x0B, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("NetworkAppearance", Tag.NETWORK_APPEARANCE, bytes([0, 0, 0, 1]),
     bytes([0x02, 0x00, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("RoutingContext-single", Tag.ROUTING_CONTEXT, bytes([0, 0, 0, 1]),
     bytes([0x00, 0x06, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("RoutingContext-multiple", Tag.ROUTING_CONTEXT,
     bytes([0, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 3]),
     bytes([0x00, 0x06, 0x00, 0x10, 0, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 3])),
    ("HeartbeatData", Tag.HEARTBEAT_DATA, b"some information",
     bytes([0x00, 0x09, 0x00, 0x14]) + b"some information"),
    ("ErrorCode", Tag.ERROR_CODE, bytes([0, 0, 0, 1]),
     bytes([0x00, 0x0C, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("UserCause", Tag.USER_CAUSE, bytes([0, 1, 0, 0]),
     bytes([0x02, 0x04, 0x00, 0x08, 0x00, 0x01, 0x00, 0x00])),
    ("Status", Tag.STATUS, bytes([0, 1, 0, 3]),
     bytes([0x00, 0x0D, 0x00, 0x08, 0x00, 0x01, 0x00, 0x03])),
    ("AffectedPointCode", Tag.AFFECTED_POINT_CODE,
     bytes([0, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 3]),
     bytes([0x00, 0x12, 0x00, 0x10, 0, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 3])),
    ("ConcernedDestination", Tag.CONCERNED_DESTINATION, bytes([0, 0, 0, 1]),
     bytes([0x02, 0x06, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("CorrelationID", Tag.CORRELATION_ID, bytes([0, 0, 0, 1]),
     bytes([0x00, 0x13, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("InfoString", Tag.INFO_STRING, b"some information",
     bytes([0x00, 0x04, 0x00, 0x14]) + b"some information"),
    ("DiagnosticInformation", Tag.DIAGNOSTIC_INFORMATION, b"some information",
     bytes([0x00, 0x07, 0x00, 0x14]) + b"some information"),
    ("CongestionIndications", Tag.CONGESTION_INDICATIONS, bytes([0, 0, 0, 1]),
     bytes([0x02, 0x05, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("LocalRoutingKeyIdentifier", Tag.LOCAL_ROUTING_KEY_IDENTIFIER,
     bytes([0, 0, 0, 1]),
     bytes([0x02, 0x0A, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("DestinationPointCode", Tag.DESTINATION_POINT_CODE, bytes([0, 0, 0, 1]),
     bytes([0x02, 0x0B, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("OriginatingPointCodeList", Tag.ORIGINATING_POINT_CODE_LIST,
     bytes([0, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 3]),
     bytes([0x02, 0x0E, 0x00, 0x10, 0, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 3])),
    ("ServiceIndicators", Tag.SERVICE_INDICATORS, bytes([1, 2, 3, 0]),
     bytes([0x02, 0x0C, 0x00, 0x08, 0x01, 0x02, 0x03, 0x00])),
    ("RegistrationStatus", Tag.REGISTRATION_STATUS, bytes([0, 0, 0, 1]),
     bytes([0x02, 0x12, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("DeregistrationStatus", Tag.DEREGISTRATION_STATUS, bytes([0, 0, 0, 1]),
     bytes([0x02, 0x13, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01])),
    ("Generic", 1, bytes([0xDE, 0xAD, 0xBE, 0xEF]),
     bytes([0x00, 0x01, 0x00, 0x08, 0xDE, 0xAD, 0xBE, 0xEF])),
    ("ProtocolData", Tag.PROTOCOL_DATA,
     bytes([0, 0, 0, 1, 0, 0, 0, 2, 3, 1, 0, 1, 0xDE, 0xAD, 0xBE, 0xEF]),
     bytes([0x02, 0x10, 0x00, 0x14, 0, 0, 0, 1, 0, 0, 0, 2, 3, 1, 0, 1,
            0xDE, 0xAD, 0xBE, 0xEF])),
]


@pytest.mark.parametrize("name,tag,value,serialized", CASES, ids=[c[0] for c in CASES])
def test_encode(name, tag, value, serialized):
    param = new_param(tag, value)
    assert param.marshal() == serialized
    assert param.marshal_len() == len(serialized)


@pytest.mark.parametrize("name,tag,value,serialized", CASES, ids=[c[0] for c in CASES])
def test_decode(name, tag, value, serialized):
    assert parse_param(serialized) == new_param(tag, value)


def test_parse_multi_params_rc_generic():
    serialized = bytes([
        0x00, 0x06, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x00, 0x01, 0x00, 0x08, 0xDE, 0xAD, 0xBE, 0xEF,
    ])
    assert parse_multi_params(serialized) == [
        new_param(Tag.ROUTING_CONTEXT, bytes([0, 0, 0, 1])),
        new_param(1, bytes([0xDE, 0xAD, 0xBE, 0xEF])),
    ]


@pytest.mark.parametrize(
    "data,error",
    [
        (bytes([0x00]), TooShortToParseError),
        (bytes([0x00, 0x00]), TooShortToParseError),
        (bytes([0x00, 0x00, 0x00]), TooShortToParseError),
        (bytes([0x00, 0x00, 0x00, 0x00]), InvalidLengthError),
    ],
)
def test_parse_malformed(data, error):
    with pytest.raises(error):
        parse_param(data)
    with pytest.raises(error):
        parse_multi_params(data)


def test_length_beyond_input_is_rejected():
    with pytest.raises(InvalidLengthError):
        parse_param(bytes([0x00, 0x06, 0x00, 0x10, 0, 0, 0, 1]))


def test_padding_on_encode():
    param = new_param(Tag.HEARTBEAT_DATA, b"\x01\x02\x03\x04\x05")
    assert param.length == 9
    assert param.padding() == 3
    assert param.marshal_len() == 12
    assert param.marshal() == bytes([0x00, 0x09, 0x00, 0x09, 1, 2, 3, 4, 5, 0, 0, 0])


def test_parse_multi_params_skips_padding():
    first = new_param(Tag.HEARTBEAT_DATA, b"\x01\x02\x03\x04\x05")
    second = new_param(Tag.ASP_IDENTIFIER, bytes([0, 0, 0, 7]))
    encoded = marshal_multi_params([first, second])
    assert len(encoded) == 20
    assert parse_multi_params(encoded) == [first, second]


def test_marshal_multi_params_concatenates():
    params = [
        new_param(Tag.ROUTING_CONTEXT, bytes([0, 0, 0, 1])),
        new_param(1, bytes([0xDE, 0xAD, 0xBE, 0xEF])),
    ]
    assert marshal_multi_params(params) == bytes([
        0x00, 0x06, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x00, 0x01, 0x00, 0x08, 0xDE, 0xAD, 0xBE, 0xEF,
    ])


def test_marshal_multi_params_empty():
    assert marshal_multi_params([]) == b""
    assert parse_multi_params(b"") == []


def test_set_length_updates_field():
    param = Param(tag=Tag.INFO_STRING, length=0, data=b"abc")
    param.set_length()
    assert param.length == 7


def test_uint32_accessors():
    one = bytes([0, 0, 0, 1])
    assert parse_param(CASES[0][3]).asp_identifier() == 1
    assert new_param(Tag.TRAFFIC_MODE_TYPE, one).traffic_mode_type() == 1
    assert new_param(Tag.NETWORK_APPEARANCE, one).network_appearance() == 1
    assert new_param(Tag.ERROR_CODE, one).error_code() == 1
    assert new_param(Tag.CORRELATION_ID, one).correlation_id() == 1
    assert new_param(Tag.LOCAL_ROUTING_KEY_IDENTIFIER, one).local_routing_key_identifier() == 1
    assert new_param(Tag.REGISTRATION_STATUS, one).registration_status() == 1
    assert new_param(Tag.DEREGISTRATION_STATUS, one).deregistration_status() == 1


def test_masked_accessors():
    assert new_param(Tag.CONCERNED_DESTINATION, bytes([0xFF, 0, 0, 5])).concerned_destination() == 5
    assert new_param(Tag.DESTINATION_POINT_CODE, bytes([0xAA, 0x01, 0x02, 0x03])).destination_point_code() == 0x010203
    assert new_param(Tag.CONGESTION_INDICATIONS, bytes([0, 0, 1, 6])).congestion_level() == 6


def test_status_accessors():
    param = parse_param(bytes([0x00, 0x0D, 0x00, 0x08, 0x00, 0x01, 0x00, 0x03]))
    assert param.status() == 0x00010003
    assert param.status_type() == 1
    assert param.status_info() == 3


def test_user_cause_accessors():
    param = parse_param(bytes([0x02, 0x04, 0x00, 0x08, 0x00, 0x01, 0x00, 0x00]))
    assert param.user_cause() == 0x00010000
    assert param.user_identity() == 0
    assert param.unavailability_cause() == 1


def test_multi_value_accessors():
    data = bytes([0, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 3])
    rc = new_param(Tag.ROUTING_CONTEXT, data)
    assert rc.routing_contexts() == [1, 2, 3]
    assert rc.routing_context() == 1
    apc = new_param(Tag.AFFECTED_POINT_CODE, data)
    assert apc.affected_point_codes() == [1, 2, 3]
    assert apc.affected_point_code() == 1
    assert new_param(Tag.ORIGINATING_POINT_CODE_LIST, data).originating_point_code_list() == [1, 2, 3]


def test_routing_context_without_values_raises():
    with pytest.raises(InvalidLengthError):
        new_param(Tag.ROUTING_CONTEXT, b"").routing_context()


def test_affected_point_code_misaligned_raises():
    with pytest.raises(InvalidLengthError):
        new_param(Tag.AFFECTED_POINT_CODE, b"\x00\x01").affected_point_code()


def test_byte_accessors():
    assert new_param(Tag.INFO_STRING, b"deadbeef").info_string() == "deadbeef"
    assert new_param(Tag.HEARTBEAT_DATA, b"\xde\xad").heartbeat_data() == b"\xde\xad"
    assert new_param(Tag.DIAGNOSTIC_INFORMATION, b"\xbe\xef").diagnostic_information() == b"\xbe\xef"
    assert parse_param(bytes([0x02, 0x0C, 0x00, 0x08, 1, 2, 3, 0])).service_indicators() == b"\x01\x02\x03\x00"


def test_accessors_on_wrong_tag():
    param = new_param(Tag.ASP_IDENTIFIER, bytes([0, 0, 0, 1]))
    assert param.error_code() == 0
    assert param.routing_context() == 0
    assert param.routing_contexts() == []
    assert param.affected_point_code() == 0
    assert param.info_string() == ""
    assert param.heartbeat_data() == b""
    assert param.status_type() == 0
    assert param.user_identity() == 0


def test_uint32_accessor_with_wrong_size_is_zero():
    assert new_param(Tag.ASP_IDENTIFIER, bytes([0, 0, 1])).asp_identifier() == 0


def test_new_param_masks_tag():
    assert new_param(0x10001, b"").tag == 1


def test_str_format():
    param = new_param(1, bytes([0xDE, 0xAD, 0xBE, 0xEF]))
    assert str(param) == "{Tag: 1, Length: 8, Data: deadbeef}"