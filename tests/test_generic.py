import pytest

from m3ua.builders import new_network_appearance, new_routing_context
from m3ua.generic import new_generic, parse_generic
from m3ua.header import MessageTooShortError
from m3ua.param import InvalidLengthError, new_param

SERIALIZED = bytes([
    0x01, 0x00, 0x7F, 0x7F, 0x00, 0x00, 0x00, 0x1C,
    0x02, 0x00, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
    0x00, 0x06, 0x00, 0x0C, 0x00, 0x00, 0x00, 0x01,
    0x00, 0x00, 0x00, 0xFF,
])


def _structured():
    return new_generic(
        1, 127, 127, new_network_appearance(1), new_routing_context(1, 255)
    )


def test_decode():
    decoded = parse_generic(SERIALIZED)
    decoded.header.payload = b""
    assert decoded == _structured()


def test_encode():
    assert _structured().marshal() == SERIALIZED


def test_len():
    assert _structured().marshal_len() == len(SERIALIZED)


def test_interface():
    decoded = parse_generic(SERIALIZED)
    expected = _structured()
    assert decoded.message_class == expected.message_class == 127
    assert decoded.message_type == expected.message_type == 127
    assert decoded.message_class_name == expected.message_class_name == "Unknown"
    assert decoded.message_type_name == expected.message_type_name == "Unknown"
    assert decoded.version == 1


def test_decoded_params():
    decoded = parse_generic(SERIALIZED)
    assert decoded.params[0].network_appearance() == 1
    assert decoded.params[1].routing_contexts() == [1, 255]


def test_accepts_any_tag():
    msg = new_generic(1, 5, 9, new_param(1, b"\xde\xad\xbe\xef"))
    decoded = parse_generic(msg.marshal())
    assert decoded.params == [new_param(1, b"\xde\xad\xbe\xef")]
    assert decoded.header.length == 16


def test_too_short():
    with pytest.raises(MessageTooShortError):
        parse_generic(bytes(7))


def test_bad_param_length():
    data = bytes([0x01, 0x00, 0x7F, 0x7F, 0x00, 0x00, 0x00, 0x0C,
                  0x00, 0x01, 0x00, 0x00])
    with pytest.raises(InvalidLengthError):
        parse_generic(data)


def test_str():
    msg = new_generic(1, 127, 127, new_network_appearance(1))
    assert str(msg) == (
        "{Header: {Version: 1, Reserved: 0x0, Class: 127, Type: 127, Length: 16, "
        "Payload: }, Params: [{Tag: 512, Length: 8, Data: 00000001}]}"
    )


def test_empty_generic_length():
    msg = new_generic(1, 0, 0)
    assert msg.marshal() == bytes([0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x08])