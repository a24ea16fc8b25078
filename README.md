# m3ua

Build, serialize and parse M3UA messages and parameters (RFC 4666) in pure
Python, with no dependencies outside the standard library.

## What is included

| Module | Contents |
| --- | --- |
| `m3ua.param` | `Param`, the single tag-length-value type used for every parameter; `Tag`; `new_param`, `parse_param`, `parse_multi_params`, `marshal_multi_params`; the `ParamError` family of exceptions |
| `m3ua.builders` | one constructor per parameter: `new_asp_identifier`, `new_routing_context`, `new_status`, `new_user_cause`, `new_service_indicators`, ... |
| `m3ua.codes` | code points as `IntEnum`s: `ErrorCode`, `StatusType`, `StatusInfo`, `TrafficMode`, `UserIdentity`, `UnavailabilityCause`, `RegistrationStatusCode`, `DeregistrationStatusCode`, `ServiceIndicator` |
| `m3ua.payloads` | structured values of Protocol Data, Registration Result, Deregistration Result and Routing Key |
| `m3ua.header` | the common header (`Header`, `new_header`, `parse_header`), message class and type enums, the `Message` base class and the `MessageError` family of exceptions |
| `m3ua.generic` | `Generic`, a message of any class and type with any parameter list |
| `m3ua.aspsm` | `Heartbeat` and `HeartbeatAck` |
| `m3ua.management` | `ErrorMessage` and `Notify` |
| `m3ua.pointcode` | signalling point code conversion between variants such as `3-8-3` and `4-3-7` |

## Installation

```
pip install .
```

## Building and parsing a message

```python
from m3ua.builders import new_asp_identifier, new_info_string, new_routing_context, new_status
from m3ua.codes import StatusInfo
from m3ua.management import new_notify, parse_notify

notify = new_notify(
    new_status(StatusInfo.AS_STATE_ACTIVE),
    new_asp_identifier(2),
    new_routing_context(1),
    new_info_string("deadbeef"),
)
wire = notify.marshal()

decoded = parse_notify(wire)
decoded.message_type_name        # "Notify"
decoded.status.status_info()     # 3
decoded.asp_identifier.asp_identifier()  # 2
```

Every constructor (`new_notify`, `new_error`, `new_heartbeat`,
`new_heartbeat_ack`, `new_generic`) sets the Length fields. If you change a
message afterwards, call `set_length()` before `marshal()`: `marshal()` writes
the header's Length field as it stands.

Any parameter of a typed message may be `None` and is then left out. A class
and type without a typed message can still be built and read with
`m3ua.generic.new_generic` and `m3ua.generic.parse_generic`:

```python
from m3ua.builders import new_network_appearance, new_routing_context
from m3ua.generic import new_generic, parse_generic

message = new_generic(1, 127, 127, new_network_appearance(1), new_routing_context(1, 255))
parse_generic(message.marshal()).params[1].routing_contexts()   # [1, 255]
```

## Errors

Failures raise exceptions:

- `m3ua.header.MessageTooShortError`: fewer than eight bytes to decode.
- `m3ua.header.InvalidParameterError`: a typed message holds a parameter it
  does not allow.
- `m3ua.param.TooShortToParseError`, `InvalidLengthError`, `InvalidTypeError`:
  malformed parameters, or a payload read from a parameter with the wrong tag.
  All derive from `ParamError`.
- `ValueError`: a value out of range for its field.

## Parameters and payloads

```python
from m3ua.param import parse_multi_params
from m3ua.payloads import new_protocol_data, protocol_data_from

pd = new_protocol_data(1, 2, 3, 1, 0, 1, b"\xde\xad\xbe\xef")
payload = protocol_data_from(pd)
payload.destination_point_code   # 2
parse_multi_params(pd.marshal())[0] == pd   # True
```

## Point codes

```python
from m3ua.pointcode import Variant, new_point_code, new_point_code_from

pc = new_point_code(1234, Variant.V383)
str(pc)                        # "0-154-2"
pc.convert_to(Variant.V437)    # "1-1-82"
new_point_code_from("0-154-2", Variant.V383).raw   # 1234
```

## What the package does not do

- It has no single entry point that reads raw bytes and returns the right
  message type; you call the `parse_*` function of the message you expect, or
  `parse_generic`.
- The SSNM messages (Destination User Part Unavailable, Signalling Congestion
  and the rest), Payload Data, the ASP Up/Down/Active/Inactive messages and the
  routing key management messages have no typed classes; build or read them
  with `Generic`.
- It does no networking: there is no SCTP association, no ASP state machine
  and no heartbeat handling. It only encodes and decodes.

## Running the tests

```
pip install .[test]
pytest
```