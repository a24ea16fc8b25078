"""Generic M3UA message carrying any class, type and parameters."""

from __future__ import annotations

from dataclasses import dataclass, field

from m3ua.header import Header, Message, parse_header
from m3ua.param import Param, parse_multi_params


@dataclass
class Generic(Message):
    """A message of any class and type holding an arbitrary parameter list.

    Used for class/type combinations that are not otherwise understood.
    """

    params: list[Param] = field(default_factory=list)

    def _default_header(self) -> Header:
        return Header()

    def _params(self) -> list[Param]:
        return list(self.params)

    @classmethod
    def _from_bytes(cls, data: bytes) -> "Generic":
        header = parse_header(data)
        return cls(header=header, params=parse_multi_params(header.payload))

    def __str__(self) -> str:
        params = " ".join(str(param) for param in self.params)
        return f"{{Header: {self.header}, Params: [{params}]}}"

    @property
    def message_class(self) -> int:
        return self.header.msg_class

    @property
    def message_type(self) -> int:
        return self.header.msg_type

    def marshal(self) -> bytes:
        """Encode the message."""
        return super().marshal()

    def marshal_len(self) -> int:
        """Length of the encoded message."""
        return super().marshal_len()

    def set_length(self) -> None:
        """Set the Length fields of every parameter and of the header."""
        super().set_length()


def new_generic(version: int, msg_class: int, msg_type: int, *args: Param) -> Generic:
    """Create a generic message with the given header values and parameters."""
    message = Generic(
        header=Header(version=version, msg_class=msg_class, msg_type=msg_type),
        params=list(args),
    )
    message.set_length()
    return message


def parse_generic(data: bytes) -> Generic:
    """Decode ``data`` as a generic message, keeping every parameter."""
    return Generic._from_bytes(data)