"""Encoding and decoding of M3UA parameters, headers, Management and ASPSM messages, and signalling point codes."""

__version__ = "0.1.0"