"""SMPP 3.4 building blocks: GSM 7-bit text, PDU headers, connection status and connections."""

__version__ = "0.1.0"

__all__ = ["conn", "gsm7", "header", "status"]