"""SMPP PDU header: command ids, status codes and binary encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

HEADER_LEN = 16
MAX_SIZE = 4096

_HEADER_FORMAT = ">IIII"


class PduID(IntEnum):
    """Command ids of SMPP 3.4 PDUs."""

    GENERIC_NACK = 0x80000000
    BIND_RECEIVER = 0x00000001
    BIND_RECEIVER_RESP = 0x80000001
    BIND_TRANSMITTER = 0x00000002
    BIND_TRANSMITTER_RESP = 0x80000002
    QUERY_SM = 0x00000003
    QUERY_SM_RESP = 0x80000003
    SUBMIT_SM = 0x00000004
    SUBMIT_SM_RESP = 0x80000004
    DELIVER_SM = 0x00000005
    DELIVER_SM_RESP = 0x80000005
    UNBIND = 0x00000006
    UNBIND_RESP = 0x80000006
    REPLACE_SM = 0x00000007
    REPLACE_SM_RESP = 0x80000007
    CANCEL_SM = 0x00000008
    CANCEL_SM_RESP = 0x80000008
    BIND_TRANSCEIVER = 0x00000009
    BIND_TRANSCEIVER_RESP = 0x80000009
    OUTBIND = 0x0000000B
    ENQUIRE_LINK = 0x00000015
    ENQUIRE_LINK_RESP = 0x80000015
    SUBMIT_MULTI = 0x00000021
    SUBMIT_MULTI_RESP = 0x80000021
    ALERT_NOTIFICATION = 0x00000102
    DATA_SM = 0x00000103
    DATA_SM_RESP = 0x80000103


_ID_NAMES: dict[int, str] = {
    PduID.GENERIC_NACK: "GenericNACK",
    PduID.BIND_RECEIVER: "BindReceiver",
    PduID.BIND_RECEIVER_RESP: "BindReceiverResp",
    PduID.BIND_TRANSMITTER: "BindTransmitter",
    PduID.BIND_TRANSMITTER_RESP: "BindTransmitterResp",
    PduID.QUERY_SM: "QuerySM",
    PduID.QUERY_SM_RESP: "QuerySMResp",
    PduID.SUBMIT_SM: "SubmitSM",
    PduID.SUBMIT_SM_RESP: "SubmitSMResp",
    PduID.DELIVER_SM: "DeliverSM",
    PduID.DELIVER_SM_RESP: "DeliverSMResp",
    PduID.UNBIND: "Unbind",
    PduID.UNBIND_RESP: "UnbindResp",
    PduID.REPLACE_SM: "ReplaceSM",
    PduID.REPLACE_SM_RESP: "ReplaceSMResp",
    PduID.CANCEL_SM: "CancelSM",
    PduID.CANCEL_SM_RESP: "CancelSMResp",
    PduID.BIND_TRANSCEIVER: "BindTransceiver",
    PduID.BIND_TRANSCEIVER_RESP: "BindTransceiverResp",
    PduID.OUTBIND: "Outbind",
    PduID.ENQUIRE_LINK: "EnquireLink",
    PduID.ENQUIRE_LINK_RESP: "EnquireLinkResp",
    PduID.SUBMIT_MULTI: "SubmitMulti",
    PduID.SUBMIT_MULTI_RESP: "SubmitMultiResp",
    PduID.ALERT_NOTIFICATION: "AlertNotification",
    PduID.DATA_SM: "DataSM",
    PduID.DATA_SM_RESP: "DataSMResp",
}

_ESME_STATUS: dict[int, str] = {
    0x00000000: "OK",
    0x00000001: "invalid message length",
    0x00000002: "invalid command length",
    0x00000003: "invalid command id",
    0x00000004: "incorrect bind status for given command",
    0x00000005: "already in bound state",
    0x00000006: "invalid priority flag",
    0x00000007: "invalid registered delivery flag",
    0x00000008: "system error",
    0x0000000A: "invalid source address",
    0x0000000B: "invalid destination address",
    0x0000000C: "invalid message id",
    0x0000000D: "bind failed",
    0x0000000E: "invalid password",
    0x0000000F: "invalid system id",
    0x00000011: "cancelsm failed",
    0x00000013: "replacesm failed",
    0x00000014: "message queue full",
    0x00000015: "invalid service type",
    0x00000033: "invalid number of destinations",
    0x00000034: "invalid distribution list name",
    0x00000040: "invalid destination flag",
    0x00000042: "invalid 'submit with replace' request",
    0x00000043: "invalid esm class field data",
    0x00000044: "cannot submit to distribution list",
    0x00000045: "submitsm or submitmulti failed",
    0x00000048: "invalid source address ton",
    0x00000049: "invalid source address npi",
    0x00000050: "invalid destination address ton",
    0x00000051: "invalid destination address npi",
    0x00000053: "invalid system type field",
    0x00000054: "invalid replace_if_present flag",
    0x00000055: "invalid number of messages",
    0x00000058: "throttling error",
    0x00000061: "invalid scheduled delivery time",
    0x00000062: "invalid message validity period (expiry time)",
    0x00000063: "predefined message invalid or not found",
    0x00000064: "esme receiver temporary app error code",
    0x00000065: "esme receiver permanent app error code",
    0x00000066: "esme receiver reject message error code",
    0x00000067: "querysm request failed",
    0x000000C0: "error in the optional part of the pdu body",
    0x000000C1: "optional parameter not allowed",
    0x000000C2: "invalid parameter length",
    0x000000C3: "expected optional parameter missing",
    0x000000C4: "invalid optional parameter value",
    0x000000FE: "delivery failure (used for datasmresp)",
    0x000000FF: "unknown error",
}


def id_group(pdu_id: int) -> int:
    """Return the group of a command id: a request and its response share one."""
    return int(pdu_id) & 0xFFFF


def id_name(pdu_id: int) -> str:
    """Return the name of a command id, or an empty string if unknown."""
    return _ID_NAMES.get(int(pdu_id), "")


def status_message(status: int) -> str:
    """Return the description of an ESME command status."""
    message = _ESME_STATUS.get(int(status))
    if message is None:
        return f"unknown status: {int(status)}"
    return message


class StatusError(Exception):
    """A PDU response carried a non-zero command status."""

    def __init__(self, status: int) -> None:
        self.status = int(status)
        super().__init__(status_message(self.status))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising EOFError if the stream ends first."""
    chunks = bytearray()
    while len(chunks) < size:
        chunk = stream.read(size - len(chunks))
        if not chunk:
            if chunks:
                raise EOFError(f"unexpected end of stream: {len(chunks)} < {size}")
            raise EOFError("end of stream")
        chunks.extend(chunk)
    return bytes(chunks)


@dataclass
class Header:
    """A PDU header: total length, command id, command status and sequence."""

    length: int = 0
    pdu_id: int = 0
    status: int = 0
    seq: int = 0

    def __post_init__(self) -> None:
        try:
            self.pdu_id = PduID(self.pdu_id)
        except ValueError:
            self.pdu_id = int(self.pdu_id)

    def serialize(self) -> bytes:
        """Return the binary form of the header."""
        return struct.pack(
            _HEADER_FORMAT,
            self.length,
            int(self.pdu_id),
            int(self.status),
            self.seq,
        )

    def write_to(self, stream: BinaryIO) -> None:
        """Write the binary form of the header to ``stream``."""
        stream.write(self.serialize())

    def key(self) -> str:
        """Return a key matching a request with its response."""
        return f"{id_group(self.pdu_id):o}-{self.seq}"


def decode_header(stream: BinaryIO) -> Header:
    """Read and decode a PDU header from ``stream``."""
    data = _read_exact(stream, HEADER_LEN)
    length, pdu_id, status, seq = struct.unpack(_HEADER_FORMAT, data)
    if length < HEADER_LEN:
        raise ValueError(f"PDU too small: {length} < {HEADER_LEN}")
    if length > MAX_SIZE:
        raise ValueError(f"PDU too large: {length} > {MAX_SIZE}")
    return Header(length=length, pdu_id=pdu_id, status=status, seq=seq)