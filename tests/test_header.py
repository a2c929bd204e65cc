import io

import pytest

from smppkit.header import (
    HEADER_LEN,
    MAX_SIZE,
    Header,
    PduID,
    StatusError,
    decode_header,
    id_group,
    id_name,
    status_message,
)

WANT = bytes(
    [
        0x00, 0x00, 0x00, 0x10,
        0x80, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x01,
        0x00, 0x00, 0x00, 0x0D,
    ]
)


def test_header_decode_and_serialize():
    h = decode_header(io.BytesIO(WANT))
    assert h.length == 16
    assert h.pdu_id == PduID.GENERIC_NACK
    assert h.status == 1
    assert h.seq == 13
    assert h.serialize() == WANT
    out = io.BytesIO()
    h.write_to(out)
    assert out.getvalue() == WANT


def test_status_messages():
    h = decode_header(io.BytesIO(WANT))
    assert status_message(h.status) == "invalid message length"
    h.status = 0x2000
    assert status_message(h.status) == "unknown status: 8192"


def test_status_error():
    err = StatusError(1)
    assert err.status == 1
    assert str(err) == "invalid message length"
    assert str(StatusError(0x2000)) == "unknown status: 8192"


def test_decode_header_empty():
    with pytest.raises(EOFError):
        decode_header(io.BytesIO(b""))


def test_decode_header_short_data():
    with pytest.raises(EOFError):
        decode_header(io.BytesIO(WANT[:10]))


def test_decode_header_bad_lengths():
    data = bytearray(16)
    data[3] = 0x01
    with pytest.raises(ValueError, match="too small"):
        decode_header(io.BytesIO(bytes(data)))
    data[2] = 0x20
    with pytest.raises(ValueError, match="too large"):
        decode_header(io.BytesIO(bytes(data)))


@pytest.mark.parametrize(
    "pdu_id, group",
    [
        (PduID.GENERIC_NACK, 0x00),
        (PduID.BIND_RECEIVER, 0x01),
        (PduID.BIND_RECEIVER_RESP, 0x01),
        (PduID.BIND_TRANSMITTER, 0x02),
        (PduID.BIND_TRANSMITTER_RESP, 0x02),
        (PduID.QUERY_SM, 0x03),
        (PduID.QUERY_SM_RESP, 0x03),
        (PduID.SUBMIT_SM, 0x0004),
        (PduID.SUBMIT_SM_RESP, 0x0004),
        (PduID.DELIVER_SM, 0x05),
        (PduID.DELIVER_SM_RESP, 0x05),
        (PduID.UNBIND, 0x06),
        (PduID.UNBIND_RESP, 0x06),
        (PduID.REPLACE_SM, 0x07),
        (PduID.REPLACE_SM_RESP, 0x07),
        (PduID.CANCEL_SM, 0x08),
        (PduID.CANCEL_SM_RESP, 0x08),
        (PduID.BIND_TRANSCEIVER, 0x09),
        (PduID.BIND_TRANSCEIVER_RESP, 0x09),
        (PduID.OUTBIND, 0x0B),
        (PduID.ENQUIRE_LINK, 0x15),
        (PduID.ENQUIRE_LINK_RESP, 0x15),
        (PduID.SUBMIT_MULTI, 0x21),
        (PduID.SUBMIT_MULTI_RESP, 0x21),
        (PduID.ALERT_NOTIFICATION, 0x102),
        (PduID.DATA_SM, 0x103),
        (PduID.DATA_SM_RESP, 0x103),
    ],
)
def test_group(pdu_id, group):
    assert id_group(pdu_id) == group


def test_key():
    sm = bytes(
        [
            0x00, 0x00, 0x00, 0x10,
            0x00, 0x00, 0x00, 0x04,
            0x00, 0x00, 0x00, 0x00,
            0x00, 0x00, 0x00, 0x00,
        ]
    )
    h = decode_header(io.BytesIO(sm))
    assert h.key() == "4-0"


def test_request_and_response_share_key():
    req = Header(length=HEADER_LEN, pdu_id=PduID.SUBMIT_SM, seq=7)
    resp = Header(length=HEADER_LEN, pdu_id=PduID.SUBMIT_SM_RESP, seq=7)
    assert req.key() == resp.key()


def test_id_names():
    assert id_name(PduID.GENERIC_NACK) == "GenericNACK"
    assert id_name(PduID.SUBMIT_SM_RESP) == "SubmitSMResp"
    assert id_name(PduID.DATA_SM) == "DataSM"
    assert id_name(0x12345) == ""


def test_unknown_id_kept_as_int():
    h = Header(length=HEADER_LEN, pdu_id=0x12345)
    assert h.pdu_id == 0x12345
    assert decode_header(io.BytesIO(h.serialize())).pdu_id == 0x12345


def test_round_trip_at_max_size():
    h = Header(length=MAX_SIZE, pdu_id=PduID.DELIVER_SM, status=0xFF, seq=0xFFFFFFFF)
    assert decode_header(io.BytesIO(h.serialize())) == h