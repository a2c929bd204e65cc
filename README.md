# smppkit

Building blocks for talking SMPP 3.4 to a short message service centre:

- **GSM 7-bit text** (`smppkit.gsm7`): encode and decode the GSM 03.38
  default alphabet and its escape table, packed into octets or left as one
  septet per byte.
- **PDU headers** (`smppkit.header`): read and write the 16-byte header that
  starts every PDU, look up command names and groups, and turn command
  status codes into readable messages and exceptions.
- **Connection status** (`smppkit.status`): the kinds of change a client
  connection reports (connected, disconnected, connection failed, bind
  failed).
- **Connections** (`smppkit.conn`): a TCP (optionally TLS) connection that
  reads and writes PDU frames, and a `ConnSwitch` that lets the connection
  underneath be replaced while callers keep using the same object.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## GSM 7-bit text

Most SMPP providers expect unpacked text, one septet per byte:

```python
from smppkit.gsm7 import GSM7

codec = GSM7(packed=False)
data = codec.encode("12345[6")      # b"12345\x1b<6"
assert codec.decode(data) == "12345[6"
```

Packed text squeezes eight septets into seven octets:

```python
packed = GSM7(packed=True)
assert packed.encode("12") == b"\x31\x19"
print(packed)                       # GSM 7-bit (Packed)
```

Characters outside the alphabet raise `InvalidCharacterError` when
encoding; bytes that are not valid GSM 7-bit (including an escape byte with
nothing valid after it) raise `InvalidByteError` when decoding. Both are
subclasses of `ValueError`. To check text or bytes without raising, use the
validators, which return whatever could not be represented:

```python
from smppkit.gsm7 import validate_gsm7_string, validate_gsm7_buffer

validate_gsm7_string("hello 你")            # ['你']
validate_gsm7_buffer(b"12345\x1b")          # b'\x1b'
```

## PDU headers

```python
import io
from smppkit.header import PduID, decode_header, status_message

raw = bytes.fromhex("00000010" "80000000" "00000001" "0000000d")
header = decode_header(io.BytesIO(raw))
assert header.pdu_id is PduID.GENERIC_NACK
assert header.serialize() == raw
print(status_message(header.status))       # invalid message length
```

`Header` holds `length`, `pdu_id`, `status` and `seq`; `serialize()` returns
its 16 bytes and `write_to(stream)` writes them. `decode_header` raises
`EOFError` on short input and `ValueError` when the length is below 16 bytes
or above the 4096-byte PDU limit.

`Header.key()` is built from the command group (in octal) and the sequence
number, so a request and its response share the same key. `id_group`
returns the group of any command id, `id_name` its name (an empty string if
unknown), and `status_message` the description of a status code
(`"unknown status: N"` for codes it does not know). `StatusError(status)`
is an exception carrying a non-zero command status, with that description
as its message.

## Connections

`smppkit.conn.Conn(addr, ssl_context=None, decoder=None, timeout=None)`
opens a TCP connection to `addr` (`"host:port"`, default
`localhost:2775`), wrapped in TLS when an `ssl.SSLContext` is given. It is a
context manager.

- `read()` returns what `decoder` makes of the incoming stream; by default a
  tuple of the decoded `Header` and the raw body bytes of one PDU.
- `write(pdu)` sends raw bytes, or the result of `pdu.serialize()` for any
  other object.
- `close()` closes the connection.

`ConnSwitch` wraps any object with `read`, `write` and `close` and forwards
to it. `set()` swaps in a new one, closing the old; `close()` closes and
drops it. While no connection is set, every call raises
`NotConnectedError`. `NotBoundError` and `ResponseTimeoutError` are also
provided for use before binding and a response that never arrived.

`smppkit.status.ConnStatus` pairs a `ConnStatusID` with the error, if any,
that caused the change; `str()` of a `ConnStatusID` gives its readable name,
such as `"Connection failed"`.

## What the package does not do

- It does not encode or decode PDU bodies (bind, submit_sm, deliver_sm and
  so on); `Conn.read()` hands back the body as raw bytes unless you supply a
  decoder.
- It has no persistent client: no binding as transmitter, receiver or
  transceiver, no automatic reconnection, no enquire_link keep-alive and no
  rate limiting. `ConnStatus` and `ConnStatusID` only describe such changes.
- It has no command-line tool and no server.