# protonkit

Building blocks for programs that speak a UDP game protocol: small value types,
the `key|value` text parameter format, the binary variant-list format, fixed
packet layouts, IPv4 addresses, a millisecond clock and thin socket helpers.
Only the standard library is needed.

## Install

```
pip install .
```

## Modules

- `protonkit.vector`: dataclasses `Vector2`, `Vector2i`, `Vector3` and `Rect`,
  which support `+` and `-`. `Vector2` and `Vector2i` also have
  `distance(x, y)`, the Euclidean distance to a point.
- `protonkit.hashing`: `fnv32(text)` and `fnv64(text)`, the FNV-1a hashes. A `str`
  is hashed as UTF-8; hashing stops at the first NUL byte.
- `protonkit.packet`: the `PacketType` and `NetMessageType` enumerations, and
  `GameUpdatePacket` and `GameTextPacket` with `pack()` and the class method
  `unpack(data)`. `GameUpdatePacket` is a packed little-endian record of
  `GameUpdatePacket.SIZE` bytes. `GameTextPacket` is a 32-bit type followed by
  NUL-terminated text. Both raise `ValueError` on short input or out-of-range
  fields.
- `protonkit.world`: `Player`, which compares equal on `netid` and `userid`, and
  `World`, which holds a name, a list of players, the local player and a
  `connected` flag.
- `protonkit.rtparam`: `RTPair` and `RTVar` for text with one `key|value|...`
  pair per line, `RTVarOpt` for building such text by appending lines, and
  `is_number(text)`. An empty line parses to a pair whose value is `[EMPTY]`.
  `RTVar.get_int` and `RTVar.get_long` raise `KeyError` for a missing key, and
  `RTVar.pair_at` returns the first pair when the index is out of range.
- `protonkit.variant`: `VarType`, `Variant` and `VariantList`. A `Variant` holds a
  float, string, 32-bit integer (signed or unsigned), `Vector2`, `Vector3` or
  `Rect`. The type is inferred from the value, or you can give it with
  `set(value, kind)`. A `VariantList` has seven slots. `serialize()` and
  `deserialize(data)` convert between a list and the binary form, and
  `mem_needed()` gives the size of that form. `describe()` renders the list as
  readable text.
- `protonkit.address`: the frozen dataclass `Address` (a 32-bit IPv4 host and a
  port), `parse_host_ip` (strict dotted quad), `resolve_host` (DNS lookup that
  falls back to `parse_host_ip`), `host_ip_string`, `host_name` (reverse lookup
  that falls back to the dotted quad), and `Clock`, a millisecond clock that
  wraps at 32 bits and whose origin `set(base)` moves.
- `protonkit.netsocket`: `NetSocket`, a context-managed IPv4 stream or datagram
  socket, with `SocketType`, `SocketOption` and `WaitCondition`. `send` takes a
  list of buffers and returns 0 if the send would block. `receive(size)` returns
  `None` when nothing is waiting. `wait(condition, timeout)` waits for up to
  `timeout` milliseconds and reports which conditions became ready.

## Examples

Text parameters:

```python
from protonkit.rtparam import RTVar

var = RTVar.parse("action|log\nmsg|hello|world\ncount|12")
var.get("msg")             # "hello|world"
var.validate_int("count")  # True
var.get_int("count")       # 12
var.set("action", "input")
print(var.serialize())
```

Variant lists:

```python
from protonkit.variant import VariantList

params = VariantList()
params[0] = "OnConsoleMessage"
params[1] = "hi there"
blob = params.serialize()
again = VariantList.deserialize(blob)
print(again.describe())
```

Hashing:

```python
from protonkit.hashing import fnv32

fnv32("OnSpawn")
```

Sockets:

```python
from protonkit.address import Address
from protonkit.netsocket import NetSocket, SocketType

with NetSocket(SocketType.DATAGRAM) as sock:
    sock.bind(Address(0, 0))
    print(sock.local_address())
```

## What it does not do

The package provides data types, codecs and sockets only. It does not implement
the reliable-delivery layer that normally runs on top of these sockets:
connections, acknowledgements, retransmission, and fragment reassembly are not
included. It also has no proxy, server or command-line program.

## Tests

```
pip install .[test]
pytest
```