# pgpkit

Algorithm profiles and configuration objects for OpenPGP operations, plus
small adapters that bridge byte-oriented readers and writers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `pgpkit.packet`: algorithm identifiers (`SecurityLevel`, `HashAlgorithm`,
  `PublicKeyAlgorithm`, `Curve`, `CipherFunction`, `CompressionAlgo`,
  `S2KMode`) and the dataclasses `AEADConfig`, `CompressionConfig`,
  `Argon2Config`, `S2KConfig` and `Config`.
- `pgpkit.profile`: the `Custom` profile class and the presets `default()`,
  `rfc4880()` and `rfc9580()`.
- `pgpkit.mobile`: stream adapters and `free_os_memory()`.

## Configuration objects

The dataclasses in `pgpkit.packet` check their values when they are built:

- `CompressionConfig(level=...)` accepts levels from -1 (the compressor's
  default) to 9. Any other level raises `ValueError`.
- `AEADConfig` rejects a chunk size that is not positive.
- `Argon2Config` rejects `passes`, `parallelism` or `memory_exponent` values
  that are not positive.
- `S2KConfig` with `mode=S2KMode.ARGON2` gets a default `Argon2Config` when
  none is given. Argon2 parameters used with any other mode raise `ValueError`.

## Profiles

A profile decides which algorithms are used to generate keys, encrypt, sign
and compress. There are three ready-made profiles:

- `default()`: EdDSA over Curve25519, SHA-256, AES-256 and ZLIB compression at
  level 6.
- `rfc4880()`: RSA keys, 3072 bits or 4096 at `SecurityLevel.HIGH`, with
  SHA-256, AES-256 and ZLIB.
- `rfc9580()`: Ed25519 keys, or Ed448 at `SecurityLevel.HIGH`, with SHA-512,
  AES-256, ZLIB, AEAD, Argon2 S2K for both messages and keys, and v6 keys.

Each profile is a `Custom` object. Its methods build a `Config` for each
kind of operation:

```python
from pgpkit import profile
from pgpkit.packet import PublicKeyAlgorithm, SecurityLevel

p = profile.rfc4880()
cfg = p.key_generation_config(SecurityLevel.HIGH)
assert cfg.algorithm is PublicKeyAlgorithm.RSA
assert cfg.rsa_bits == 4096

enc = p.encryption_config()
sign = p.sign_config()
keys = p.key_encryption_config()
comp = p.compression_config()
```

`Custom` can also be built directly. It needs a `set_key_algorithm`
callable that takes a `Config` and a security level and fills in the key
algorithm. `sign_hash` replaces `hash` in `sign_config()`. Three flags change
`encryption_config()` and `sign_config()`:

- `disable_intended_recipients` sets `check_intended_recipients` to `False`.
- `allow_all_public_key_algorithms` sets `reject_public_key_algorithms` to an
  empty dict.
- `insecure_allow_weak_rsa` sets `min_rsa_bits` to 1023.

## Stream adapters

`pgpkit.mobile` has thin wrappers around binary streams:

- `Mobile2GoWriter` copies each chunk and passes it to a wrapped writer.
- `Mobile2GoWriterWithSHA256` does the same and hashes what was written.
  Call `digest()` to get the SHA-256 hash.
- `MobileReadResult(n, is_eof, data)` holds the result of one read. The data
  is copied.
- `Mobile2GoReader` is an `io.RawIOBase` over a reader whose
  `read(max_size)` returns `MobileReadResult` objects. An error from the
  wrapped reader is raised as `OSError`.
- `Go2AndroidReader.readinto(buffer)` returns the number of bytes read, or
  `-1` at the end of the data.
- `Go2IOSReader.read(max_size)` returns a `MobileReadResult`. An empty read
  sets `is_eof`.
- `KeyPacketSplitWriter` sends data to a wrapped writer. Key packets and the
  encrypted detached signature go to buffers of its own, returned by `keys()`
  and `signature()`. Their contents are available as `key_packets` and
  `encrypted_signature`.
- `DetachedSignaturePGPSplitReader(key_packet, data_reader, encrypted_signature)`
  reads the key packet bytes followed by the data stream. `signature()`
  returns a reader over the signature bytes.

`free_os_memory()` runs a full garbage collection and returns the number of
unreachable objects it found.

```python
import io
from pgpkit.mobile import Mobile2GoWriterWithSHA256

out = io.BytesIO()
writer = Mobile2GoWriterWithSHA256(out)
writer.write(b"Hello World!")
print(out.getvalue(), writer.digest().hex())
```

## What this package does not do

pgpkit does not generate keys, encrypt, decrypt, sign or verify. It also does
not parse or armor OpenPGP packets. The profiles produce plain `Config`
values for such operations to use. The split writer and reader only route
bytes that some other code has already produced.