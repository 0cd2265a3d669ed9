"""Stream adapters between host-runtime readers and writers and binary streams."""

from __future__ import annotations

import gc
import hashlib
import io
from collections import deque
from dataclasses import dataclass
from typing import BinaryIO, Protocol


def free_os_memory() -> int:
    """Run a full garbage collection and return the number of unreachable objects found."""
    return gc.collect()


class _Writer(Protocol):
    def write(self, data: bytes) -> int | None: ...


class _Reader(Protocol):
    def read(self, size: int = -1) -> bytes: ...


def _write(writer: _Writer, data: bytes) -> int:
    written = writer.write(data)
    return len(data) if written is None else written


def _read_into(reader: _Reader, buffer: memoryview) -> int:
    readinto = getattr(reader, "readinto", None)
    if readinto is not None:
        count = readinto(buffer)
        return 0 if count is None else count
    data = reader.read(len(buffer))
    buffer[: len(data)] = data
    return len(data)


class Mobile2GoWriter:
    """Writer wrapper that copies each chunk before handing it on."""

    def __init__(self, writer: _Writer) -> None:
        self._writer = writer

    def write(self, data: bytes) -> int:
        """Write a copy of ``data`` to the wrapped writer; return the count written."""
        return _write(self._writer, bytes(data))


class Mobile2GoWriterWithSHA256:
    """Writer wrapper that also hashes, with SHA-256, everything written through it."""

    def __init__(self, writer: _Writer) -> None:
        self._writer = writer
        self._sha256 = hashlib.sha256()

    def write(self, data: bytes) -> int:
        """Write a copy of ``data`` and hash the part that was written."""
        chunk = bytes(data)
        written = _write(self._writer, chunk)
        self._sha256.update(chunk[:written])
        return written

    def digest(self) -> bytes:
        """Return the SHA-256 digest of the data written so far."""
        return self._sha256.digest()


@dataclass
class MobileReadResult:
    """Result of one read by a host-runtime reader; the data is always copied."""

    n: int
    is_eof: bool
    data: bytes = b""

    def __post_init__(self) -> None:
        self.data = bytes(self.data) if self.data is not None else b""


class _MobileReader(Protocol):
    def read(self, max_size: int) -> MobileReadResult: ...


class Mobile2GoReader(io.RawIOBase):
    """Binary stream over a reader whose ``read(max_size)`` returns a MobileReadResult."""

    def __init__(self, reader: _MobileReader) -> None:
        super().__init__()
        self._reader = reader
        self._eof = False

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        """Fill ``buffer`` from the wrapped reader; return 0 once it reports the end."""
        view = memoryview(buffer).cast("B")
        if not len(view):
            return 0
        while not self._eof:
            try:
                result = self._reader.read(len(view))
            except Exception as exc:
                raise OSError(f"couldn't read from mobile reader: {exc}") from exc
            count = min(result.n, len(view), len(result.data))
            if count > 0:
                view[:count] = result.data[:count]
            if result.is_eof:
                self._eof = True
            if count > 0:
                return count
        return 0


class Go2AndroidReader:
    """Reader wrapper whose ``readinto`` returns -1 instead of 0 at the end of data."""

    def __init__(self, reader: _Reader) -> None:
        self._reader = reader
        self._eof = False

    def readinto(self, buffer) -> int:
        """Fill ``buffer``; return the number of bytes read, or -1 at the end."""
        if self._eof:
            return -1
        view = memoryview(buffer).cast("B")
        if not len(view):
            return 0
        count = _read_into(self._reader, view)
        if count == 0:
            self._eof = True
            return -1
        return count


class Go2IOSReader:
    """Reader wrapper whose ``read`` returns a MobileReadResult."""

    def __init__(self, reader: _Reader) -> None:
        self._reader = reader

    def read(self, max_size: int) -> MobileReadResult:
        """Read at most ``max_size`` bytes; an empty read marks the end of data."""
        if max_size <= 0:
            return MobileReadResult(0, False, b"")
        data = self._reader.read(max_size)
        return MobileReadResult(len(data), not data, data)


class KeyPacketSplitWriter:
    """Split output: data packets go to a writer, key packets and signature are buffered."""

    def __init__(self, data_writer: _Writer) -> None:
        self._data_writer = data_writer
        self._key_packets = io.BytesIO()
        self._encrypted_signature = io.BytesIO()

    def write(self, data: bytes) -> int:
        """Write data packets to the wrapped writer."""
        return _write(self._data_writer, data)

    def keys(self) -> BinaryIO:
        """Return the buffer that receives the key packets."""
        return self._key_packets

    def signature(self) -> BinaryIO:
        """Return the buffer that receives the encrypted detached signature."""
        return self._encrypted_signature

    @property
    def key_packets(self) -> bytes:
        """The key packets buffered so far."""
        return self._key_packets.getvalue()

    @property
    def encrypted_signature(self) -> bytes:
        """The encrypted detached signature buffered so far."""
        return self._encrypted_signature.getvalue()


class DetachedSignaturePGPSplitReader:
    """Reads key packets followed by data packets, with a separate signature stream."""

    def __init__(self, key_packet: bytes, data_reader: _Reader, encrypted_signature: bytes) -> None:
        self._sources: deque[_Reader] = deque([io.BytesIO(bytes(key_packet)), data_reader])
        self._signature = io.BytesIO(bytes(encrypted_signature))

    def readable(self) -> bool:
        return True

    def read(self, size: int | None = -1) -> bytes:
        """Read up to ``size`` bytes, or everything when ``size`` is negative or None."""
        unbounded = size is None or size < 0
        remaining = 0 if unbounded else size
        chunks: list[bytes] = []
        while self._sources and (unbounded or remaining > 0):
            chunk = self._sources[0].read(-1 if unbounded else remaining)
            if not chunk:
                self._sources.popleft()
                continue
            chunks.append(chunk)
            if not unbounded:
                remaining -= len(chunk)
        return b"".join(chunks)

    def signature(self) -> BinaryIO:
        """Return the reader over the encrypted detached signature."""
        return self._signature