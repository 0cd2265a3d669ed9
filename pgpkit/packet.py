"""OpenPGP algorithm identifiers and the configuration objects built from profiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class SecurityLevel(IntEnum):
    """Security level requested when generating keys."""

    STANDARD = 0
    HIGH = 1


class HashAlgorithm(IntEnum):
    """Hash algorithm identifiers."""

    MD5 = 1
    SHA1 = 2
    RIPEMD160 = 3
    SHA256 = 8
    SHA384 = 9
    SHA512 = 10
    SHA224 = 11
    SHA3_256 = 12
    SHA3_512 = 14


class PublicKeyAlgorithm(IntEnum):
    """Public key algorithm identifiers."""

    RSA = 1
    RSA_ENCRYPT_ONLY = 2
    RSA_SIGN_ONLY = 3
    ELGAMAL = 16
    DSA = 17
    ECDH = 18
    ECDSA = 19
    EDDSA = 22
    X25519 = 25
    X448 = 26
    ED25519 = 27
    ED448 = 28


class Curve(str, Enum):
    """Elliptic curves usable with ECDH, ECDSA and legacy EdDSA keys."""

    CURVE25519 = "Curve25519"
    CURVE448 = "Curve448"
    NIST_P256 = "P256"
    NIST_P384 = "P384"
    NIST_P521 = "P521"
    SECP256K1 = "SecP256k1"
    BRAINPOOL_P256 = "BrainpoolP256"
    BRAINPOOL_P384 = "BrainpoolP384"
    BRAINPOOL_P512 = "BrainpoolP512"


class CipherFunction(IntEnum):
    """Symmetric cipher identifiers."""

    TRIPLE_DES = 2
    CAST5 = 3
    AES128 = 7
    AES192 = 8
    AES256 = 9


class CompressionAlgo(IntEnum):
    """Compression algorithm identifiers."""

    NONE = 0
    ZIP = 1
    ZLIB = 2
    BZIP2 = 3


class S2KMode(IntEnum):
    """String-to-key specifier types."""

    SIMPLE = 0
    SALTED = 1
    ITERATED = 3
    ARGON2 = 4
    GNU = 101


@dataclass
class AEADConfig:
    """AEAD settings; unset fields fall back to the implementation's defaults."""

    default_mode: int | None = None
    chunk_size: int | None = None

    def __post_init__(self) -> None:
        if self.chunk_size is not None and self.chunk_size <= 0:
            raise ValueError("AEAD chunk size must be positive")


@dataclass
class CompressionConfig:
    """Compression level: -1 is the compressor's default, 0 none, 1 to 9 increasing."""

    level: int = -1

    def __post_init__(self) -> None:
        if not -1 <= self.level <= 9:
            raise ValueError(f"compression level {self.level} is outside -1..9")


@dataclass
class Argon2Config:
    """Argon2 parameters; unset fields fall back to the implementation's defaults."""

    passes: int | None = None
    parallelism: int | None = None
    memory_exponent: int | None = None

    def __post_init__(self) -> None:
        for name in ("passes", "parallelism", "memory_exponent"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"argon2 {name} must be positive")


@dataclass
class S2KConfig:
    """String-to-key settings used to derive keys from passphrases."""

    mode: S2KMode = S2KMode.ITERATED
    hash: HashAlgorithm | None = None
    argon2_config: Argon2Config | None = None

    def __post_init__(self) -> None:
        if self.mode is S2KMode.ARGON2:
            if self.argon2_config is None:
                self.argon2_config = Argon2Config()
        elif self.argon2_config is not None:
            raise ValueError("argon2 parameters require the ARGON2 s2k mode")


@dataclass
class Config:
    """Settings handed to key generation, encryption and signing operations."""

    default_hash: HashAlgorithm | None = None
    default_cipher: CipherFunction | None = None
    aead_config: AEADConfig | None = None
    s2k_config: S2KConfig | None = None
    default_compression_algo: CompressionAlgo = CompressionAlgo.NONE
    compression_config: CompressionConfig | None = None
    v6_keys: bool = False
    algorithm: PublicKeyAlgorithm | None = None
    curve: Curve | None = None
    rsa_bits: int | None = None
    check_intended_recipients: bool | None = None
    reject_public_key_algorithms: dict[PublicKeyAlgorithm, bool] | None = None
    min_rsa_bits: int | None = None
    insecure_allow_decryption_with_signing_keys: bool = False
    insecure_allow_all_key_flags_when_missing: bool = False