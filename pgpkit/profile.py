"""Profiles that choose the algorithms used for keys, encryption and signing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pgpkit.packet import (
    AEADConfig,
    Argon2Config,
    CipherFunction,
    CompressionAlgo,
    CompressionConfig,
    Config,
    Curve,
    HashAlgorithm,
    PublicKeyAlgorithm,
    S2KConfig,
    S2KMode,
    SecurityLevel,
)

_WEAK_MIN_RSA_BITS = 1023

KeyAlgorithmSetter = Callable[[Config, int], None]


@dataclass
class Custom:
    """A set of algorithm parameters for generating keys, encrypting and signing.

    Prefer one of the presets: default(), rfc4880() or rfc9580().
    """

    set_key_algorithm: KeyAlgorithmSetter
    aead_key_encryption: AEADConfig | None = None
    s2k_key_encryption: S2KConfig | None = None
    aead_encryption: AEADConfig | None = None
    s2k_encryption: S2KConfig | None = None
    compression_configuration: CompressionConfig | None = None
    hash: HashAlgorithm | None = None
    sign_hash: HashAlgorithm | None = None
    cipher_key_encryption: CipherFunction | None = None
    cipher_encryption: CipherFunction | None = None
    compression_algorithm: CompressionAlgo = CompressionAlgo.NONE
    v6: bool = False
    allow_all_public_key_algorithms: bool = False
    disable_intended_recipients: bool = False
    insecure_allow_weak_rsa: bool = False
    insecure_allow_decryption_with_signing_keys: bool = False
    insecure_allow_all_key_flags_when_missing: bool = False

    def key_generation_config(self, security_level: int) -> Config:
        """Return the configuration for generating a key at the given security level."""
        cfg = Config(
            default_hash=self.hash,
            default_cipher=self.cipher_encryption,
            aead_config=self.aead_encryption,
            default_compression_algo=self.compression_algorithm,
            compression_config=self.compression_configuration,
            v6_keys=self.v6,
        )
        self.set_key_algorithm(cfg, security_level)
        return cfg

    def _apply_verification_flags(self, cfg: Config) -> None:
        if self.disable_intended_recipients:
            cfg.check_intended_recipients = False
        if self.allow_all_public_key_algorithms:
            cfg.reject_public_key_algorithms = {}
        if self.insecure_allow_weak_rsa:
            cfg.min_rsa_bits = _WEAK_MIN_RSA_BITS

    def encryption_config(self) -> Config:
        """Return the configuration for encrypting and decrypting messages."""
        cfg = Config(
            default_hash=self.hash,
            default_cipher=self.cipher_encryption,
            aead_config=self.aead_encryption,
            s2k_config=self.s2k_encryption,
            insecure_allow_decryption_with_signing_keys=(
                self.insecure_allow_decryption_with_signing_keys
            ),
            insecure_allow_all_key_flags_when_missing=(
                self.insecure_allow_all_key_flags_when_missing
            ),
        )
        self._apply_verification_flags(cfg)
        return cfg

    def key_encryption_config(self) -> Config:
        """Return the configuration for locking private keys with a passphrase."""
        return Config(
            default_hash=self.hash,
            default_cipher=self.cipher_key_encryption,
            aead_config=self.aead_key_encryption,
            s2k_config=self.s2k_key_encryption,
        )

    def sign_config(self) -> Config:
        """Return the configuration for signing and verifying."""
        cfg = Config(
            default_hash=self.sign_hash if self.sign_hash is not None else self.hash
        )
        self._apply_verification_flags(cfg)
        return cfg

    def compression_config(self) -> Config:
        """Return the configuration for compressing message data."""
        return Config(
            compression_config=self.compression_configuration,
            default_compression_algo=self.compression_algorithm,
        )


def default() -> Custom:
    """Profile with widely implemented features."""

    def set_key_algorithm(cfg: Config, security_level: int) -> None:
        cfg.algorithm = PublicKeyAlgorithm.EDDSA
        cfg.curve = Curve.CURVE25519

    return Custom(
        set_key_algorithm=set_key_algorithm,
        hash=HashAlgorithm.SHA256,
        cipher_encryption=CipherFunction.AES256,
        compression_algorithm=CompressionAlgo.ZLIB,
        compression_configuration=CompressionConfig(level=6),
    )


def rfc4880() -> Custom:
    """Profile that keeps to the algorithms of RFC 4880."""

    def set_key_algorithm(cfg: Config, security_level: int) -> None:
        cfg.algorithm = PublicKeyAlgorithm.RSA
        cfg.rsa_bits = 4096 if security_level == SecurityLevel.HIGH else 3072

    return Custom(
        set_key_algorithm=set_key_algorithm,
        hash=HashAlgorithm.SHA256,
        cipher_encryption=CipherFunction.AES256,
        compression_algorithm=CompressionAlgo.ZLIB,
    )


def rfc9580() -> Custom:
    """Profile that keeps to the algorithms of RFC 9580."""

    def set_key_algorithm(cfg: Config, security_level: int) -> None:
        if security_level == SecurityLevel.HIGH:
            cfg.algorithm = PublicKeyAlgorithm.ED448
        else:
            cfg.algorithm = PublicKeyAlgorithm.ED25519

    return Custom(
        set_key_algorithm=set_key_algorithm,
        hash=HashAlgorithm.SHA512,
        cipher_encryption=CipherFunction.AES256,
        compression_algorithm=CompressionAlgo.ZLIB,
        aead_key_encryption=AEADConfig(),
        aead_encryption=AEADConfig(),
        s2k_key_encryption=S2KConfig(mode=S2KMode.ARGON2, argon2_config=Argon2Config()),
        s2k_encryption=S2KConfig(mode=S2KMode.ARGON2, argon2_config=Argon2Config()),
        v6=True,
    )