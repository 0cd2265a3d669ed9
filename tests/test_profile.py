import pytest

from pgpkit.packet import (
    AEADConfig,
    CipherFunction,
    CompressionAlgo,
    CompressionConfig,
    Curve,
    HashAlgorithm,
    PublicKeyAlgorithm,
    S2KConfig,
    S2KMode,
    SecurityLevel,
)
from pgpkit.profile import Custom, default, rfc4880, rfc9580


@pytest.mark.parametrize("level", [SecurityLevel.STANDARD, SecurityLevel.HIGH])
def test_default_key_generation(level):
    cfg = default().key_generation_config(level)
    assert cfg.algorithm is PublicKeyAlgorithm.EDDSA
    assert cfg.curve is Curve.CURVE25519
    assert cfg.default_hash is HashAlgorithm.SHA256
    assert cfg.default_cipher is CipherFunction.AES256
    assert cfg.default_compression_algo is CompressionAlgo.ZLIB
    assert cfg.compression_config == CompressionConfig(level=6)
    assert cfg.v6_keys is False


def test_rfc4880_rsa_bits_by_level():
    profile = rfc4880()
    standard = profile.key_generation_config(SecurityLevel.STANDARD)
    high = profile.key_generation_config(SecurityLevel.HIGH)
    assert standard.algorithm is PublicKeyAlgorithm.RSA
    assert high.algorithm is PublicKeyAlgorithm.RSA
    assert standard.rsa_bits == 3072
    assert high.rsa_bits == 4096
    assert standard.compression_config is None


def test_rfc9580_algorithms_by_level():
    profile = rfc9580()
    standard = profile.key_generation_config(SecurityLevel.STANDARD)
    high = profile.key_generation_config(SecurityLevel.HIGH)
    assert standard.algorithm is PublicKeyAlgorithm.ED25519
    assert high.algorithm is PublicKeyAlgorithm.ED448
    assert standard.v6_keys is True
    assert standard.default_hash is HashAlgorithm.SHA512
    assert standard.aead_config == AEADConfig()


def test_rfc9580_uses_argon2():
    profile = rfc9580()
    assert profile.encryption_config().s2k_config.mode is S2KMode.ARGON2
    assert profile.key_encryption_config().s2k_config.mode is S2KMode.ARGON2
    assert profile.key_encryption_config().aead_config == AEADConfig()


def test_key_generation_configs_are_independent():
    profile = rfc4880()
    first = profile.key_generation_config(SecurityLevel.HIGH)
    second = profile.key_generation_config(SecurityLevel.STANDARD)
    assert first is not second
    assert first.rsa_bits == 4096


def test_encryption_config_without_flags():
    cfg = default().encryption_config()
    assert cfg.check_intended_recipients is None
    assert cfg.reject_public_key_algorithms is None
    assert cfg.min_rsa_bits is None
    assert cfg.insecure_allow_decryption_with_signing_keys is False
    assert cfg.default_cipher is CipherFunction.AES256


def test_encryption_config_with_flags():
    profile = default()
    profile.disable_intended_recipients = True
    profile.allow_all_public_key_algorithms = True
    profile.insecure_allow_weak_rsa = True
    profile.insecure_allow_decryption_with_signing_keys = True
    profile.insecure_allow_all_key_flags_when_missing = True
    cfg = profile.encryption_config()
    assert cfg.check_intended_recipients is False
    assert cfg.reject_public_key_algorithms == {}
    assert cfg.min_rsa_bits == 1023
    assert cfg.insecure_allow_decryption_with_signing_keys is True
    assert cfg.insecure_allow_all_key_flags_when_missing is True


def test_sign_config_uses_profile_hash():
    assert rfc9580().sign_config().default_hash is HashAlgorithm.SHA512


def test_sign_config_uses_sign_hash_override():
    profile = default()
    profile.sign_hash = HashAlgorithm.SHA512
    assert profile.sign_config().default_hash is HashAlgorithm.SHA512


def test_sign_config_flags():
    profile = rfc4880()
    profile.disable_intended_recipients = True
    profile.insecure_allow_weak_rsa = True
    cfg = profile.sign_config()
    assert cfg.check_intended_recipients is False
    assert cfg.min_rsa_bits == 1023
    assert cfg.reject_public_key_algorithms is None


def test_key_encryption_config_uses_key_cipher():
    profile = default()
    assert profile.key_encryption_config().default_cipher is None
    profile.cipher_key_encryption = CipherFunction.AES128
    profile.s2k_key_encryption = S2KConfig()
    cfg = profile.key_encryption_config()
    assert cfg.default_cipher is CipherFunction.AES128
    assert cfg.s2k_config.mode is S2KMode.ITERATED


def test_compression_config():
    cfg = default().compression_config()
    assert cfg.default_compression_algo is CompressionAlgo.ZLIB
    assert cfg.compression_config == CompressionConfig(level=6)
    assert cfg.default_hash is None


def test_custom_requires_key_algorithm_setter():
    with pytest.raises(TypeError):
        Custom()


def test_custom_setter_receives_level():
    seen = []
    profile = Custom(set_key_algorithm=lambda cfg, level: seen.append(level))
    profile.key_generation_config(SecurityLevel.HIGH)
    assert seen == [SecurityLevel.HIGH]