"""OpenPGP algorithm profiles, configuration objects and byte-stream adapters."""

__version__ = "0.1.0"
__all__ = ["mobile", "packet", "profile"]