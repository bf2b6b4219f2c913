"""Table-driven AES-128 and AES-256 block encryption with zero padding, and a hex byte-list helper."""

__version__ = "0.1.0"

__all__ = ["aes128", "aes256", "hexlist", "rounds", "tables"]