"""Scaffolding and documentation toolchain for FHEVM example contracts."""

__version__ = "0.1.0"
