"""Vault index construction and lookup."""

from .vault_index import VaultIndex, build_vault_index, normalize_target

__all__ = ["VaultIndex", "build_vault_index", "normalize_target"]
