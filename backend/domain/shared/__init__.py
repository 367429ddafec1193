"""Shared kernel: error taxonomy, common value objects, pagination and ports."""
