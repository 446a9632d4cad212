"""
Core domain models, checksum algorithms, and contracts.

This module contains the foundational building blocks that are independent
of external systems (CLIs, storage, base conversion of native integers).
"""
