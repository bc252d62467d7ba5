"""
Core exact-arithmetic engines, domain snapshots, and data contracts.

This module contains the foundational building blocks that are independent
of any I/O (files, network, storage).
"""
