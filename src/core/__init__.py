"""
Core domain models, pricing operations, and record contracts.

This module contains pure building blocks that are independent
of external systems (catalog sources, storage, etc.).
"""
