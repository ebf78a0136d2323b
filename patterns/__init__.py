"""Reusable data-access patterns.

Each module is self-contained and domain-agnostic: the generic async
repository, and the paging/sorting value types repositories exchange with
services.
"""
