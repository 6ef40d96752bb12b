"""
Core Base Module

Shared base classes for HR models.

Exports:
    - AuditMixin: Adds created_at, updated_at, created_by, updated_by
    - BaseQuerySet: search() and sorted_by() helpers for list endpoints
"""
