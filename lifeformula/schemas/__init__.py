"""Pydantic Schemas - request/response models for the HTTP surface.

Invariants:
    - Schemas describe wire shapes only; domain types live in core/
"""
