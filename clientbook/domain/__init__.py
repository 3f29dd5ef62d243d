"""
clientbook.domain — Canonical data models, enumerations and errors.

This package defines the source-of-truth types shared by every part of the
prioritisation engine. Nothing in here should import from other clientbook
sub-packages except ``clientbook.core`` (only stdlib / third-party Pydantic).
"""
