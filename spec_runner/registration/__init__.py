"""Spec registration: the Context/Case tree and its registry."""

from spec_runner.registration.tree import (
    Case,
    CaseRegistry,
    Context,
    DescriptionPath,
    Location,
)

__all__ = [
    "Case",
    "CaseRegistry",
    "Context",
    "DescriptionPath",
    "Location",
]
