"""Shared utilities: generators."""

from access_control.shared.utils.generators import generate_cuid

__all__ = ["generate_cuid"]
