"""
Core numeral model, error taxonomy and mathematical primitives.

This package contains the building blocks of the kernel; nothing here
depends on anything but the standard `decimal` module and pydantic.
"""
