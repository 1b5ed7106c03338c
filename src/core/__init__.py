"""
Core integer kernel, fraction value type, and payload contracts.

This module contains fixed-width exact arithmetic primitives that are
independent of any consuming application.
"""
