"""
Core numerical primitives, contracts, and value objects.

This module contains the foundational building blocks of the differential
privacy library that are independent of any mechanism state.
"""
