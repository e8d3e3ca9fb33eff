"""
Core domain models and mathematical primitives.

This module contains the function family and the music disk collection,
both independent of console input and output.
"""
