"""Motivation API Package: Gemini-backed motivational quote relay.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
