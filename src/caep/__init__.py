"""
Core logic for the CAEP assurance level change transmitter.

Validation, payload assembly, signing and transmission live here.
Handlers in src/handlers/ are thin wrappers that call into caep/.
"""

__all__: list[str] = []
