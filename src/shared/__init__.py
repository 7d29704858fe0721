"""
Shared Kernel Module
====================

Shared infrastructure used by the todos bounded context and the
application factory: structured logging and HTTP middleware.

DO NOT add todo business logic to the shared kernel.
"""

__version__ = "1.0.0"
