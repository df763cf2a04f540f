"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- HTTP transport
- Providers (rate service API)
- UI (presentation boundary)
"""

__all__ = []
