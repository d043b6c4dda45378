"""Application layer: DTOs, interfaces, services.

Depends only on domain and protocol definitions (DIP).
"""
