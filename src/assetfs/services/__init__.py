"""
Services Layer - wiring of the core path services.
"""

from assetfs.services.container import ServicesContainer, create_registry, create_services

__all__ = [
    "ServicesContainer",
    "create_registry",
    "create_services",
]
