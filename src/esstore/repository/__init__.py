"""Repository layer built on DocumentStore."""

from .planet_repository import BanInfo, Planet, PlanetRepository, planet_index_mapping

__all__ = [
    "BanInfo",
    "Planet",
    "PlanetRepository",
    "planet_index_mapping",
]
