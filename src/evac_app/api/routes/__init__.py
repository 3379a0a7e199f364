"""Route group exports."""

from . import evacuations, health, vehicles, zones

__all__ = ["evacuations", "health", "vehicles", "zones"]
