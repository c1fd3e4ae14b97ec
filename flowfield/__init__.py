"""Flow field pathfinding with a simple enemy, turret and building simulation."""

__version__ = "0.1.0"