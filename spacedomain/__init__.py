"""Entity world, trade orders, sectors, orbits, navigation planning and save files for a space simulation."""

__version__ = "0.1.0"