"""Event records, particle guns, pile-up, vertex smearing, merging, readers, converters and filters for simulated collision events."""

__version__ = "0.1.0"