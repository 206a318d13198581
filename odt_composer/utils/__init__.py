"""Helper utilities: enumerations, ODF names, units and logging."""
