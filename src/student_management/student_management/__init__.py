"""Student Management package.

Organized by feature modules (departments, ...) with thin service layers
over repository interfaces, and MySQL / in-memory repository adapters.
"""
