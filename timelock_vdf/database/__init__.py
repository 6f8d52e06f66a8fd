"""Persistence of VDF instances and their trapdoors.

Import DatabaseService from timelock_vdf.database.DatabaseService; it depends
on the converters, which depend on the entities in this package.
"""
