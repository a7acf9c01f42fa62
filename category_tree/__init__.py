"""Category tree administration: repair, seeding and reporting"""

__version__ = "1.0.0"
