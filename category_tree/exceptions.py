"""Custom exception classes"""


class CategoryTreeException(Exception):
    """Base exception for category tree tooling"""
    pass


class DatabaseException(CategoryTreeException):
    """Database operation errors"""
    pass


class StoreUnavailableException(DatabaseException):
    """Database unreachable or connection lost"""
    pass


class DuplicateNodeException(DatabaseException):
    """Insert rejected by a uniqueness constraint"""
    pass


class CategoryNotFoundException(CategoryTreeException):
    """Category id does not exist"""
    pass


class SeedStructureException(CategoryTreeException):
    """Invalid seed structure"""
    pass


class UnknownSeedStructureException(SeedStructureException):
    """No seed structure registered under the given slug"""
    pass
