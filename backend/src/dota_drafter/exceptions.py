"""Exceptions raised while loading or refreshing draft datasets."""


class DatasetError(ValueError):
    """A catalog, matchup or position record violates the data model."""


class DatasetRefreshError(RuntimeError):
    """A remote matchup matrix could not be fetched or parsed."""
