__all__ = (
    "InvalidAction",
    "StoreError",
)


class StoreError(Exception):
    pass


class InvalidAction(StoreError, ValueError):
    pass
