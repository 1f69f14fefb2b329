# -*- coding: utf-8 -*-


class GattUuidError(Exception):
    """Base Exception for gattuuid."""

    pass


class InvalidGattUuidError(GattUuidError, ValueError):
    """The given value could not be normalized to a 16, 32 or 128-bit GATT UUID."""

    def __init__(self, value: object, *args: object) -> None:
        """
        Args:
            value: The rejected input.
        """
        super().__init__(f"invalid GATT UUID: {value!r}", *args)
        self.value = value
