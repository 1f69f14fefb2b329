# -*- coding: utf-8 -*-
"""
GATT UUID normalization
-----------------------

A GATT UUID names a service, characteristic or descriptor. Every UUID is a
128-bit value, but Bluetooth SIG assigned numbers are usually written in a
16-bit (``"2901"``) or 32-bit (``"0000180a"``) short form. Short forms are
aliases for a value on the Bluetooth Base UUID,
``00000000-0000-1000-8000-00805f9b34fb``: ``"2901"`` is really
``00002901-0000-1000-8000-00805f9b34fb``.

:class:`GattUuid` accepts any of those forms, in any case and with any
punctuation (``"0000180A.0000.1000.8000.00805F9B34FB"`` is fine), and stores
the canonical ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` form together with the
bit count of the input. Input that is not 4, 8 or 32 hex digits long produces
an empty UUID with a bit count of 0 instead of raising.
"""
from __future__ import annotations

import logging
import sys
from typing import NamedTuple, Optional, Union
from uuid import UUID

if sys.version_info < (3, 11):
    from typing_extensions import Self, assert_never
else:
    from typing import Self, assert_never

from gattuuid.assigned_numbers import (
    BASE_UUID_PREFIX,
    BASE_UUID_SUFFIX,
    uuidstr_to_str,
)
from gattuuid.exc import InvalidGattUuidError

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# hex digit count -> bit count
_BIT_COUNTS = {4: 16, 8: 32, 32: 128}

# positions are measured after the previous insertion
_DASH_OFFSETS = (8, 13, 18, 23)


def clean(uuid: str) -> str:
    """
    Lowercase ``uuid`` and remove every character that is not a hex digit.

    Args:
        uuid: Any string.

    Returns:
        The hex digits of ``uuid``, in order, in lower case.
    """
    if not uuid:
        return ""

    return "".join(c for c in uuid.lower() if c in _HEX_DIGITS)


def classify(digits: str) -> int:
    """
    Returns the bit count represented by a cleaned string of hex digits:
    16, 32 or 128, or 0 if the length is not one of those.
    """
    return _BIT_COUNTS.get(len(digits), 0)


def expand(digits: str) -> tuple[str, int]:
    """
    Expands cleaned hex digits to a full 128-bit UUID string.

    16-bit and 32-bit values are placed on the Base UUID; 128-bit values are
    returned as is. Any other length gives ``("", 0)``.

    Args:
        digits: Output of :func:`clean`.

    Returns:
        A tuple of the (undashed or partially dashed) 128-bit UUID string and
        the bit count.
    """
    bit_count = classify(digits)

    if bit_count == 16:
        return BASE_UUID_PREFIX + digits + BASE_UUID_SUFFIX, bit_count

    if bit_count == 32:
        return digits + BASE_UUID_SUFFIX, bit_count

    if bit_count == 128:
        return digits, bit_count

    return "", 0


def dashify(uuid: str) -> str:
    """
    Cleans ``uuid`` (see :func:`clean`) and inserts dashes at the standard
    locations. If the string is shorter than a full UUID, as many dashes are
    added as there are characters to separate. No trailing dash is added.

    Examples::

        "0000180A-0000-1000-8000-00805f9b34fb"        -> "0000180a-0000-1000-8000-00805f9b34fb"
        "0000180A00001000800000805f9b34fb"            -> "0000180a-0000-1000-8000-00805f9b34fb"
        "0000180A/0000.1000_zzzzzz_8000+00805f9b34fb" -> "0000180a-0000-1000-8000-00805f9b34fb"
        "0000180A"                                    -> "0000180a"
        "0000180A.0000.100"                           -> "0000180a-0000-100"
        "rqzp"                                        -> ""
    """
    dashed = clean(uuid)

    for offset in _DASH_OFFSETS:
        if len(dashed) > offset:
            dashed = dashed[:offset] + "-" + dashed[offset:]

    return dashed


def _fit(value: int, bits: int, name: str) -> int:
    """Reduces ``value`` to an unsigned integer of ``bits`` bits."""
    masked = value & ((1 << bits) - 1)

    if masked != value:
        logger.debug(
            "%s value %#x does not fit in %d bits, using %#x", name, value, bits, masked
        )

    return masked


class RawString(NamedTuple):
    """A UUID in any string form, to be cleaned and classified."""

    value: str


class Short16(NamedTuple):
    """A 16-bit UUID given as an integer."""

    value: int


class Short32(NamedTuple):
    """A 32-bit UUID given as an integer."""

    value: int


class FieldSet5(NamedTuple):
    """
    A 128-bit UUID given as its five dash-separated fields::

        11111111-2222-3333-4444-555555555555
    """

    part1: int
    part2: int
    part3: int
    part4: int
    part5: int


UuidSource = Union[RawString, Short16, Short32, FieldSet5]


class GattUuid:
    """
    A normalized GATT UUID.

    Constructing from a string does the best it can with the data it is
    given. The input is cleaned of all non-hex characters and the remaining
    digits are interpreted by count:

    * 4 digits are a 16-bit UUID
    * 8 digits are a 32-bit UUID
    * 32 digits are a 128-bit UUID

    Anything else leaves the UUID empty with a :attr:`bit_count` of 0. Such a
    value is falsy, so ``if uuid:`` checks validity.

    Instances are immutable and hashable.

    Args:
        uuid:
            A UUID string in any of the forms above, or another
            :class:`GattUuid` to copy.
    """

    __slots__ = ("_uuid", "_bit_count")

    _uuid: str
    _bit_count: int

    def __init__(self, uuid: Union[str, GattUuid] = "") -> None:
        if isinstance(uuid, GattUuid):
            self._uuid = uuid._uuid
            self._bit_count = uuid._bit_count
            return

        digits = clean(uuid)
        expanded, bit_count = expand(digits)

        if not bit_count:
            logger.debug(
                "not a 16, 32 or 128-bit UUID (%d hex digits): %r", len(digits), uuid
            )

        self._uuid = dashify(expanded)
        self._bit_count = bit_count

    @classmethod
    def _create(cls, uuid: str, bit_count: int) -> Self:
        self = cls.__new__(cls)
        self._uuid = uuid
        self._bit_count = bit_count
        return self

    @classmethod
    def from_string(cls, uuid: str) -> Self:
        """Same as calling the constructor with a string."""
        return cls(uuid)

    @classmethod
    def from_16_bits(cls, uuid_16: int) -> Self:
        """
        Creates a 16-bit UUID of the form ``0000????-0000-1000-8000-00805f9b34fb``
        where ``????`` is the 4-digit hex value of ``uuid_16``.
        """
        uuid_16 = _fit(uuid_16, 16, "16-bit UUID")
        return cls._create(f"{BASE_UUID_PREFIX}{uuid_16:04x}{BASE_UUID_SUFFIX}", 16)

    @classmethod
    def from_32_bits(cls, uuid_32: int) -> Self:
        """
        Creates a 32-bit UUID of the form ``????????-0000-1000-8000-00805f9b34fb``
        where ``????????`` is the 8-digit hex value of ``uuid_32``.
        """
        uuid_32 = _fit(uuid_32, 32, "32-bit UUID")
        return cls._create(f"{uuid_32:08x}{BASE_UUID_SUFFIX}", 32)

    @classmethod
    def from_parts(
        cls, part1: int, part2: int, part3: int, part4: int, part5: int
    ) -> Self:
        """
        Creates a 128-bit UUID from its five fields::

            11111111-2222-3333-4444-555555555555

        where each digit shows which part its hex digits are taken from.

        .. warning::
            The last field is not a plain 48-bit mask of ``part5``: its first
            8 digits are ``(part5 >> 4) & 0xffffffff`` and its last 4 digits
            are ``part5 & 0xffff``. Only values whose two pieces agree under
            that rule round-trip through the string form.

        Args:
            part1: 32-bit first field.
            part2: 16-bit second field.
            part3: 16-bit third field.
            part4: 16-bit fourth field.
            part5: Last field, carried in a 64-bit value.
        """
        part1 = _fit(part1, 32, "part1")
        part2 = _fit(part2, 16, "part2")
        part3 = _fit(part3, 16, "part3")
        part4 = _fit(part4, 16, "part4")
        part5 = _fit(part5, 64, "part5")

        part5a = (part5 >> 4) & 0xFFFFFFFF
        part5b = part5 & 0xFFFF

        return cls._create(
            f"{part1:08x}-{part2:04x}-{part3:04x}-{part4:04x}-{part5a:08x}{part5b:04x}",
            128,
        )

    @classmethod
    def from_uuid(cls, uuid: UUID) -> Self:
        """Creates a 128-bit UUID from a :class:`uuid.UUID`."""
        return cls._create(str(uuid), 128)

    @classmethod
    def from_source(cls, source: UuidSource) -> Self:
        """
        Creates a UUID from any of the :data:`UuidSource` variants.

        Args:
            source:
                A :class:`RawString`, :class:`Short16`, :class:`Short32` or
                :class:`FieldSet5`.
        """
        if isinstance(source, RawString):
            return cls.from_string(source.value)

        if isinstance(source, Short16):
            return cls.from_16_bits(source.value)

        if isinstance(source, Short32):
            return cls.from_32_bits(source.value)

        if isinstance(source, FieldSet5):
            return cls.from_parts(*source)

        assert_never(source)

    @classmethod
    def parse(cls, uuid: Union[str, GattUuid]) -> Self:
        """
        Like the constructor, but fails loudly.

        Raises:
            InvalidGattUuidError: if ``uuid`` is not a 16, 32 or 128-bit UUID.
        """
        self = cls(uuid)

        if not self:
            raise InvalidGattUuidError(uuid)

        return self

    @property
    def bit_count(self) -> int:
        """
        The bit count of the input when the UUID was created: 16, 32 or 128,
        or 0 if it was not created correctly.
        """
        return self._bit_count

    @property
    def canonical(self) -> str:
        """The full dashed 128-bit UUID, or an empty string."""
        return self._uuid

    def to_str16(self) -> str:
        """
        Returns the 16-bit portion of the UUID or an empty string if the UUID
        was not created correctly.

        Only meaningful for UUIDs on the Base UUID with a bit count of 16.
        """
        if not self._uuid:
            return self._uuid
        return self._uuid[4:8]

    def to_str32(self) -> str:
        """
        Returns the 32-bit portion of the UUID or an empty string if the UUID
        was not created correctly.

        Only meaningful for UUIDs on the Base UUID.
        """
        if not self._uuid:
            return self._uuid
        return self._uuid[:8]

    def to_str128(self) -> str:
        """Returns the full 128-bit UUID or an empty string."""
        return self._uuid

    def to_str(self) -> str:
        """
        Returns the UUID in the form it was created with: 4 hex digits for a
        16-bit UUID, 8 for a 32-bit UUID and the full UUID otherwise.
        """
        if self._bit_count == 16:
            return self.to_str16()
        if self._bit_count == 32:
            return self.to_str32()
        return self.to_str128()

    def to_uuid(self) -> Optional[UUID]:
        """Returns a :class:`uuid.UUID` or ``None`` if the UUID is empty."""
        if not self._uuid:
            return None
        return UUID(self._uuid)

    def is_base_uuid(self) -> bool:
        """
        ``True`` if the value lies on the Bluetooth Base UUID, i.e. it can be
        written in 32-bit short form.
        """
        return bool(self._uuid) and self._uuid[8:] == BASE_UUID_SUFFIX

    @property
    def description(self) -> str:
        """
        Name of the UUID if it is a known assigned number. See
        :func:`gattuuid.assigned_numbers.uuidstr_to_str`.
        """
        if not self._uuid:
            return ""
        return uuidstr_to_str(self._uuid)

    def __bool__(self) -> bool:
        return self._bit_count != 0

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"GattUuid({self._uuid!r}, bit_count={self._bit_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GattUuid):
            return NotImplemented
        return (self._uuid, self._bit_count) == (other._uuid, other._bit_count)

    def __hash__(self) -> int:
        return hash((self._uuid, self._bit_count))


def normalize_uuid_str(uuid: str) -> str:
    """
    Normalizes a UUID to the format used by the rest of a GATT stack.

    Args:
        uuid: The UUID string, in 16, 32 or 128-bit form, with or without
            separators.

    Returns:
        The full, lower case, dashed 128-bit UUID.

    Raises:
        InvalidGattUuidError: if ``uuid`` can't be normalized.
    """
    return GattUuid.parse(uuid).to_str128()


def normalize_uuid_16(uuid: int) -> str:
    """
    Normalizes a 16-bit integer UUID to the format used by the rest of a GATT
    stack.

    Returns:
        The 128-bit UUID as a string.
    """
    return GattUuid.from_16_bits(uuid).to_str128()


def normalize_uuid_32(uuid: int) -> str:
    """
    Normalizes a 32-bit integer UUID to the format used by the rest of a GATT
    stack.

    Returns:
        The 128-bit UUID as a string.
    """
    return GattUuid.from_32_bits(uuid).to_str128()
