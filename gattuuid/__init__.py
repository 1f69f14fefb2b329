# -*- coding: utf-8 -*-

"""Top-level package for gattuuid."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from gattuuid.__version__ import __version__
from gattuuid.exc import GattUuidError, InvalidGattUuidError
from gattuuid.uuids import (
    FieldSet5,
    GattUuid,
    RawString,
    Short16,
    Short32,
    UuidSource,
    clean,
    classify,
    dashify,
    expand,
    normalize_uuid_16,
    normalize_uuid_32,
    normalize_uuid_str,
)

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
if bool(os.environ.get("GATTUUID_LOGGING", False)):
    FORMAT = "%(asctime)-15s %(name)-8s %(threadName)s %(levelname)s: %(message)s"
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=FORMAT))
    _logger.addHandler(handler)
    _logger.setLevel(logging.DEBUG)


__all__ = [
    "__version__",
    "FieldSet5",
    "GattUuid",
    "GattUuidError",
    "InvalidGattUuidError",
    "RawString",
    "Short16",
    "Short32",
    "UuidSource",
    "clean",
    "classify",
    "cli",
    "dashify",
    "expand",
    "normalize_uuid_16",
    "normalize_uuid_32",
    "normalize_uuid_str",
]


def cli(argv: Optional[list[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Normalize Bluetooth GATT UUIDs to canonical form"
    )
    parser.add_argument("uuids", nargs="+", metavar="UUID", help="UUID to normalize")
    parser.add_argument(
        "-w",
        "--width",
        action="store_true",
        help="print the UUID in the width it was given (4, 8 or 32 digits)",
    )
    parser.add_argument(
        "-s",
        "--strict",
        action="store_true",
        help="exit with status 1 if any UUID is invalid",
    )
    args = parser.parse_args(argv)

    status = 0
    for value in args.uuids:
        uuid = GattUuid(value)
        if not uuid and args.strict:
            status = 1
        out = uuid.to_str() if args.width else uuid.to_str128()
        print(f"{value}\t{uuid.bit_count}\t{out}")

    return status


if __name__ == "__main__":
    sys.exit(cli())
