# -*- coding: utf-8 -*-
"""
Service table
-------------

An example normalizing the UUIDs of a GATT service table written in mixed
notations, as they might appear in a device's configuration.

"""
import sys

from gattuuid import GattUuid

SERVICE_TABLE = {
    "180A": ["2A29", "2A24", "2A26"],
    "0000180F-0000-1000-8000-00805F9B34FB": ["2a19"],
    "00000001.1E3C.FAD4.74E2.97A033F1BFAA": [
        "00000002-1e3c-fad4-74e2-97a033f1bfaa",
        "0x2901",
    ],
}


def main() -> int:
    status = 0

    for service_uuid, characteristic_uuids in SERVICE_TABLE.items():
        service = GattUuid(service_uuid)
        print(f"{service.to_str128()} ({service.bit_count}-bit): {service.description}")

        for char_uuid in characteristic_uuids:
            char = GattUuid(char_uuid)
            if not char:
                print(f"\tinvalid UUID {char_uuid!r}", file=sys.stderr)
                status = 1
                continue
            print(f"\t{char} -> {char.to_str128()}: {char.description}")

    return status


if __name__ == "__main__":
    sys.exit(main())
