"""
Bluetooth Assigned Numbers
--------------------------

The Base UUID and the 16-bit UUIDs most commonly seen in a GATT database.

See <https://www.bluetooth.com/specifications/assigned-numbers/>.
"""

BASE_UUID = "00000000-0000-1000-8000-00805f9b34fb"
"""
The Bluetooth Base UUID. 16-bit and 32-bit UUIDs are aliases for a value
on this template.
"""

BASE_UUID_PREFIX = "0000"
"""
Digits that pad a 16-bit UUID up to the 32-bit region of the Base UUID.
"""

BASE_UUID_SUFFIX = "-0000-1000-8000-00805f9b34fb"
"""
The fixed tail of the Base UUID, following the 32-bit region.
"""


uuid16_dict: dict[int, str] = {
    # GATT declarations
    0x1800: "Generic Access Profile",
    0x1801: "Generic Attribute Profile",
    0x2800: "Primary Service",
    0x2801: "Secondary Service",
    0x2802: "Include",
    0x2803: "Characteristic Declaration",
    # descriptors
    0x2900: "Characteristic Extended Properties",
    0x2901: "Characteristic User Description",
    0x2902: "Client Characteristic Configuration",
    0x2903: "Server Characteristic Configuration",
    0x2904: "Characteristic Presentation Format",
    0x2905: "Characteristic Aggregate Format",
    0x2906: "Valid Range",
    0x2907: "External Report Reference",
    0x2908: "Report Reference",
    0x2909: "Number of Digitals",
    0x290A: "Value Trigger Setting",
    0x290B: "Environmental Sensing Configuration",
    0x290C: "Environmental Sensing Measurement",
    0x290D: "Environmental Sensing Trigger Setting",
    0x290E: "Time Trigger Setting",
    # services
    0x1802: "Immediate Alert",
    0x1803: "Link Loss",
    0x1804: "Tx Power",
    0x1805: "Current Time Service",
    0x1806: "Reference Time Update Service",
    0x1807: "Next DST Change Service",
    0x1808: "Glucose",
    0x1809: "Health Thermometer",
    0x180A: "Device Information",
    0x180D: "Heart Rate",
    0x180E: "Phone Alert Status Service",
    0x180F: "Battery Service",
    0x1810: "Blood Pressure",
    0x1811: "Alert Notification Service",
    0x1812: "Human Interface Device",
    0x1813: "Scan Parameters",
    0x1814: "Running Speed and Cadence",
    0x1815: "Automation IO",
    0x1816: "Cycling Speed and Cadence",
    0x1818: "Cycling Power",
    0x1819: "Location and Navigation",
    0x181A: "Environmental Sensing",
    0x181B: "Body Composition",
    0x181C: "User Data",
    0x181D: "Weight Scale",
    0x181E: "Bond Management",
    0x181F: "Continuous Glucose Monitoring",
    0x1826: "Fitness Machine",
    # characteristics
    0x2A00: "Device Name",
    0x2A01: "Appearance",
    0x2A02: "Peripheral Privacy Flag",
    0x2A03: "Reconnection Address",
    0x2A04: "Peripheral Preferred Connection Parameters",
    0x2A05: "Service Changed",
    0x2A06: "Alert Level",
    0x2A07: "Tx Power Level",
    0x2A08: "Date Time",
    0x2A19: "Battery Level",
    0x2A1C: "Temperature Measurement",
    0x2A23: "System ID",
    0x2A24: "Model Number String",
    0x2A25: "Serial Number String",
    0x2A26: "Firmware Revision String",
    0x2A27: "Hardware Revision String",
    0x2A28: "Software Revision String",
    0x2A29: "Manufacturer Name String",
    0x2A2B: "Current Time",
    0x2A37: "Heart Rate Measurement",
    0x2A38: "Body Sensor Location",
    0x2A39: "Heart Rate Control Point",
    0x2A4D: "Report",
    0x2A50: "PnP ID",
    0x2A6E: "Temperature",
    0x2A6F: "Humidity",
}


def uuidstr_to_str(uuid_: str) -> str:
    """
    Look up the name of a UUID given in canonical 128-bit form.

    Args:
        uuid_: A canonical, dashed 128-bit UUID string.

    Returns:
        The assigned name, ``"Vendor specific"`` for an unnamed value on the
        Base UUID template, or ``"Unknown"`` for anything else.
    """
    uuid_ = uuid_.lower()

    if not uuid_.endswith(BASE_UUID_SUFFIX) or len(uuid_) != len(BASE_UUID):
        return "Unknown"

    try:
        value = int(uuid_[:8], 16)
    except ValueError:
        return "Unknown"

    if value & 0xFFFF0000:
        return "Vendor specific"

    return uuid16_dict.get(value, "Vendor specific")
