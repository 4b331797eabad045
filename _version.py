# -*- coding: utf-8 -*-
"""
Version of the radixcrunch project
* version = "0.1.0" or "0.1.0-dev0"
* version_info = named tuple (0, 1, 0, "dev", 0)
* hexversion: 0x00010000
* strictversion = "0.1.0a0"
"""

from collections import namedtuple

MAJOR = 0
MINOR = 1
MICRO = 0  # <=15
RELEV = "dev"
SERIAL = 0  # <=15

RELEASE_LEVEL_VALUE = {"dev": 0, "alpha": 10, "beta": 11, "rc": 12, "final": 15}

_version_info = namedtuple(
    "version_info", ["major", "minor", "micro", "releaselevel", "serial"]
)

version_info = _version_info(MAJOR, MINOR, MICRO, RELEV, SERIAL)


def _strversions(info):
    version = strictversion = "%d.%d.%d" % info[:3]
    if info.releaselevel != "final":
        version += "-%s%s" % info[-2:]
        if RELEASE_LEVEL_VALUE.get(info.releaselevel, 0) <= 10:
            prerel = "a"
        else:
            prerel = "b"
        strictversion += prerel + str(info.serial)
    return version, strictversion


def _hexversion(info):
    level = RELEASE_LEVEL_VALUE.get(info.releaselevel, 0)
    return (
        info.major << 24 | info.minor << 16 | info.micro << 8 | level << 4 | info.serial
    )


version, strictversion = _strversions(version_info)
hexversion = _hexversion(version_info)

if __name__ == "__main__":
    print(version)
