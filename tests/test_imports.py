#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Tests for `gattuuid` package."""


def test_import():
    """Test that the public names are exported from the top-level package."""
    import gattuuid

    for name in gattuuid.__all__:
        assert hasattr(gattuuid, name), name

    assert gattuuid.GattUuid is gattuuid.uuids.GattUuid
    assert isinstance(gattuuid.__version__, str)
