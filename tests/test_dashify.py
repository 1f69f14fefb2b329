#!/usr/bin/env python

"""Tests for the cleaning, classification and dash insertion steps."""

import pytest

from gattuuid.uuids import classify, clean, dashify, expand


@pytest.mark.parametrize(
    "value,expected",
    [
        ("", ""),
        ("rqzp", ""),
        ("0000180A", "0000180a"),
        ("0000180A-0000-1000-8000-00805F9B34FB", "0000180a00001000800000805f9b34fb"),
        (
            "0000180A/0000.1000_zzzzzz_8000+00805f9b34fb",
            "0000180a00001000800000805f9b34fb",
        ),
        ("{DEAD:beef}", "deadbeef"),
        ("gattuuid", "ad"),
    ],
)
def test_clean(value: str, expected: str):
    assert clean(value) == expected


@pytest.mark.parametrize(
    "digits,bit_count",
    [
        ("", 0),
        ("180", 0),
        ("180a", 16),
        ("180a0", 0),
        ("0000180a", 32),
        ("0000180a0000", 0),
        ("0000180a00001000800000805f9b34fb", 128),
        ("0000180a00001000800000805f9b34fb0", 0),
    ],
)
def test_classify(digits: str, bit_count: int):
    assert classify(digits) == bit_count


def test_expand():
    assert expand("2901") == ("00002901-0000-1000-8000-00805f9b34fb", 16)
    assert expand("0000180a") == ("0000180a-0000-1000-8000-00805f9b34fb", 32)
    assert expand("0000180a00001000800000805f9b34fb") == (
        "0000180a00001000800000805f9b34fb",
        128,
    )
    assert expand("12345") == ("", 0)
    assert expand("") == ("", 0)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("0000180A-0000-1000-8000-00805f9b34fb", "0000180a-0000-1000-8000-00805f9b34fb"),
        ("0000180A00001000800000805f9b34fb", "0000180a-0000-1000-8000-00805f9b34fb"),
        (
            "0000180A/0000.1000_zzzzzz_8000+00805f9b34fb",
            "0000180a-0000-1000-8000-00805f9b34fb",
        ),
        ("0000180A", "0000180a"),
        ("0000180A.0000.100", "0000180a-0000-100"),
        ("0000180a0000100", "0000180a-0000-100"),
        ("rqzp", ""),
        ("", ""),
    ],
)
def test_dashify(value: str, expected: str):
    assert dashify(value) == expected


def test_dashify_partial_never_adds_trailing_dash():
    assert dashify("012345678") == "01234567-8"
    assert dashify("0123456789ab") == "01234567-89ab"
    assert dashify("0123456789abcdef0123") == "01234567-89ab-cdef-0123"
    assert dashify("0123456789abcdef01234") == "01234567-89ab-cdef-0123-4"


def test_dashify_idempotent():
    value = dashify("0000180a00001000800000805f9b34fb")
    assert dashify(value) == value
