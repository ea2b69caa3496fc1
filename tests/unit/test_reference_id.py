import re

import pytest

from app.services.reference_id import make_reference_id, to_base36

PATTERN = re.compile(r"^EPRD-100500-[0-9A-Z]{5}[0-9A-Z]{4}$")


@pytest.mark.parametrize(
    "number, expected",
    [(0, "0"), (35, "Z"), (36, "10"), (1295, "ZZ"), (1700000000000, "LOYW3V28")],
)
def test_to_base36(number, expected):
    assert to_base36(number) == expected


def test_to_base36_rejects_negative():
    with pytest.raises(ValueError):
        to_base36(-1)


def test_reference_id_shape():
    assert PATTERN.match(make_reference_id("EPRD-100500"))


def test_reference_id_time_component_is_last_five_base36_digits():
    reference = make_reference_id("EPRD-100500", clock=lambda: 1700000000.0)
    assert reference.startswith("EPRD-100500-W3V28")


def test_reference_id_short_clock_is_zero_padded():
    reference = make_reference_id("EPRD-100500", clock=lambda: 0.035)
    assert reference.startswith("EPRD-100500-0000Z")


def test_reference_id_random_component_differs_in_same_millisecond():
    frozen = lambda: 1700000000.0  # noqa: E731
    references = {make_reference_id("EPRD-100500", clock=frozen) for _ in range(20)}
    assert len(references) > 1


@pytest.mark.parametrize("code", [None, "", "   "])
def test_reference_id_without_product_code(code):
    assert re.match(r"^RFQ-[0-9A-Z]{9}$", make_reference_id(code))
