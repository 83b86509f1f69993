from __future__ import annotations

import pytest

from crudgen.naming import (
    NameForms,
    derive_name_forms,
    to_camel_case,
    to_kebab_case,
    to_lower_case,
)

SAMPLE_NAMES = ["SbsFee", "Order", "A", "HTTPServer", "getHTTPResponse", "UserID", "Order2Item", "ABC", "x"]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("SbsFee", "sbs-fee"),
        ("Order", "order"),
        ("A", "a"),
        ("ABC", "abc"),
        ("HTTPServer", "http-server"),
        ("getHTTPResponse", "get-http-response"),
        ("UserID", "user-id"),
        ("ABTest", "ab-test"),
        ("Order2Item", "order2-item"),
        ("Version2", "version2"),
        ("aB", "a-b"),
        ("DeliveryZoneFee", "delivery-zone-fee"),
    ],
)
def test_to_kebab_case(value, expected):
    assert to_kebab_case(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("SbsFee", "sbsFee"),
        ("A", "a"),
        ("HTTPServer", "hTTPServer"),
        ("order", "order"),
    ],
)
def test_to_camel_case_only_touches_first_character(value, expected):
    assert to_camel_case(value) == expected


def test_to_lower_case():
    assert to_lower_case("SbsFee") == "sbsfee"


def test_derive_name_forms_for_sbs_fee():
    forms = derive_name_forms("SbsFee")
    assert forms == NameForms(pascal="SbsFee", camel="sbsFee", lower="sbsfee", kebab="sbs-fee")
    assert forms.context() == {
        "pascal": "SbsFee",
        "camel": "sbsFee",
        "lower": "sbsfee",
        "kebab": "sbs-fee",
    }


def test_derive_name_forms_single_character():
    forms = derive_name_forms("A")
    assert forms.camel == "a"
    assert forms.kebab == "a"
    assert "-" not in forms.kebab


def test_derive_name_forms_rejects_empty_input():
    with pytest.raises(ValueError):
        derive_name_forms("")


@pytest.mark.parametrize("name", SAMPLE_NAMES)
def test_derivation_is_deterministic(name):
    assert derive_name_forms(name) == derive_name_forms(name)


@pytest.mark.parametrize("name", SAMPLE_NAMES)
def test_camel_keeps_remainder_verbatim(name):
    camel = derive_name_forms(name).camel
    assert camel[0] == name[0].lower()
    assert camel[1:] == name[1:]


@pytest.mark.parametrize("name", SAMPLE_NAMES)
def test_kebab_is_lower_case(name):
    kebab = derive_name_forms(name).kebab
    assert all(char == "-" or not char.isupper() for char in kebab)
    assert not kebab.startswith("-")
    assert not kebab.endswith("-")


def test_name_forms_are_immutable():
    forms = derive_name_forms("Order")
    with pytest.raises(AttributeError):
        forms.pascal = "Other"  # type: ignore[misc]
