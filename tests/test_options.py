import pytest

from ign_vault.networking.errors import InvalidInput, MissingRequiredField
from ign_vault.options import OptionsSpec, enforce_required, filter_allowed


def test_filter_allowed_drops_unknown_keys():
    assert filter_allowed({"a": 1, "b": 2}, {"a"}) == {"a": 1}


def test_filter_allowed_returns_a_new_mapping():
    body = {"a": 1, "b": 2}

    filtered = filter_allowed(body, ["a", "b"])
    filtered["c"] = 3

    assert body == {"a": 1, "b": 2}


def test_enforce_required_names_the_missing_key():
    with pytest.raises(MissingRequiredField) as excinfo:
        enforce_required({"a": 1}, {"a", "b"})

    assert excinfo.value.field == "b"
    assert excinfo.value.fields == ("b",)
    assert '"b"' in str(excinfo.value)


def test_enforce_required_reports_every_missing_key():
    with pytest.raises(MissingRequiredField) as excinfo:
        enforce_required({}, ["secret_threshold", "secret_shares"])

    assert excinfo.value.fields == ("secret_shares", "secret_threshold")
    assert excinfo.value.field == "secret_shares"


def test_enforce_required_returns_body_unchanged():
    body = {"a": 1, "extra": True}

    assert enforce_required(body, ["a"]) is body


def test_none_values_count_as_present():
    assert enforce_required({"a": None}, ["a"]) == {"a": None}


def test_non_mapping_body_is_rejected():
    with pytest.raises(InvalidInput):
        filter_allowed([("a", 1)], {"a"})
    with pytest.raises(InvalidInput):
        enforce_required("a=1", {"a"})


def test_options_filter_then_require():
    options = OptionsSpec(allowed={"a", "b"}, required={"a"})

    assert options.apply({"a": 1, "z": 0}) == {"a": 1}
    with pytest.raises(MissingRequiredField):
        options.apply({"b": 2})


def test_required_key_outside_allowed_set_always_fails():
    options = OptionsSpec(allowed={"a"}, required={"a", "b"})

    with pytest.raises(MissingRequiredField) as excinfo:
        options.apply({"a": 1, "b": 2})

    assert excinfo.value.field == "b"
