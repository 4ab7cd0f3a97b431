import pytest

from agri_solution.errors import ValidationError
from agri_solution.validation import normalize_email, require, validate_new_user


def test_require_rejects_falsy_values():
    for value in (None, "", 0):
        with pytest.raises(ValidationError) as exc:
            require({"id": value}, ("id",), "L'ID est requis.")
        assert exc.value.message == "L'ID est requis."


def test_require_accepts_zero_for_nullable_only_fields():
    require({"name": "Hoe", "stock": 0}, ("name", "stock"), "manquant", nullable_only=("stock",))
    with pytest.raises(ValidationError):
        require({"name": "Hoe"}, ("name", "stock"), "manquant", nullable_only=("stock",))


def test_normalize_email_lowercases():
    assert normalize_email(" Awa.Diallo@AgriSolution.SN ") == "awa.diallo@agrisolution.sn"


def test_validate_new_user_collects_both_errors():
    with pytest.raises(ValidationError) as exc:
        validate_new_user({"email": 12})
    err = exc.value
    assert err.status_code == 400
    assert [e["path"] for e in err.errors] == ["name", "email"]
    assert err.errors[1]["value"] == 12
    assert err.to_dict()["errors"] == err.errors


def test_validate_new_user_returns_clean_values():
    assert validate_new_user({"name": " Awa ", "email": "AWA@agrisolution.sn"}) == (
        "Awa", "awa@agrisolution.sn"
    )
