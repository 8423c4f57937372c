from jobly.domain.validation import (
    NUM_EMPLOYEES_MAX,
    validate_company_create,
    validate_company_update,
)


# ============================================================================
# CREATE SHAPE
# ============================================================================


def test_create_valid_minimal_payload():
    result = validate_company_create({"handle": "acme", "name": "Acme"})
    assert result.valid
    assert result.errors == ()
    assert result.data == {"handle": "acme", "name": "Acme"}


def test_create_valid_full_payload():
    payload = {
        "handle": "acme",
        "name": "Acme",
        "num_employees": 40,
        "description": "Anvils",
        "logo_url": "http://acme.example.com/logo.png",
    }
    result = validate_company_create(payload)
    assert result.valid
    assert result.data == payload


def test_create_missing_name():
    result = validate_company_create({"handle": "acme"})
    assert not result.valid
    assert result.errors == ("name: Field required",)


def test_create_missing_handle_and_name_reports_both_in_schema_order():
    result = validate_company_create({})
    assert not result.valid
    assert len(result.errors) == 2
    assert result.errors[0].startswith("name:")
    assert result.errors[1].startswith("handle:")


def test_create_rejects_string_employee_count():
    """Type mismatches are not coerced."""
    result = validate_company_create({"handle": "acme", "name": "Acme", "num_employees": "40"})
    assert not result.valid
    assert len(result.errors) == 1
    assert result.errors[0].startswith("num_employees:")


def test_create_rejects_boolean_employee_count():
    result = validate_company_create({"handle": "acme", "name": "Acme", "num_employees": True})
    assert not result.valid
    assert result.errors[0].startswith("num_employees:")


def test_create_rejects_negative_employee_count():
    result = validate_company_create({"handle": "acme", "name": "Acme", "num_employees": -1})
    assert not result.valid
    assert result.errors[0].startswith("num_employees:")


def test_create_rejects_non_url_logo():
    result = validate_company_create({"handle": "acme", "name": "Acme", "logo_url": "not a url"})
    assert not result.valid
    assert result.errors[0].startswith("logo_url:")


def test_create_rejects_too_long_handle():
    result = validate_company_create({"handle": "x" * 26, "name": "Acme"})
    assert not result.valid
    assert result.errors[0].startswith("handle:")


def test_create_rejects_unknown_field():
    result = validate_company_create({"handle": "acme", "name": "Acme", "ceo": "Wile E."})
    assert not result.valid
    assert result.errors == ("ceo: Extra inputs are not permitted",)


def test_create_allows_null_optional_fields():
    result = validate_company_create(
        {"handle": "acme", "name": "Acme", "num_employees": None, "logo_url": None}
    )
    assert result.valid


def test_create_rejects_non_object_payloads():
    for payload in (None, [], "acme", 3):
        result = validate_company_create(payload)
        assert not result.valid
        assert result.errors[0].startswith("payload:")


# ============================================================================
# UPDATE SHAPE
# ============================================================================


def test_update_requires_name():
    result = validate_company_update({"description": "new"})
    assert not result.valid
    assert result.errors == ("name: Field required",)


def test_update_discards_handle_from_body():
    result = validate_company_update({"handle": "other", "name": "Acme"})
    assert result.valid
    assert result.data == {"name": "Acme"}


def test_update_keeps_only_sent_fields():
    result = validate_company_update({"name": "Acme", "num_employees": 5})
    assert result.valid
    assert result.data == {"name": "Acme", "num_employees": 5}


def test_create_rejects_employee_count_above_column_range():
    result = validate_company_create(
        {"handle": "acme", "name": "Acme", "num_employees": NUM_EMPLOYEES_MAX + 1}
    )
    assert not result.valid
    assert len(result.errors) == 1
    assert result.errors[0].startswith("num_employees:")


def test_create_accepts_employee_count_at_column_limit():
    result = validate_company_create(
        {"handle": "acme", "name": "Acme", "num_employees": NUM_EMPLOYEES_MAX}
    )
    assert result.valid
