"""Request Schemas — validation rules for auth and post bodies.

Tests cover:
    - register: well-formed email kept as submitted, password >= 6, unknown keys rejected
    - login: password non-empty
    - post create: title required and non-empty, content defaults to ""
    - post update: >= 1 field, no nulls, empty content allowed, author_id rejected
    - validate_body reports the first violated rule
"""

from blog_api.core.result import Err, FailureKind, Ok
from blog_api.schemas.auth import LoginRequest, RegisterRequest
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.schemas.validation import validate_body


# ─── Register / Login ────────────────────────────────────────────

def test_register_accepts_valid_body():
    result = validate_body(RegisterRequest, {"email": "a@x.com", "password": "secret1"})
    assert isinstance(result, Ok)
    assert result.value.email == "a@x.com"


def test_register_rejects_short_password():
    result = validate_body(RegisterRequest, {"email": "a@x.com", "password": "12345"})
    assert isinstance(result, Err)
    assert result.kind == FailureKind.INVALID_INPUT
    assert result.detail.startswith("password:")


def test_register_rejects_malformed_email():
    result = validate_body(RegisterRequest, {"email": "not-an-email", "password": "secret1"})
    assert isinstance(result, Err)
    assert result.detail.startswith("email:")


def test_register_reports_missing_field():
    result = validate_body(RegisterRequest, {"password": "secret1"})
    assert result.detail == "email: Field required"


def test_register_rejects_unknown_keys():
    result = validate_body(
        RegisterRequest,
        {"email": "a@x.com", "password": "secret1", "admin": True},
    )
    assert isinstance(result, Err)
    assert result.detail.startswith("admin:")


def test_login_requires_non_empty_password():
    result = validate_body(LoginRequest, {"email": "a@x.com", "password": ""})
    assert isinstance(result, Err)
    assert result.detail.startswith("password:")


def test_login_accepts_short_password():
    assert isinstance(
        validate_body(LoginRequest, {"email": "a@x.com", "password": "x"}), Ok,
    )


def test_non_object_body_is_invalid():
    result = validate_body(LoginRequest, None)
    assert isinstance(result, Err)
    assert result.kind == FailureKind.INVALID_INPUT


# ─── Post create ─────────────────────────────────────────────────

def test_post_create_defaults_content_to_empty():
    result = validate_body(PostCreate, {"title": "Hello"})
    assert result.value.content == ""


def test_post_create_requires_title():
    result = validate_body(PostCreate, {"content": "body"})
    assert result.detail == "title: Field required"


def test_post_create_rejects_empty_title():
    assert isinstance(validate_body(PostCreate, {"title": ""}), Err)


def test_post_create_rejects_author_id():
    result = validate_body(PostCreate, {"title": "t", "author_id": "someone"})
    assert isinstance(result, Err)


# ─── Post update ─────────────────────────────────────────────────

def test_post_update_rejects_empty_body():
    result = validate_body(PostUpdate, {})
    assert isinstance(result, Err)
    assert result.detail == "At least one of title or content must be provided"


def test_post_update_allows_empty_content():
    result = validate_body(PostUpdate, {"content": ""})
    assert isinstance(result, Ok)
    assert result.value.changes() == {"content": ""}


def test_post_update_changes_only_sent_fields():
    result = validate_body(PostUpdate, {"title": "New"})
    assert result.value.changes() == {"title": "New"}


def test_post_update_rejects_null_title():
    result = validate_body(PostUpdate, {"title": None})
    assert isinstance(result, Err)
    assert result.detail == "title must be a string"


def test_post_update_rejects_empty_title():
    assert isinstance(validate_body(PostUpdate, {"title": ""}), Err)


def test_post_update_rejects_author_reassignment():
    assert isinstance(validate_body(PostUpdate, {"authorId": "other"}), Err)


def test_email_is_kept_as_submitted():
    result = validate_body(RegisterRequest, {"email": "Mixed@Blog.IO", "password": "secret1"})
    assert isinstance(result, Ok)
    assert result.value.email == "Mixed@Blog.IO"
