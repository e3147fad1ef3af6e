from seedkit.exceptions import (
    DuplicateNameError,
    ExecutionFailedError,
    InvalidNameError,
    NotFoundError,
    RegistrationError,
    SeederError,
)


def test_error_taxonomy_shares_base():
    for err in (
        InvalidNameError(),
        DuplicateNameError("a"),
        NotFoundError("a"),
        ExecutionFailedError("a", RuntimeError("x")),
        RegistrationError("a", DuplicateNameError("a")),
    ):
        assert isinstance(err, SeederError)


def test_to_dict():
    err = NotFoundError("users")

    assert err.to_dict() == {
        "code": "NOT_FOUND",
        "message": "seeder with name 'users' not found",
        "details": {"name": "users"},
    }


def test_registration_error_names_reason():
    cause = InvalidNameError("")
    err = RegistrationError("", cause)

    assert err.details == {"name": "", "reason": "INVALID_NAME"}
    assert "cannot be empty" in str(err)
