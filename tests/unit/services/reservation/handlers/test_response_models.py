import json

from services.reservation.domain.outcome import (
    CredentialUnavailable,
    OperationFailed,
    Success,
    ValidationFailed,
)
from services.reservation.domain.value_object import ConfirmationNumber
from services.reservation.handlers.response_models import (
    NOT_LOGGED_IN_MESSAGE,
    to_response,
)


class TestToResponse:
    def test_success(self):
        response = to_response(Success(confirmation_number=ConfirmationNumber(123)))

        assert response["statusCode"] == 201
        assert json.loads(response["body"]) == {
            "status": "success",
            "data": {"confirmation_number": 123},
        }

    def test_credential_unavailable(self):
        response = to_response(CredentialUnavailable())

        assert response["statusCode"] == 401
        assert json.loads(response["body"]) == {
            "status": "error",
            "message": NOT_LOGGED_IN_MESSAGE,
        }

    def test_validation_failed_lists_every_error(self):
        errors = (
            "Must be at least 7 days out",
            "'P1' has already been reserved by you.",
        )

        response = to_response(ValidationFailed(errors=errors))

        assert response["statusCode"] == 422
        assert json.loads(response["body"])["errors"] == list(errors)

    def test_operation_failed(self):
        response = to_response(OperationFailed(message="An unexpected error occurred"))

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["message"] == "An unexpected error occurred"
        assert response["headers"] == {"Content-Type": "application/json"}
