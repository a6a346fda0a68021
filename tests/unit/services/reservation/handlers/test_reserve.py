import importlib
import json
from dataclasses import dataclass
from datetime import date
from unittest.mock import patch

import pytest

from services.reservation.domain.entity import ReservationRequest
from services.reservation.domain.outcome import Success
from services.reservation.domain.value_object import ConfirmationNumber

MODULE = "services.reservation.handlers.reserve"


@dataclass
class FakeLambdaContext:
    function_name: str = "reserve-property"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:reserve-property"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def handler_module():
    """boto3 をパッチした状態でハンドラモジュールを読み込む"""
    with patch("boto3.resource"), patch("boto3.client"):
        module = importlib.import_module(MODULE)
    return module


@pytest.fixture
def mock_service(handler_module):
    with patch.object(handler_module, "service") as service:
        service.reserve.return_value = Success(
            confirmation_number=ConfirmationNumber(value=123)
        )
        yield service


def _event(body):
    return {
        "resource": "/reservations",
        "path": "/reservations",
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json"},
        "requestContext": {"requestId": "test-request"},
        "body": body,
        "isBase64Encoded": False,
    }


class TestReserveHandler:
    def test_valid_body_is_reserved(self, handler_module, mock_service):
        body = json.dumps(
            {
                "email": "a@x.com",
                "reservation_date": "2024-07-01",
                "property_name": "P1",
            }
        )

        response = handler_module.lambda_handler(_event(body), FakeLambdaContext())

        assert response["statusCode"] == 201
        assert json.loads(response["body"]) == {
            "status": "success",
            "data": {"confirmation_number": 123},
        }
        mock_service.reserve.assert_called_once_with(
            ReservationRequest(
                email="a@x.com",
                reservation_date=date(2024, 7, 1),
                property_name="P1",
            )
        )

    def test_missing_body_is_bad_request(self, handler_module, mock_service):
        response = handler_module.lambda_handler(_event(None), FakeLambdaContext())

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["message"] == "Invalid request"
        assert "email: Field required" in body["errors"]
        assert "reservation_date: Field required" in body["errors"]
        mock_service.reserve.assert_not_called()

    def test_invalid_json_is_bad_request(self, handler_module, mock_service):
        response = handler_module.lambda_handler(
            _event("not json"), FakeLambdaContext()
        )

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["message"] == "Invalid request"
        assert len(body["errors"]) == 1
        mock_service.reserve.assert_not_called()

    def test_invalid_field_error_names_the_field(self, handler_module, mock_service):
        body = json.dumps(
            {
                "email": "not-an-email",
                "reservation_date": "2024-07-01",
                "property_name": "P1",
            }
        )

        response = handler_module.lambda_handler(_event(body), FakeLambdaContext())

        assert response["statusCode"] == 400
        errors = json.loads(response["body"])["errors"]
        assert len(errors) == 1
        assert errors[0].startswith("email: ")
        mock_service.reserve.assert_not_called()
