from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.reservation.applications.reserve_property import ReservePropertyService
from services.reservation.handlers.request_models import ReservePropertyRequest
from services.reservation.handlers.response_models import to_response
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.reservation.infrastructure.secrets_manager_access_token_provider import (
    SecretsManagerAccessTokenProvider,
)
from services.reservation.infrastructure.stub_rental_property_gateway import (
    StubRentalPropertyGateway,
)
from services.shared.utils import api_response

logger = Logger()

repository = DynamoDBReservationRepository()
token_provider = SecretsManagerAccessTokenProvider()
gateway = StubRentalPropertyGateway()
service = ReservePropertyService(
    repository=repository, token_provider=token_provider, gateway=gateway
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """物件予約 Lambda Handler

    POST /reservations のボディを検証し、予約結果を HTTP レスポンスに変換する。
    """
    logger.info("Received reserve property request")

    try:
        request = ReservePropertyRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        logger.warning("Invalid reserve property request", extra={"errors": e.errors()})
        return api_response(
            400,
            {
                "message": "Invalid request",
                "errors": [_format_error(error) for error in e.errors()],
            },
        )

    logger.append_keys(property_name=request.property_name)
    outcome = service.reserve(request.to_domain())
    return to_response(outcome)


def _format_error(error: dict) -> str:
    """pydantic のエラーを「フィールド: メッセージ」形式にする"""
    location = ".".join(str(part) for part in error["loc"])
    if not location:
        return error["msg"]
    return f"{location}: {error['msg']}"
