import os
from datetime import date, datetime, timezone

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.reservation.domain.entity import ExistingReservation, Reservation
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import ConfirmationNumber
from services.shared.domain.exception.exceptions import DuplicateResourceException


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_date(self, reservation_date: date) -> list[ExistingReservation]:
        """指定日の予約をすべて取得する"""
        kwargs: dict = {
            "KeyConditionExpression": Key("PK").eq(f"DATE#{reservation_date.isoformat()}")
            & Key("SK").begins_with("PROPERTY#"),
            "ConsistentRead": True,
        }
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key

        return [self._to_entity(item) for item in items]

    def save(
        self, reservation: Reservation, confirmation_number: ConfirmationNumber
    ) -> None:
        """確定した予約をDBに保存する"""
        item = {
            "PK": f"DATE#{reservation.reservation_date.isoformat()}",
            "SK": f"PROPERTY#{reservation.property_name}#EMAIL#{reservation.email}",
            "entity_type": "RESERVATION",
            "email": reservation.email,
            "reservation_date": reservation.reservation_date.isoformat(),
            "property_name": reservation.property_name,
            "confirmation_number": int(confirmation_number),
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Reservation already exists: {item['PK']} {item['SK']}"
                ) from e
            raise

    def _to_entity(self, item: dict) -> ExistingReservation:
        return ExistingReservation(
            email=item["email"],
            reservation_date=date.fromisoformat(item["reservation_date"]),
            property_name=item["property_name"],
        )
