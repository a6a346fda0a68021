import json
import os
from datetime import datetime, timezone
from typing import Callable

import boto3
from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from services.reservation.domain.gateway import AccessTokenProvider
from services.reservation.domain.value_object import AccessToken

logger = Logger(child=True)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SecretsManagerAccessTokenProvider(AccessTokenProvider):
    """Secrets Manager にキャッシュされたレンタル API トークンを取得する

    シークレットは {"access_token": "...", "expires_at": "<ISO 8601>"} 形式。
    タイムゾーンのない expires_at は UTC とみなす。
    未ログイン（シークレット未登録・空・期限切れ）の場合は None を返す。
    """

    def __init__(
        self,
        secret_id: str | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.secret_id = secret_id or os.getenv("RENTAL_API_TOKEN_SECRET_ARN")
        self.client = boto3.client("secretsmanager")
        self._clock = clock

    def find_token(self) -> AccessToken | None:
        try:
            response = self.client.get_secret_value(SecretId=self.secret_id)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ResourceNotFoundException":
                logger.info("Rental API token is not cached")
                return None
            raise

        payload = json.loads(response.get("SecretString") or "{}")
        access_token = payload.get("access_token")
        expires_at = payload.get("expires_at")
        if not access_token or not expires_at:
            return None

        expiration = datetime.fromisoformat(expires_at.replace("Z", "+00:00"))
        if expiration.tzinfo is None:
            expiration = expiration.replace(tzinfo=timezone.utc)

        token = AccessToken(value=access_token, expires_at=expiration)
        if token.is_expired(self._clock()):
            logger.info("Cached rental API token has expired")
            return None
        return token
