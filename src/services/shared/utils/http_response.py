import json

from pydantic import BaseModel


def api_response(status_code: int, body: BaseModel | dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", exclude_none=True)
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }
