"""DynamoDB translation backend settings."""

from typing import Optional

from pydantic import Field

from localekit.configuration.base import IntegrationSettings


class DynamoDBSettings(IntegrationSettings):
    """DynamoDB table holding translation records.

    Environment Variables:
        DYNAMODB_TABLE_NAME: Table name (default: translations)
        AWS_REGION: AWS region (default: ca-central-1)
        DYNAMODB_ENDPOINT_URL: Optional endpoint override for local DynamoDB
    """

    DYNAMODB_TABLE_NAME: str = Field(default="translations", alias="DYNAMODB_TABLE_NAME")
    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
    DYNAMODB_ENDPOINT_URL: Optional[str] = Field(
        default=None, alias="DYNAMODB_ENDPOINT_URL"
    )
