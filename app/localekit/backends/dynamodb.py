"""DynamoDB translation backend.

Table layout:
    - PK: locale (string)
    - SK: key (string)
    - Attributes: value (string), updated_at (number, epoch seconds)

put_item is an unconditional overwrite, so repeated saves of the same
(locale, key) converge to a single item.
"""

import time
from typing import Any, Dict, List, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from localekit.backends.base import Backend
from localekit.configuration import DynamoDBSettings
from localekit.logging import get_module_logger
from localekit.models import Translation
from localekit.operations import OperationResult

logger = get_module_logger()

PARTITION_KEY = "locale"
SORT_KEY = "key"

THROTTLING_ERRS = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "ProvisionedThroughputExceededException",
}


def create_dynamodb_client(settings: DynamoDBSettings) -> BaseClient:
    """Create a boto3 DynamoDB client from settings."""
    kwargs: Dict[str, Any] = {"region_name": settings.AWS_REGION}
    if settings.DYNAMODB_ENDPOINT_URL:
        kwargs["endpoint_url"] = settings.DYNAMODB_ENDPOINT_URL
    return boto3.client("dynamodb", **kwargs)


def _classify_error(exc: Exception, action: str) -> OperationResult:
    if isinstance(exc, ClientError):
        error_code = exc.response.get("Error", {}).get("Code")
        if error_code in THROTTLING_ERRS:
            return OperationResult.transient_error(
                f"DynamoDB throttled {action}", error_code=error_code
            )
        return OperationResult.permanent_error(
            f"DynamoDB {action} failed: {exc}", error_code=error_code
        )
    return OperationResult.transient_error(
        f"DynamoDB {action} failed: {type(exc).__name__}: {exc}",
        error_code="CONNECTION_ERROR",
    )


class DynamoDBBackend(Backend):
    """Backend storing one DynamoDB item per translation."""

    def __init__(
        self,
        table_name: Optional[str] = None,
        client: Optional[BaseClient] = None,
        settings: Optional[DynamoDBSettings] = None,
    ):
        """Initialize the DynamoDB backend.

        Args:
            table_name: Table name. Defaults to settings.DYNAMODB_TABLE_NAME.
            client: Pre-configured boto3 DynamoDB client.
            settings: Settings used for defaults and client creation.
        """
        settings = settings or DynamoDBSettings()
        self.table_name = table_name or settings.DYNAMODB_TABLE_NAME
        self._client = client or create_dynamodb_client(settings)
        logger.info("initialized_dynamodb_backend", table_name=self.table_name)

    def _item_key(self, translation: Translation) -> Dict[str, Dict[str, str]]:
        return {
            PARTITION_KEY: {"S": translation.locale},
            SORT_KEY: {"S": translation.key},
        }

    def load_translations(self) -> List[Translation]:
        """Scan the whole table.

        A failed scan is logged and yields an empty list.
        """
        translations: List[Translation] = []
        try:
            paginator = self._client.get_paginator("scan")
            for page in paginator.paginate(TableName=self.table_name):
                for item in page.get("Items", []):
                    translations.append(
                        Translation(
                            key=item[SORT_KEY]["S"],
                            locale=item[PARTITION_KEY]["S"],
                            value=item.get("value", {}).get("S", ""),
                            backend=self,
                        )
                    )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "dynamodb_load_translations_failed",
                table_name=self.table_name,
                error=str(e),
            )
            return []

        logger.info(
            "loaded_dynamodb_translations",
            table_name=self.table_name,
            count=len(translations),
        )
        return translations

    def save_translation(self, translation: Translation) -> OperationResult:
        item = self._item_key(translation)
        item["value"] = {"S": translation.value}
        item["updated_at"] = {"N": str(int(time.time()))}
        try:
            self._client.put_item(TableName=self.table_name, Item=item)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "dynamodb_save_translation_failed",
                table_name=self.table_name,
                cache_key=translation.cache_key,
                error=str(e),
            )
            return _classify_error(e, "put_item")

        logger.debug("dynamodb_translation_saved", cache_key=translation.cache_key)
        return OperationResult.success(message="Translation saved")

    def delete_translation(self, translation: Translation) -> OperationResult:
        try:
            response = self._client.delete_item(
                TableName=self.table_name,
                Key=self._item_key(translation),
                ReturnValues="ALL_OLD",
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "dynamodb_delete_translation_failed",
                table_name=self.table_name,
                cache_key=translation.cache_key,
                error=str(e),
            )
            return _classify_error(e, "delete_item")

        if not response.get("Attributes"):
            return OperationResult.not_found(
                f"Translation not found: {translation.cache_key}"
            )
        return OperationResult.success(message="Translation deleted")
