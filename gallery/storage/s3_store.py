import logging
from typing import Any

import boto3
from botocore import UNSIGNED
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from gallery.config import GallerySettings

from .object_store import ObjectStore, StoreUnavailableError

logger = logging.getLogger(__name__)

BOTO_CONFIG = Config(
    retries={"max_attempts": 3, "mode": "standard"},
    connect_timeout=10,
    read_timeout=10,
)


def _url_client(settings: GallerySettings) -> Any:
    # Unsigned, so object URLs carry no query string and need no network call
    addressing = {"addressing_style": "path"} if settings.endpoint_url else None
    return boto3.client(
        "s3",
        region_name=settings.region,
        endpoint_url=settings.endpoint_url,
        config=Config(signature_version=UNSIGNED, s3=addressing),
    )


class S3ObjectStore(ObjectStore):
    """
    Object store backed by S3 (or an S3-compatible provider) through boto3.
    Only the first page of each ListObjectsV2 call is used.
    """

    def __init__(self, settings: GallerySettings, client: Any = None) -> None:
        self.settings = settings
        self.bucket = settings.bucket
        if client is None:
            client = boto3.client(
                "s3",
                aws_access_key_id=settings.access_key,
                aws_secret_access_key=settings.secret_key,
                region_name=settings.region,
                endpoint_url=settings.endpoint_url,
                config=BOTO_CONFIG,
            )
        self.client = client
        self.url_client = _url_client(settings)

    def _list_page(self, **params: Any) -> dict[str, Any]:
        try:
            page = self.client.list_objects_v2(Bucket=self.bucket, **params)
        except (ClientError, BotoCoreError) as exc:
            error_message = f"S3 listing failed for {params.get('Prefix', '')!r}: {exc}"
            raise StoreUnavailableError(error_message) from exc
        if page.get("IsTruncated"):
            # Pagination is not followed; anything past this page is dropped.
            logger.warning(
                "Listing of s3://%s/%s is truncated; only the first page is used",
                self.bucket,
                params.get("Prefix", ""),
            )
        return page

    def list_common_prefixes(self, root_prefix: str, delimiter: str = "/") -> list[str]:
        page = self._list_page(Prefix=root_prefix, Delimiter=delimiter)
        return [cp["Prefix"] for cp in page.get("CommonPrefixes", [])]

    def list_objects(self, prefix: str, max_keys: int | None = None) -> list[str]:
        params: dict[str, Any] = {"Prefix": prefix}
        if max_keys is not None:
            params["MaxKeys"] = max_keys
        page = self._list_page(**params)
        return [obj["Key"] for obj in page.get("Contents", [])]

    def public_url(self, key: str) -> str:
        return self.url_client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": key},
        )
