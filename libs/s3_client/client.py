# libs/s3_client/client.py

from typing import Iterator, Optional, Tuple

from django.conf import settings
import boto3
from botocore.client import Config
from botocore.exceptions import ClientError

# ---------------------------------------------------------------------
# S3 Client (Cloudflare R2)
# ---------------------------------------------------------------------

_s3 = None

_NOT_FOUND_CODES = ("404", "NoSuchKey", "NotFound")


def get_s3_client():
    """
    프로세스당 1개. settings 로딩 이후 최초 호출 시 생성.
    """
    global _s3
    if _s3 is None:
        _s3 = boto3.client(
            "s3",
            region_name="auto",
            endpoint_url=settings.R2_ENDPOINT,
            aws_access_key_id=settings.R2_ACCESS_KEY,
            aws_secret_access_key=settings.R2_SECRET_KEY,
            config=Config(
                signature_version="s3v4",
                s3={"addressing_style": "path"},
                retries={"max_attempts": 1, "mode": "standard"},
            ),
        )
    return _s3


def get_bucket() -> str:
    bucket = getattr(settings, "R2_BUCKET", None)
    if not bucket:
        raise RuntimeError("R2_BUCKET is not set in Django settings")
    return bucket


def _is_not_found(e: ClientError) -> bool:
    code = (e.response.get("Error") or {}).get("Code")
    return code in _NOT_FOUND_CODES

# ---------------------------------------------------------------------
# API
# ---------------------------------------------------------------------

def head_object(key: str) -> Tuple[bool, int]:
    """
    Check object exists + size (bytes)
    """
    try:
        resp = get_s3_client().head_object(
            Bucket=get_bucket(),
            Key=key,
        )
        return True, int(resp.get("ContentLength") or 0)

    except ClientError as e:
        if _is_not_found(e):
            return False, 0
        raise


def put_object(key: str, data: bytes, content_type: str) -> None:
    get_s3_client().put_object(
        Bucket=get_bucket(),
        Key=key,
        Body=data,
        ContentType=content_type,
    )


def get_object(key: str, chunk_size: int = 64 * 1024) -> Optional[Tuple[Iterator[bytes], str, Optional[int]]]:
    """
    (chunk iterator, content_type, content_length) 또는 없으면 None
    """
    try:
        resp = get_s3_client().get_object(
            Bucket=get_bucket(),
            Key=key,
        )
    except ClientError as e:
        if _is_not_found(e):
            return None
        raise

    length = resp.get("ContentLength")
    return (
        resp["Body"].iter_chunks(chunk_size=chunk_size),
        resp.get("ContentType") or "application/octet-stream",
        int(length) if length is not None else None,
    )


def delete_object(key: str) -> None:
    get_s3_client().delete_object(
        Bucket=get_bucket(),
        Key=key,
    )


def list_keys(prefix: str = "") -> list[str]:
    paginator = get_s3_client().get_paginator("list_objects_v2")
    keys: list[str] = []
    for page in paginator.paginate(Bucket=get_bucket(), Prefix=prefix):
        keys.extend(obj["Key"] for obj in page.get("Contents", []))
    return keys
