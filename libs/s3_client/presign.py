# libs/s3_client/presign.py

from django.conf import settings

from .client import get_bucket, get_s3_client

# ---------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------

PRESIGN_UPLOAD_EXPIRES = 900        # 15 min

# ---------------------------------------------------------------------
# Presigned URLs
# ---------------------------------------------------------------------

def create_presigned_put_url(
    key: str,
    expires_in: int = None,
) -> str:
    """
    Generate presigned PUT url (upload)
    """
    if expires_in is None:
        expires_in = getattr(settings, "OBJECT_PRESIGN_UPLOAD_EXPIRES", PRESIGN_UPLOAD_EXPIRES)

    return get_s3_client().generate_presigned_url(
        ClientMethod="put_object",
        Params={
            "Bucket": get_bucket(),
            "Key": key,
        },
        ExpiresIn=expires_in,
    )
