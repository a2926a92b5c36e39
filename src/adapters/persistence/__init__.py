from .local_border_repository import LocalBorderRepository
from .s3_border_repository import S3BorderRepository

__all__ = [
    "LocalBorderRepository",
    "S3BorderRepository",
]
