from __future__ import annotations

import gzip
import os
from dataclasses import dataclass, field

from src.adapters.aws import s3_client
from src.adapters.persistence.border_codec import dumps_segments, loads_border
from src.app.ports.output import IBorderRepository
from src.domain.models import Geodesic, Segment


@dataclass(slots=True)
class S3BorderRepository(IBorderRepository):
    """Border repository backed by S3.

    Env vars:
      - BORDER_BUCKET: bucket name
      - BORDER_KEY: object key (default: borders/border.json); a ``.gz`` key is
        decompressed before decoding
      - ENDPOINT_URL: preferred LocalStack endpoint (e.g. http://localhost:4566)
      - USE_LOCALSTACK, LOCALSTACK_ENDPOINT_URL, AWS_REGION (legacy)
    """

    geodesic: Geodesic
    bucket: str | None = None
    key: str | None = None

    _segments: tuple[Segment, ...] | None = field(default=None, repr=False)

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("BORDER_BUCKET")
        if not value:
            raise RuntimeError("Missing BORDER_BUCKET")
        return value

    def _key(self) -> str:
        return (self.key or os.getenv("BORDER_KEY") or "borders/border.json").strip(
            "/"
        )

    def describe(self) -> str:
        return f"s3://{self._bucket()}/{self._key()}"

    def load_segments(self) -> tuple[Segment, ...]:
        if self._segments is not None:
            return self._segments

        key = self._key()
        obj = s3_client().get_object(Bucket=self._bucket(), Key=key)
        body = obj["Body"].read()
        if key.endswith(".gz"):
            body = gzip.decompress(body)

        self._segments = loads_border(body, self.geodesic)
        return self._segments

    def save_segments(self, segments: tuple[Segment, ...]) -> None:
        body = dumps_segments(segments, indent=None).encode("utf-8")
        key = self._key()
        if key.endswith(".gz"):
            body = gzip.compress(body)
        s3_client().put_object(Bucket=self._bucket(), Key=key, Body=body)
        self._segments = tuple(segments)
