"""Convert a GeoJSON border into the segment JSON served by the API.

Every ring of every feature (polygon holes included) is flattened into one
list of ``{start, end, distance}`` objects; feature boundaries are dropped.

    python -m src.preprocess border.geojson -o data/border.json
    cat border.geojson | python -m src.preprocess --bucket my-bucket
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from src.adapters.geodesic import PyprojGeodesic
from src.adapters.persistence import S3BorderRepository
from src.adapters.persistence.border_codec import dumps_segments, segments_from_geojson
from src.domain.exceptions import BorderGeometryError

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Convert a GeoJSON border into segment JSON."
    )
    ap.add_argument("input", nargs="?", help="GeoJSON file (default: stdin)")
    ap.add_argument("-o", "--output", help="segment JSON file (default: stdout)")
    ap.add_argument("--bucket", help="also upload the segments to this S3 bucket")
    ap.add_argument("--key", default=None, help="S3 object key (with --bucket)")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
    )
    args = _parse_args(argv)

    raw = Path(args.input).read_text("utf-8") if args.input else sys.stdin.read()
    try:
        doc = json.loads(raw)
    except json.JSONDecodeError as exc:
        print(f"Could not parse GeoJSON input: {exc}", file=sys.stderr)
        return 1
    if not isinstance(doc, dict):
        print("GeoJSON input must be a JSON object", file=sys.stderr)
        return 1

    geodesic = PyprojGeodesic()
    try:
        segments = segments_from_geojson(doc, geodesic)
    except BorderGeometryError as exc:
        print(f"Invalid border geometry: {exc}", file=sys.stderr)
        return 1

    payload = dumps_segments(segments)
    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
    else:
        sys.stdout.write(payload + "\n")

    if args.bucket:
        repo = S3BorderRepository(geodesic=geodesic, bucket=args.bucket, key=args.key)
        repo.save_segments(segments)
        logger.info("Uploaded border to %s", repo.describe())

    logger.info("Wrote %d segments", len(segments))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
