#!/usr/bin/env python3
"""
Smoke test for the configured object store.

Prerequisites:
    S3_BUCKET_NAME set (plus S3_ENDPOINT / credentials for a local MinIO)

Usage:
    python scripts/smoke_storage.py path/to/emoji.png

    # Store under a custom prefix:
    python scripts/smoke_storage.py path/to/emoji.png --prefix smoke/
"""

import argparse
import sys
import uuid
from pathlib import Path

from objstore.core.logging import setup_logging
from objstore.storage import StorageConfigError, StorageError, build_storage


def main() -> None:
    parser = argparse.ArgumentParser(description="Round-trip a file through the object store")
    parser.add_argument("file", type=Path, help="Local file to upload")
    parser.add_argument("--prefix", default="smoke/", help="Key prefix (default: smoke/)")
    args = parser.parse_args()

    setup_logging()

    try:
        storage = build_storage()
    except StorageConfigError as e:
        print(f"  Configuration error: {e}")
        sys.exit(2)

    key = f"{args.prefix}{uuid.uuid4().hex}_{args.file.name}"

    print(f"\n[1/4] Uploading {args.file} as {key}...")
    try:
        url = storage.put_file(args.file, key)
    except OSError as e:
        print(f"  Cannot read file: {e}")
        sys.exit(1)
    except StorageError as e:
        print(f"  Upload failed: {e}")
        sys.exit(1)
    print(f"  URL: {url}")

    try:
        print(f"\n[2/4] Listing {args.prefix}...")
        keys = storage.find_by_prefix(args.prefix)
        print(f"  {len(keys)} key(s); ours {'found' if key in keys else 'MISSING'}")

        print("\n[3/4] Head...")
        info = storage.head(key)
        print(f"  size={info.size} etag={info.etag} content_type={info.content_type}")

        print("\n[4/4] Reading back...")
        with storage.get(key) as obj:
            data = obj.read()
    except StorageError as e:
        print(f"  Error: {e}")
        sys.exit(1)

    expected = args.file.read_bytes()
    if data != expected:
        print(f"  Content mismatch: got {len(data)} bytes, expected {len(expected)}")
        sys.exit(1)
    print(f"  {len(data)} bytes match")

    print("\n" + "=" * 60)
    print("OBJECT STORE ROUND TRIP OK")
    print("=" * 60)
    sys.exit(0)


if __name__ == "__main__":
    main()
