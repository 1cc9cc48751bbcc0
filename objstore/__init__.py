"""Object storage accessor for S3-compatible services."""
