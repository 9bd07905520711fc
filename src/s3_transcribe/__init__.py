"""Event-driven speech-to-text job submission for S3 media uploads."""
