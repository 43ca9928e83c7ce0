"""Application composition: builds adapters and use cases from settings."""
