"""Core document model, file format and validation."""
