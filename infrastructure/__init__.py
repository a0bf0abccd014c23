"""
Infrastructure Package
======================

Abstractions over external dependencies.

Modules:
    - storage: Object storage abstraction (S3/MinIO, in-memory)
    - container: Service locator for infrastructure and domain services
"""
