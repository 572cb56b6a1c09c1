"""Request builders and response models for a cloud provider's v2 REST API."""

__version__ = "0.1.0"