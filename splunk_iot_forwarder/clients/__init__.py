# Copyright 2025 Loopper-AI
# Client modules for external services

from .hec_client import HecClient
from .secrets_client import SecretsClient

__all__ = ["HecClient", "SecretsClient"]
