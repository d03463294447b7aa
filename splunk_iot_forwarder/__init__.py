# Copyright 2025 Loopper-AI
# Lambda: AWS IoT rule action → Splunk HTTP Event Collector

from .handler import forward, lambda_handler
from .models import ForwardError, ForwardResult

__all__ = ["forward", "lambda_handler", "ForwardError", "ForwardResult"]
