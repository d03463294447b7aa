# Copyright 2025 Loopper-AI
# Utility modules

from .event_utils import REQUEST_ID_FIELD, build_record, with_request_id

__all__ = ["REQUEST_ID_FIELD", "build_record", "with_request_id"]
