"""Fit parser for backend controller - turns decoded JSON into record models."""

from __future__ import annotations

import logging
from typing import Any

from fitview.models.fits.model_fit import ModelFitRecord
from fitview.models.system.system_info import SystemInfoRecord

logger = logging.getLogger(__name__)


class FitParser:
    """Parses backend payloads into ``ModelFitRecord`` and ``SystemInfoRecord``."""

    # Envelope keys the backend may wrap its payloads in.
    _MODELS_KEYS = ("models", "fits")
    _SYSTEM_KEYS = ("system", "specs")

    def parse_system_info(self, payload: Any) -> SystemInfoRecord:
        """Parse a system-info payload.

        Accepts the bare object or an envelope carrying it under ``system``
        or ``specs``.

        Raises:
            ValueError: The payload is not an object or fails validation.
        """
        if isinstance(payload, dict):
            for key in self._SYSTEM_KEYS:
                inner = payload.get(key)
                if isinstance(inner, dict):
                    payload = inner
                    break
        if not isinstance(payload, dict):
            raise ValueError(f"expected a system info object, got {type(payload).__name__}")
        return SystemInfoRecord.model_validate(payload)

    def parse_model_fits(self, payload: Any) -> list[ModelFitRecord]:
        """Parse a model-fit list payload.

        Accepts a bare list or an envelope carrying it under ``models`` or
        ``fits``. Records repeating an earlier ``name`` are dropped so the
        name stays a unique key.

        Raises:
            ValueError: The payload is not a list or a record fails validation.
        """
        if isinstance(payload, dict):
            for key in self._MODELS_KEYS:
                inner = payload.get(key)
                if isinstance(inner, list):
                    payload = inner
                    break
        if not isinstance(payload, list):
            raise ValueError(f"expected a list of model fits, got {type(payload).__name__}")

        records: list[ModelFitRecord] = []
        seen: set[str] = set()
        for item in payload:
            record = ModelFitRecord.model_validate(item)
            if record.name in seen:
                logger.warning("Dropping duplicate model fit record %r", record.name)
                continue
            seen.add(record.name)
            records.append(record)
        return records
