"""Process-wide defaults for emitters."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import ValidationError

from emitter.domain.models import EmitterSettings

logger = logging.getLogger(__name__)

DEFAULT_MAX_LISTENERS = 10
MAX_LISTENERS_ENV = "EMITTER_MAX_LISTENERS"


def load_settings(environ: Mapping[str, str] | None = None) -> EmitterSettings:
    """Build settings from the environment.

    ``EMITTER_MAX_LISTENERS`` overrides the default threshold. Invalid values
    raise ``pydantic.ValidationError``.
    """
    env = os.environ if environ is None else environ
    raw = env.get(MAX_LISTENERS_ENV, "").strip()
    return EmitterSettings(max_listeners=raw or DEFAULT_MAX_LISTENERS)


def default_max_listeners(environ: Mapping[str, str] | None = None) -> int:
    """Threshold new emitters start with; falls back to the default on a bad value."""
    try:
        return load_settings(environ).max_listeners
    except ValidationError:
        env = os.environ if environ is None else environ
        logger.warning(
            "Ignoring invalid %s=%r, using %d",
            MAX_LISTENERS_ENV,
            env.get(MAX_LISTENERS_ENV),
            DEFAULT_MAX_LISTENERS,
        )
        return DEFAULT_MAX_LISTENERS
