from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from src.templates.errors import UnknownTemplateError, UnknownToneError
from src.templates.models import TemplateId, ToneId


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    default_template: TemplateId = TemplateId.FOLLOW_UP
    default_tone: ToneId = ToneId.PROFESSIONAL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Reads EMAIL_COMPOSER_* variables from the environment.
    Unset or blank variables keep their defaults.
    """
    env = os.environ if environ is None else environ

    level_name = (env.get("EMAIL_COMPOSER_LOG_LEVEL") or "INFO").strip().upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise ValueError(f"Invalid EMAIL_COMPOSER_LOG_LEVEL: {level_name!r}")

    template_raw = (env.get("EMAIL_COMPOSER_DEFAULT_TEMPLATE") or "").strip() or TemplateId.FOLLOW_UP.value
    tone_raw = (env.get("EMAIL_COMPOSER_DEFAULT_TONE") or "").strip() or ToneId.PROFESSIONAL.value

    try:
        default_template = TemplateId(template_raw)
    except ValueError:
        raise UnknownTemplateError(template_raw) from None
    try:
        default_tone = ToneId(tone_raw)
    except ValueError:
        raise UnknownToneError(tone_raw) from None

    return Settings(log_level=log_level, default_template=default_template, default_tone=default_tone)
