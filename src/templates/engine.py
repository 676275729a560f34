from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Union

import uuid_utils as uuid

from src.templates.models import ComposeArgs, ComposeResult, FieldValues, TemplateId, ToneId
from src.templates.store import StaticTemplateStore, TemplateStore
from src.templates.tones import get_tone
from src.utils.config import Settings, load_settings
from src.utils.logging import ecid_var

_BULLET_MARKER = re.compile(r"^[-•]\s*")


def parse_key_points(raw: str) -> List[str]:
    """One key point per line; leading '-' or '•' markers and blank lines are dropped."""
    points = []
    for line in (raw or "").split("\n"):
        item = _BULLET_MARKER.sub("", line.strip()).strip()
        if item:
            points.append(item)
    return points


class EmailTemplateEngine:
    """
    Composes subject + body deterministically from a template, a tone and form fields.
    Holds no per-request state; the same input always yields the same output.
    """

    def __init__(
        self,
        template_store: Optional[TemplateStore] = None,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = template_store if template_store is not None else StaticTemplateStore()
        self.settings = settings or load_settings()
        self.logger = logger or logging.getLogger("EmailComposer.engine")

    def compose(
        self,
        fields: Union[FieldValues, Dict[str, Any]],
        template_id: Optional[Union[TemplateId, str]] = None,
        tone_id: Optional[Union[ToneId, str]] = None,
    ) -> ComposeResult:
        # Keep a caller's ecid; otherwise trace this request under a fresh one.
        token = ecid_var.set(uuid.uuid7().hex[:12]) if ecid_var.get() == "-" else None
        try:
            return self._compose(fields, template_id, tone_id)
        finally:
            if token is not None:
                ecid_var.reset(token)

    def _compose(
        self,
        fields: Union[FieldValues, Dict[str, Any]],
        template_id: Optional[Union[TemplateId, str]],
        tone_id: Optional[Union[ToneId, str]],
    ) -> ComposeResult:
        if not isinstance(fields, FieldValues):
            fields = FieldValues.model_validate(fields)

        if template_id is None:
            template_id = self.settings.default_template
        if tone_id is None:
            tone_id = self.settings.default_tone

        template = self.store.get_template(template_id)
        tone = get_tone(tone_id)
        key_points = parse_key_points(fields.key_points)

        args = ComposeArgs(**fields.model_dump(), tone=tone, key_points_list=key_points)

        generated_subject = template.subject(args)
        subject = fields.custom_subject.strip() or generated_subject.strip()
        body = template.body(args)

        self.logger.debug(
            f"[Engine] compose template={template.id.value!r} tone={tone.key.value!r} "
            f"key_points={len(key_points)} custom_subject={bool(fields.custom_subject.strip())} "
            f"subject_len={len(subject)} body_len={len(body)}"
        )

        return ComposeResult(subject=subject, body=body)


_default_engine: Optional[EmailTemplateEngine] = None


def compose(
    fields: Union[FieldValues, Dict[str, Any]],
    template_id: Optional[Union[TemplateId, str]] = None,
    tone_id: Optional[Union[ToneId, str]] = None,
) -> ComposeResult:
    """Composes with a shared engine over the built-in templates."""
    global _default_engine
    if _default_engine is None:
        _default_engine = EmailTemplateEngine()
    return _default_engine.compose(fields, template_id, tone_id)
