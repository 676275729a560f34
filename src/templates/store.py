from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol, Union

from src.templates.errors import UnknownTemplateError
from src.templates.fixtures.templates import TEMPLATES
from src.templates.models import EmailTemplate, TemplateId


class TemplateStore(Protocol):
    """Lookup abstraction for templates."""

    def get_template(self, template_id: Union[TemplateId, str]) -> EmailTemplate:
        """
        Returns the template registered under template_id.
        Raises UnknownTemplateError for ids outside the supported set.
        """
        ...

    def list_templates(self) -> List[EmailTemplate]:
        ...


class StaticTemplateStore:
    """
    In-memory store over a fixed set of templates.
    Built once; lookups never mutate it.
    """

    def __init__(self, templates: Optional[Iterable[EmailTemplate]] = None):
        if templates is None:
            templates = TEMPLATES
        self._templates: Dict[TemplateId, EmailTemplate] = {tpl.id: tpl for tpl in templates}

    def get_template(self, template_id: Union[TemplateId, str]) -> EmailTemplate:
        try:
            key = TemplateId(template_id)
        except ValueError:
            raise UnknownTemplateError(template_id) from None
        tpl = self._templates.get(key)
        if tpl is None:
            raise UnknownTemplateError(template_id)
        return tpl

    def list_templates(self) -> List[EmailTemplate]:
        return list(self._templates.values())
