from __future__ import annotations

from typing import List

from src.templates.models import ComposeArgs, EmailTemplate, TemplateId, ToneId
from src.templates.text import build_signature, ensure_sentence, format_bullets, join_sentences


# ---- shared paragraph builders ----

def _greeting(args: ComposeArgs, default_recipient: str, exclaim: bool = False) -> str:
    opener = f"{args.tone.greeting}!" if exclaim else args.tone.greeting
    return f"{opener} {args.recipient.strip() or default_recipient},"


def _block(heading: str, items: List[str]) -> str:
    if not items:
        return ""
    return f"{heading}\n{format_bullets(items)}"


def _closing(args: ComposeArgs) -> str:
    return ensure_sentence(join_sentences(args.tone.closing, args.closing_note.strip()), args.tone.closing)


def _signature(args: ComposeArgs) -> str:
    return build_signature(args.sender_name, args.sender_role, args.tone.signature)


def _assemble(paragraphs: List[str]) -> str:
    return "\n\n".join(p for p in paragraphs if p)


# ---- follow-up ----

def follow_up_subject(args: ComposeArgs) -> str:
    topic = args.topic.strip()
    recipient = args.recipient.strip()
    base = f"Seguimiento sobre {topic}" if topic else "Seguimiento de nuestra conversación"
    return f"{base} — {recipient}" if recipient else base


def follow_up_body(args: ComposeArgs) -> str:
    date = args.date.strip()
    return _assemble(
        [
            _greeting(args, "equipo"),
            join_sentences(ensure_sentence(args.context, args.tone.connector), ensure_sentence(args.extra)),
            _block(args.tone.highlight_heading, args.key_points_list),
            join_sentences(
                ensure_sentence(args.action),
                ensure_sentence(f"Idealmente antes de {date}" if date else ""),
            ),
            _closing(args),
            _signature(args),
        ]
    )


# ---- welcome ----

def welcome_subject(args: ComposeArgs) -> str:
    topic = args.topic.strip()
    recipient = args.recipient.strip()
    base = f"Bienvenido/a a {topic}" if topic else "Bienvenido/a a bordo"
    return f"{base}, {recipient}!" if recipient else f"{base}!"


def welcome_body(args: ComposeArgs) -> str:
    date = args.date.strip()
    # Only the enthusiastic greeting gets an exclamation mark here.
    exclaim = args.tone.key == ToneId.ENTHUSIASTIC
    return _assemble(
        [
            _greeting(args, "nuevo integrante", exclaim=exclaim),
            ensure_sentence(args.context, "Nos alegra mucho contar con vos en esta etapa"),
            _block("Recursos iniciales:", args.key_points_list),
            join_sentences(
                ensure_sentence(args.action, "Tu primer paso será revisar el material de bienvenida"),
                ensure_sentence(f"Tenemos agendada una instancia el {date}" if date else ""),
            ),
            ensure_sentence(args.extra, "Si necesitás algo, esta es tu vía directa conmigo"),
            _closing(args),
            _signature(args),
        ]
    )


# ---- reminder ----

def reminder_subject(args: ComposeArgs) -> str:
    topic = args.topic.strip()
    date = args.date.strip()
    base = f"Recordatorio: {topic}" if topic else "Recordatorio de nuestra próxima reunión"
    return f"{base} — {date}" if date else base


def reminder_body(args: ComposeArgs) -> str:
    date = args.date.strip()
    return _assemble(
        [
            _greeting(args, "equipo"),
            ensure_sentence(args.context, "Te escribo para asegurarnos de que tenemos todo listo"),
            join_sentences(
                ensure_sentence(f"Nos encontramos el {date}" if date else ""),
                ensure_sentence(args.extra, "Podés acceder con el enlace habitual"),
            ),
            _block("Agenda propuesta:", args.key_points_list),
            ensure_sentence(args.action, "Avisame si necesitás ajustar algo antes"),
            _closing(args),
            _signature(args),
        ]
    )


TEMPLATES = [
    EmailTemplate(
        id=TemplateId.FOLLOW_UP,
        title="Seguimiento",
        badge="Negocios",
        description="Refuerza el interés, aporta valor y pedí una respuesta concreta.",
        subject=follow_up_subject,
        body=follow_up_body,
    ),
    EmailTemplate(
        id=TemplateId.WELCOME,
        title="Bienvenida",
        badge="Onboarding",
        description="Dale la bienvenida a nuevas personas con claridad y calidez.",
        subject=welcome_subject,
        body=welcome_body,
    ),
    EmailTemplate(
        id=TemplateId.REMINDER,
        title="Recordatorio",
        badge="Agenda",
        description="Recordá reuniones o fechas clave con tacto y claridad de acción.",
        subject=reminder_subject,
        body=reminder_body,
    ),
]
