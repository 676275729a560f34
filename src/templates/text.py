from __future__ import annotations

from typing import Iterable, Optional

TERMINAL_PUNCTUATION = (".", "!", "?", "¡", "¿")
BULLET = "•"
PLACEHOLDER_SENDER = "Tu nombre"


def _close(text: str) -> str:
    return text if text.endswith(TERMINAL_PUNCTUATION) else f"{text}."


def ensure_sentence(value: Optional[str], fallback: Optional[str] = None) -> str:
    """
    Returns value as a closed sentence, or the fallback when value is blank.
    Text that already ends in terminal punctuation is left untouched.
    """
    trimmed = (value or "").strip()
    if trimmed:
        return _close(trimmed)
    fallback_trimmed = (fallback or "").strip()
    if fallback_trimmed:
        return _close(fallback_trimmed)
    return ""


def format_bullets(items: Iterable[str]) -> str:
    return "\n".join(f"{BULLET} {item}" for item in items)


def join_sentences(*parts: Optional[str]) -> str:
    return " ".join(p for p in parts if p)


def build_signature(sender_name: str, role: str, signature_closing: str) -> str:
    lines = [f"{signature_closing},", (sender_name or "").strip() or PLACEHOLDER_SENDER]
    role = (role or "").strip()
    if role:
        lines.append(role)
    return "\n".join(lines)
