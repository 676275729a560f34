from __future__ import annotations

from typing import Dict, List, Union

from src.templates.errors import UnknownToneError
from src.templates.models import Tone, ToneId

TONES: Dict[ToneId, Tone] = {
    ToneId.PROFESSIONAL: Tone(
        key=ToneId.PROFESSIONAL,
        label="Profesional",
        description="Formal, directo y con foco en resultados.",
        greeting="Estimado/a",
        connector="Espero que este mensaje te encuentre bien",
        closing="Quedo atento a tus comentarios",
        signature="Saludos cordiales",
        highlight_heading="Resumen de puntos clave:",
    ),
    ToneId.WARM: Tone(
        key=ToneId.WARM,
        label="Cercano",
        description="Amable, colaborativo y humano.",
        greeting="Hola",
        connector="Espero que estés teniendo una gran semana",
        closing="Seguimos en contacto",
        signature="Un abrazo",
        highlight_heading="Lo más importante:",
    ),
    ToneId.ENTHUSIASTIC: Tone(
        key=ToneId.ENTHUSIASTIC,
        label="Entusiasta",
        description="Energético, motivador y positivo.",
        greeting="¡Hola",
        connector="Me entusiasma contarte las novedades",
        closing="Me encantaría saber qué te parece",
        signature="¡Vamos con todo!",
        highlight_heading="Highlights para celebrar:",
    ),
}


def get_tone(tone_id: Union[ToneId, str]) -> Tone:
    try:
        return TONES[ToneId(tone_id)]
    except ValueError:
        raise UnknownToneError(tone_id) from None


def list_tones() -> List[Tone]:
    return list(TONES.values())
