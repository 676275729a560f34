from src.templates.models import FieldValues

# Values the form is pre-filled with on first load.
SAMPLE_FIELDS = FieldValues(
    recipient="María",
    custom_subject="",
    topic="la propuesta de marketing digital",
    context=(
        "Te escribo para retomar la conversación que tuvimos esta semana "
        "sobre la propuesta de marketing digital"
    ),
    key_points="\n".join(
        [
            "Análisis de audiencia afinado con los nuevos datos",
            "Presupuesto ajustado a las observaciones del directorio",
            "Calendario de lanzamientos listo para revisión",
        ]
    ),
    action="¿Podrías confirmarme si seguimos adelante con el plan?",
    date="viernes 12 a las 12:00",
    closing_note="Así reservamos al equipo creativo sin demoras.",
    sender_name="Julián",
    sender_role="Gerente de proyectos",
    extra="",
)
