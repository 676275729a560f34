from src.templates.text import build_signature, ensure_sentence, format_bullets, join_sentences


def test_ensure_sentence_appends_period():
    assert ensure_sentence("hola", "x") == "hola."


def test_ensure_sentence_keeps_existing_punctuation():
    assert ensure_sentence("hola.", "x") == "hola."
    assert ensure_sentence("¿Vamos?") == "¿Vamos?"
    assert ensure_sentence("¡Genial!") == "¡Genial!"


def test_ensure_sentence_trims_before_checking():
    assert ensure_sentence("  hola  ") == "hola."
    assert ensure_sentence("listo!   ") == "listo!"


def test_ensure_sentence_uses_fallback_when_blank():
    assert ensure_sentence("", "adiós") == "adiós."
    assert ensure_sentence("   ", " adiós. ") == "adiós."


def test_ensure_sentence_empty_everything():
    assert ensure_sentence("", "") == ""
    assert ensure_sentence("") == ""
    assert ensure_sentence(None, None) == ""


def test_format_bullets():
    assert format_bullets(["a", "b"]) == "• a\n• b"
    assert format_bullets([]) == ""


def test_join_sentences_skips_empty_parts():
    assert join_sentences("Uno.", "", "Dos.") == "Uno. Dos."
    assert join_sentences("", None) == ""


def test_build_signature_with_role():
    assert build_signature(" Julián ", " Gerente ", "Saludos cordiales") == "Saludos cordiales,\nJulián\nGerente"


def test_build_signature_placeholder_and_no_role():
    assert build_signature("", "   ", "Un abrazo") == "Un abrazo,\nTu nombre"
