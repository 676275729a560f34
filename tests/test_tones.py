import pytest

from src.templates.errors import UnknownToneError
from src.templates.models import ToneId
from src.templates.tones import TONES, get_tone, list_tones


def test_registry_covers_every_tone_id():
    assert set(TONES) == set(ToneId)
    for tone_id, tone in TONES.items():
        assert tone.key == tone_id


def test_get_tone_accepts_enum_and_string():
    assert get_tone(ToneId.WARM) is get_tone("warm")
    assert get_tone("professional").greeting == "Estimado/a"


def test_list_tones_keeps_declaration_order():
    assert [t.key for t in list_tones()] == [ToneId.PROFESSIONAL, ToneId.WARM, ToneId.ENTHUSIASTIC]


def test_unknown_tone_raises_key_error():
    with pytest.raises(UnknownToneError):
        get_tone("sarcastic")

    with pytest.raises(KeyError):
        get_tone("")


def test_tone_is_immutable():
    tone = get_tone("enthusiastic")
    with pytest.raises(Exception):
        tone.greeting = "Hey"
