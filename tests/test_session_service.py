import pytest

from brailleease.config import SessionConfig
from brailleease.models.direction import Direction
from brailleease.services.braille_service import BrailleService
from brailleease.services.session_service import (
    ImageTooLargeError,
    InvalidImageError,
    InvalidKeyError,
    SessionService,
)


def test_starts_in_configured_direction(ledger):
    service = SessionService(SessionConfig(default_direction=Direction.BRAILLE_TO_SPANISH), BrailleService(), ledger)
    assert service.get_state().direction is Direction.BRAILLE_TO_SPANISH


def test_translate_sets_output_and_records(session_service, ledger):
    session_service.set_input("Hola Mundo")
    record = session_service.translate()

    state = session_service.get_state()
    assert state.output_text == "⠓⠕⠇⠁⠀⠍⠥⠝⠙⠕"
    assert state.input_text == "Hola Mundo"
    assert ledger.records == (record,)


def test_keypad_editing(session_service):
    for key in "sol":
        session_service.press_key(key)
    session_service.backspace()
    assert session_service.get_state().input_text == "so"

    session_service.backspace()
    session_service.backspace()
    session_service.backspace()
    assert session_service.get_state().input_text == ""


def test_press_key_rejects_keys_of_other_keypad(session_service):
    with pytest.raises(InvalidKeyError):
        session_service.press_key("⠁")
    with pytest.raises(InvalidKeyError):
        session_service.press_key("A")


def test_toggle_clears_text_but_keeps_history(session_service, ledger):
    session_service.set_input("casa")
    session_service.translate()

    result = session_service.toggle_direction()

    state = session_service.get_state()
    assert result.new_direction is Direction.BRAILLE_TO_SPANISH
    assert state.direction is Direction.BRAILLE_TO_SPANISH
    assert state.input_text == ""
    assert state.output_text == ""
    assert len(ledger) == 1


def test_braille_keypad_after_toggle(session_service):
    session_service.toggle_direction()
    for key in "⠉⠁⠎⠁":
        session_service.press_key(key)
    record = session_service.translate()
    assert record.output_text == "casa"
    assert record.direction is Direction.BRAILLE_TO_SPANISH


def test_translate_text_leaves_session_alone(session_service, ledger):
    session_service.set_input("sol")
    output, record = session_service.translate_text("hi!", Direction.SPANISH_TO_BRAILLE)
    assert output == "⠓⠊!"
    assert record is not None
    assert session_service.get_state().input_text == "sol"

    output, record = session_service.translate_text("⠓⠊", Direction.BRAILLE_TO_SPANISH, record=False)
    assert output == "hi"
    assert record is None
    assert len(ledger) == 1


def test_attach_image_as_data_url(session_service):
    session_service.attach_image(b"\x89PNG", "image/png")
    assert session_service.session.image == "data:image/png;base64,iVBORw=="
    assert session_service.get_state().has_image

    session_service.clear_image()
    assert session_service.session.image is None


@pytest.mark.parametrize(("data", "media_type"), [(b"%PDF", "application/pdf"), (b"x", None), (b"", "image/png")])
def test_attach_image_rejects_non_images(session_service, data, media_type):
    with pytest.raises(InvalidImageError):
        session_service.attach_image(data, media_type)


def test_attach_image_rejects_large_images(ledger):
    service = SessionService(SessionConfig(image_max_bytes=4), BrailleService(), ledger)
    with pytest.raises(ImageTooLargeError):
        service.attach_image(b"12345", "image/jpeg")
