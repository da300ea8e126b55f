from datetime import datetime, timezone

from zen.schemas.focus_mode import FocusModeCreate, FocusModeResponse, FocusModeUpdate, validation_error

def test_valid_focus_mode():
    focus_mode = FocusModeCreate(name="Deep Work", tags=[{"id": 1, "name": "work"}])
    assert validation_error(focus_mode) is None


def test_empty_name_is_invalid():
    focus_mode = FocusModeCreate(name="", tags=[{"id": 1}])
    assert validation_error(focus_mode) == "Focus name is required"


def test_blank_name_is_invalid():
    focus_mode = FocusModeCreate(name="   ", tags=[{"id": 1}])
    assert validation_error(focus_mode) == "Focus name is required"


def test_no_tags_is_invalid():
    focus_mode = FocusModeCreate(name="Deep Work", tags=[])
    assert validation_error(focus_mode) == "At least one tag is required"


def test_name_is_checked_before_tags():
    assert validation_error(FocusModeCreate()) == "Focus name is required"


def test_update_reads_focus_id_alias():
    focus_mode = FocusModeUpdate.model_validate({"focusId": 4, "name": "Read", "tags": [{"id": 2}]})
    assert focus_mode.focus_id == 4
    assert validation_error(focus_mode) is None


def test_response_treats_naive_timestamps_as_utc():
    response = FocusModeResponse(focus_id=1, name="Deep Work", last_used_at=datetime(2024, 5, 1, 9, 30))
    assert response.last_used_at == datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
