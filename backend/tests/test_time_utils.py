from datetime import datetime

from study_scheduler.utils.time_utils import TimeFormat, format_session_window


def test_12hr_display():
    assert TimeFormat.to_12hr_display(datetime(2030, 1, 7, 15, 0)) == "3 PM"
    assert TimeFormat.to_12hr_display(datetime(2030, 1, 7, 15, 30)) == "3:30 PM"
    assert TimeFormat.to_12hr_display(datetime(2030, 1, 7, 0, 15)) == "12:15 AM"
    assert TimeFormat.to_12hr_display(datetime(2030, 1, 7, 12, 0)) == "12 PM"


def test_short_date():
    assert TimeFormat.to_short_date(datetime(2030, 1, 7, 9)) == "Mon, Jan 7"


def test_session_window_same_day():
    window = format_session_window(datetime(2030, 1, 7, 14), datetime(2030, 1, 7, 15, 30))
    assert window == "Mon, Jan 7 2 PM - 3:30 PM"


def test_session_window_past_midnight():
    window = format_session_window(datetime(2030, 1, 7, 23), datetime(2030, 1, 8, 0, 30))
    assert window == "Mon, Jan 7 11 PM - Tue, Jan 8 12:30 AM"
