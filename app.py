"""Development entry point: ``python app.py`` (APP_ENV selects the settings module)."""

from src.attendance_tracker.attendance_tracker.main import run


if __name__ == "__main__":
    run()
