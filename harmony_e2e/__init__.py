"""
K12 Harmony Hub E2E Suite

Page objects, date helpers and static test data for browser tests of the
Harmony Hub student and schedule screens.

Structure:
    config.py   - Environment / YAML settings
    dates.py    - Calendar-matching date and time strings
    errors.py   - Named failure conditions
    models.py   - Student and event records
    data.py     - Static test data
    pages/      - Page Object Models

Running Tests:
    pip install -e ".[test]"
    playwright install chromium

    # Unit tests only (no browser, no app)
    pytest -m "not e2e"

    # Full suite against a running app
    HARMONY_BASE_URL=http://localhost:8080 pytest

    # Visible browser / other engines
    pytest tests/e2e/ --headed --browser firefox
"""

__version__ = "1.0.0"
