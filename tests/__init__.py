"""
Harmony Hub E2E Suite Tests

Test categories:
- test_dates.py  - Calendar date/time helpers (no browser)
- test_models.py - Record validation and test data
- test_config.py - Environment / YAML settings
- test_pages.py  - Page-object contracts against mocked Playwright handles
- e2e/           - Browser scenarios against a running app
"""
