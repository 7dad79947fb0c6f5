"""
Harmony Hub E2E Test Suite

End-to-end browser tests using Playwright.

Structure:
    conftest.py       - Fixtures and configuration
    test_students.py  - Student management scenarios
    test_schedule.py  - Calendar and event scenarios

Page objects live in the harmony_e2e.pages package.

Running Tests:
    # Install dependencies
    pip install -e ".[test]"
    playwright install

    # Run all browser tests against a running app
    HARMONY_BASE_URL=http://localhost:8080 pytest tests/e2e/

    # Run with visible browser
    pytest tests/e2e/ --headed

    # Run specific browser
    pytest tests/e2e/ --browser firefox

    # Run smoke tests only
    pytest tests/e2e/ -m smoke
"""
