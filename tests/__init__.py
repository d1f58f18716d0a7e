"""
Med Center Tests

Running Tests:
    # Run all tests with pytest
    pytest -v

    # Run unit tests only
    pytest tests/unit -v

    # Run specific test
    pytest tests/unit/test_ledger.py::TestBooking::test_sequential_ids -v

Test Coverage:
    - Slot generation
    - Doctor calendars and slot lookup
    - Appointment booking, lookups and completion
    - Arrival queue
    - Statistics
    - Engine facade and locking
    - HTTP API and error mapping
"""
