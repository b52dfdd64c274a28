"""Browser tests that render local markup and need no network."""
