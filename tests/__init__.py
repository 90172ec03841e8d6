"""The flatcss test suite."""
