"""Test configuration and fixtures."""

import logfire

# Spans and logs stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)
