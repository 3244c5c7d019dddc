"""Global test fixtures."""

import logfire

# Commands emit logfire spans; keep them local and quiet under test
logfire.configure(send_to_logfire=False, console=False)
