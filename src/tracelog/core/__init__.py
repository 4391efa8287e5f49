"""Core domain: models, ports and the Log and Trace facilities."""
