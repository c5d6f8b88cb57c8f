"""Output formatters for the param-decode command."""
