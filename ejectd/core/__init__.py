"""Core building blocks: command execution, parsing, config, logging, ejection."""
