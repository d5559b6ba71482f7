"""Core building blocks shared by every layer (config, errors, logging, results)."""
