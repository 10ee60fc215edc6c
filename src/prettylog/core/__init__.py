"""Core domain: records, attribute rendering and the handler pipeline."""
