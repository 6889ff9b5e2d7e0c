"""Configuration, logging, persistence and error primitives."""
