"""Configuration, logging, errors and event primitives."""
