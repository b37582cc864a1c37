"""Configuration, data loading and helper scripts for the composite walkthrough."""
