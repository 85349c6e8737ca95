"""Configuration, logging, security and storage shared by every service."""
