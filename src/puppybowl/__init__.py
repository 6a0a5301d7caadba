"""Server-rendered roster manager for the Puppy Bowl players API."""

__version__ = "0.1.0"
