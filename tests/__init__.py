"""Test package for puppybowl."""
