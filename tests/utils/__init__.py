"""Shared fakes and helpers for the bridge tests."""
