"""Tests for :mod:`authgate`."""
