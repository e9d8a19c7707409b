# coding: utf-8
"""Shared helpers for the toysat test suites."""
from unittest import TestCase, main

__all__ = ["TestCase", "main"]
