"""Utilities for kvcache."""
