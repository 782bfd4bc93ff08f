"""Utility helpers for keyedcache."""
