"""Utility helpers for courier."""
