"""Pydantic schemas for password policies and reports."""
