"""Jobly companies API."""
