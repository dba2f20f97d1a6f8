"""Sending uploaded documents to a company contact."""
