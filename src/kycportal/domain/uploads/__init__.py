"""Uploaded KYC files and their storage objects."""
