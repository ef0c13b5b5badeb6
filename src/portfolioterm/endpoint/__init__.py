"""HTTP endpoint module for portfolioterm.

Hosts independent interpreter sessions behind a small HTTP API and
renders transcripts as plain text for display.
"""
