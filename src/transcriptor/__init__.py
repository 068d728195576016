"""Transcriptor: view and download YouTube caption transcripts over HTTP."""

__version__ = "0.1.0"
