"""User interfaces for ytdtd."""
