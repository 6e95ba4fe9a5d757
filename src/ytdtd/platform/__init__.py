"""Platform adapters: logging, filesystem, external processes and audio probing."""
