"""Click plumbing for the dclock command: base class and shared context."""
