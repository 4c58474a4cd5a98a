"""Infrastructure layer — access to the operating system clock."""
