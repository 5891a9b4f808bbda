"""Core infrastructure: exceptions, XDG paths, and theming."""
