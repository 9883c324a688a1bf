"""Application layer – use-case facades over the kernel."""
