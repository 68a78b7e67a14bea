"""Event sources turning documents on disk into markup event streams."""
