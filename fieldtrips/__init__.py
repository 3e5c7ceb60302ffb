"""Field trip attendance tracker: roster search + per-student trip progress."""
