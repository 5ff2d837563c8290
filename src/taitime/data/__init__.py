"""Package data shipped with taitime."""
