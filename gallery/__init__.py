"""Gallery dashboard management backend."""
