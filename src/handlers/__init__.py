"""Lambda-style HTTP handlers for the admissions chat widget."""
