"""Static admissions content: knowledge catalog, FAQ pairs and answer templates."""
