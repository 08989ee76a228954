"""Answer generation services: matching, synthesis, attribution and chat routing."""
