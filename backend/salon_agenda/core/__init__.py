"""Pure scheduling rules: no database, no HTTP."""
