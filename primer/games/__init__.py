"""Small console games built from the primer's language features."""
