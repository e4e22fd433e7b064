"""Pure parsing, assembly and encoding logic."""
