"""Reference tree-walking evaluator for a small Lox subset."""
