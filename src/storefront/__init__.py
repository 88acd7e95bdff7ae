"""Order-processing core of a small online store."""
