"""Domain layer - transaction mode types and the BEGIN command builder."""
