"""Heuristic grading of student text submissions."""
