"""Orchestration layer between the maze models and their front ends."""
