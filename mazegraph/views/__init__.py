"""Gradio front end for the maze graph pipeline."""
