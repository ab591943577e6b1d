"""Application layer: services, data loading and the Gradio front-end."""
