"""Front ends that read lines and show replies."""
