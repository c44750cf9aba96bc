"""Host adapters for the Markdown engine."""
