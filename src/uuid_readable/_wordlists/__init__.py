"""Static word lists backing the word categories."""
