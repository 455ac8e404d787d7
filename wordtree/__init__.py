"""wordtree: learning-platform backend built around a shareable content tree."""
