"""Core retrieval logic: chunking, embedding, similarity ranking, answer generation."""
